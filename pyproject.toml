[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "memory-puzzle"
version = "1.0.0"
description = "A terminal memory card-matching game with fruit cards, save/resume and a high-score table"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "memory", "puzzle", "terminal", "cards", "concentration"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
memory-puzzle = "memory_puzzle.game:main"

[tool.hatch.build.targets.wheel]
packages = ["memory_puzzle"]

[tool.pytest.ini_options]
addopts = "-ra"
