"""Board display, saved games, player input and shuffling."""

from __future__ import annotations

import enum
import os
import random
import re
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path

from memory_puzzle.fruits import FRUIT_NAMES, colorize, max_name_length

SAVE_PATH = "game_save.txt"

SELECTION_PROMPT = (
    "Enter row and col (e.g. \"1 2\"), 'q' to quit, or 's' to save and quit: "
)

DIFFICULTY_MENU = (
    "Choose difficulty level:\n"
    "  E - Easy (4x2, 4 pairs)\n"
    "  M - Medium (4x4, 8 pairs)\n"
    "  H - Hard (6x4, 12 pairs)\n"
    "  C - Customize\n"
)

_LEVELS = {"E": (4, 2), "M": (4, 4), "H": (6, 4)}

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class Command(enum.Enum):
    """A selection that is not a card."""

    QUIT = "q"
    SAVE = "s"


@dataclass
class GameState:
    """Everything needed to resume a game."""

    board: list[list[str]]
    revealed: list[list[bool]]
    deck: list[str]
    fruit_pool: list[str]
    pairs_found: int = 0
    total_pairs: int = 0
    elapsed_time: float = 0.0
    first_flipped: tuple[int, int] | None = None

    @property
    def rows(self):
        return len(self.board)

    @property
    def cols(self):
        return len(self.board[0]) if self.board else 0


def clear_screen():
    """Clear the terminal."""
    try:
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        pass


def _centre(display, content, width):
    padding = max(0, (width - len(content)) // 2)
    trailing = max(0, width - padding - len(content))
    return " " * padding + display + " " * trailing


def render_board(board, revealed):
    """Return the board as text, showing revealed fruits in colour and others as '*'."""
    block = max_name_length(FRUIT_NAMES) + 4
    cols = len(board[0]) if board else 0
    rule = "   +" + "-" * (cols * block) + "+\n"
    parts = ["    "]
    parts.extend(_centre(str(c), str(c), block) for c in range(cols))
    parts.append("\n" + rule)
    for r, (names, shown) in enumerate(zip(board, revealed)):
        parts.append(f"{r:>2} |")
        for name, is_shown in zip(names, shown):
            if is_shown:
                parts.append(_centre(colorize(name), name, block))
            else:
                parts.append(_centre("*", "*", block))
        parts.append(" |\n")
    parts.append(rule)
    return "".join(parts)


def _pool_index(pool, name):
    try:
        return pool.index(name)
    except ValueError:
        return len(pool)


def save_game(state, path=SAVE_PATH):
    """Write the game state to a save file."""
    pool = state.fruit_pool
    lines = [
        f"{state.rows} {state.cols}\n",
        f"{state.pairs_found} {state.total_pairs} {state.elapsed_time:g}\n",
    ]
    lines.extend(
        "".join(f"{_pool_index(pool, name)} " for name in row) + "\n"
        for row in state.board
    )
    lines.extend(
        "".join(f"{1 if flag else 0} " for flag in row) + "\n"
        for row in state.revealed
    )
    lines.append(f"{len(state.deck)}\n")
    lines.append("".join(f"{_pool_index(pool, card)} " for card in state.deck) + "\n")
    lines.append(f"{len(pool)}\n")
    lines.extend(f"{i} {name}\n" for i, name in enumerate(pool))
    if state.first_flipped is not None:
        r, c = state.first_flipped
        lines.append(f"1 {r} {c}\n")
    else:
        lines.append("0 \n")
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(lines)


class _Tokens:
    def __init__(self, text):
        self.text = text
        self.pos = 0

    def _take(self, pattern, what):
        match = pattern.match(self.text, self.pos)
        if match is None:
            raise ValueError(f"corrupt save file: expected {what}")
        self.pos = match.end()
        return match.group(1)

    def read_int(self, what):
        return int(self._take(_INT, what))

    def read_float(self, what):
        return float(self._take(_FLOAT, what))

    def read_line(self):
        """Skip one separator character, then read to the end of the line."""
        if self.pos < len(self.text):
            self.pos += 1
        end = self.text.find("\n", self.pos)
        if end == -1:
            end = len(self.text)
        line = self.text[self.pos:end]
        self.pos = end + 1
        return line


def load_game(path=SAVE_PATH):
    """Read a saved game; raise FileNotFoundError or ValueError if it cannot be read."""
    tokens = _Tokens(Path(path).read_text(encoding="utf-8"))
    rows = tokens.read_int("rows")
    cols = tokens.read_int("columns")
    if rows < 0 or cols < 0:
        raise ValueError("corrupt save file: negative board size")
    pairs_found = tokens.read_int("pairs found")
    total_pairs = tokens.read_int("total pairs")
    elapsed_time = tokens.read_float("elapsed time")

    board_indices = [tokens.read_int("board index") for _ in range(rows * cols)]
    revealed = [
        [tokens.read_int("revealed flag") == 1 for _ in range(cols)]
        for _ in range(rows)
    ]

    deck_size = tokens.read_int("deck size")
    if deck_size < 0:
        raise ValueError("corrupt save file: negative deck size")
    deck_indices = [tokens.read_int("deck index") for _ in range(deck_size)]

    pool_size = tokens.read_int("fruit pool size")
    if pool_size < 0:
        raise ValueError("corrupt save file: negative fruit pool size")
    pool = [""] * pool_size
    for _ in range(pool_size):
        index = tokens.read_int("fruit index")
        if not 0 <= index < pool_size:
            raise ValueError(f"corrupt save file: fruit index {index} out of range")
        pool[index] = tokens.read_line()

    def lookup(index):
        if not 0 <= index < len(pool):
            raise ValueError(f"corrupt save file: fruit index {index} out of range")
        return pool[index]

    cells = iter(board_indices)
    board = [[lookup(next(cells)) for _ in range(cols)] for _ in range(rows)]
    deck = [lookup(index) for index in deck_indices]

    first_flipped = None
    if tokens.read_int("flip flag") == 1:
        first_flipped = (tokens.read_int("row"), tokens.read_int("column"))

    return GameState(
        board=board,
        revealed=revealed,
        deck=deck,
        fruit_pool=pool,
        pairs_found=pairs_found,
        total_pairs=total_pairs,
        elapsed_time=elapsed_time,
        first_flipped=first_flipped,
    )


def has_saved_game(path=SAVE_PATH):
    """Tell whether a save file exists and can be loaded."""
    try:
        load_game(path)
    except (OSError, ValueError):
        return False
    return True


def parse_selection(text, revealed):
    """Turn a line of input into a Command or a (row, col) of a hidden card.

    Raises ValueError with a message for the player when the input is unusable.
    """
    if text in ("q", "Q"):
        return Command.QUIT
    if text in ("s", "S"):
        return Command.SAVE
    first = _INT.match(text)
    second = _INT.match(text, first.end()) if first else None
    if second is None:
        raise ValueError("Invalid input. Enter two numbers, 'q', or 's'.")
    r, c = int(first.group(1)), int(second.group(1))
    rows = len(revealed)
    cols = len(revealed[0]) if revealed else 0
    if not (0 <= r < rows and 0 <= c < cols):
        raise ValueError(f"Out of range. 0 <= row < {rows}, 0 <= col < {cols}.")
    if revealed[r][c]:
        raise ValueError("That card is already revealed. Pick another.")
    return r, c


def get_selection(revealed, input_func=input, out=None):
    """Ask until the player picks a hidden card, quits or saves."""
    out = out if out is not None else sys.stdout
    while True:
        text = input_func(SELECTION_PROMPT)
        try:
            return parse_selection(text, revealed)
        except ValueError as exc:
            out.write(f"{exc}\n")


def _read_char(input_func, prompt):
    text = input_func(prompt).strip()
    while not text:
        text = input_func("").strip()
    return text[0].upper()


def _read_int(input_func, prompt):
    while True:
        match = _INT.match(input_func(prompt))
        if match:
            return int(match.group(1))


def get_difficulty_level(input_func=input, out=None):
    """Ask for a difficulty and return the board size as (rows, cols)."""
    out = out if out is not None else sys.stdout
    while True:
        out.write(DIFFICULTY_MENU)
        choice = _read_char(input_func, "Enter E, M, H, or C: ")
        if choice in _LEVELS:
            return _LEVELS[choice]
        if choice == "C":
            rows = _read_int(input_func, "Enter number of rows: ")
            cols = _read_int(input_func, "Enter number of columns: ")
            return rows, cols
        out.write("Invalid choice.\n")


def fisher_yates_shuffle(items, rng=None):
    """Shuffle a list in place."""
    rng = rng if rng is not None else random.Random()
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]