"""Terminal memory card-matching game with save/resume and a high-score table."""

__version__ = "1.0.0"
__all__ = ["board", "fruits", "game", "records"]