"""High-score records: ordering, display and persistence."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

RECORDS_PATH = "records.txt"

_RANKS = {"Easy": 1, "Medium": 2, "Hard": 3}


@dataclass
class GameRecord:
    """One finished game."""

    difficulty: str
    time_spent: float
    timestamp: str


def difficulty_rank(difficulty):
    """Rank a difficulty for sorting: Easy 1, Medium 2, Hard 3, anything else 4."""
    return _RANKS.get(difficulty, 4)


def _key(record):
    return difficulty_rank(record.difficulty), record.time_spent


def insert_sorted(records, record):
    """Insert a record into the list, keeping it ordered by difficulty then time."""
    rank, time_spent = _key(record)
    if not records or (rank, time_spent) < _key(records[0]):
        records.insert(0, record)
        return
    position = 1
    while position < len(records):
        other_rank, other_time = _key(records[position])
        if rank > other_rank or (rank == other_rank and time_spent > other_time):
            position += 1
        else:
            break
    records.insert(position, record)


def format_records(records):
    """Return the game history as printable text."""
    lines = ["", "=== Game History ==="]
    if not records:
        lines.append("No past records.")
    else:
        lines.extend(
            f"{number}. {rec.difficulty} | {rec.time_spent:.2f}s | {rec.timestamp}"
            for number, rec in enumerate(records, start=1)
        )
    return "\n".join(lines) + "\n"


def save_records(records, path=RECORDS_PATH):
    """Write the records, one "difficulty,time,timestamp" line each."""
    with open(path, "w", encoding="utf-8") as handle:
        for rec in records:
            handle.write(f"{rec.difficulty},{rec.time_spent:g},{rec.timestamp}\n")


def load_records(path=RECORDS_PATH):
    """Read records from a file in sorted order; a missing file gives no records."""
    file = Path(path)
    if not file.exists():
        return []
    records: list[GameRecord] = []
    for line in file.read_text(encoding="utf-8").splitlines():
        parts = line.split(",", 2)
        difficulty = parts[0]
        time_text = parts[1] if len(parts) > 1 else ""
        timestamp = parts[2] if len(parts) > 2 else ""
        try:
            time_spent = float(time_text)
        except ValueError as exc:
            raise ValueError(f"bad time in record line: {line!r}") from exc
        insert_sorted(records, GameRecord(difficulty, time_spent, timestamp))
    return records


def current_timestamp():
    """Return the local time as YYYY-MM-DD HH:MM:SS."""
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def delete_all_records(records, path=RECORDS_PATH):
    """Empty the list of records and the records file."""
    records.clear()
    save_records(records, path)