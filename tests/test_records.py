from datetime import datetime, timedelta

import pytest

from memory_puzzle.records import (
    GameRecord,
    current_timestamp,
    delete_all_records,
    difficulty_rank,
    format_records,
    insert_sorted,
    load_records,
    save_records,
)


@pytest.mark.parametrize(
    "difficulty, rank",
    [("Easy", 1), ("Medium", 2), ("Hard", 3), ("Custom", 4), ("whatever", 4)],
)
def test_difficulty_rank(difficulty, rank):
    assert difficulty_rank(difficulty) == rank


def _sample():
    return [
        GameRecord("Custom", 5.0, "t1"),
        GameRecord("Hard", 30.0, "t2"),
        GameRecord("Easy", 20.0, "t3"),
        GameRecord("Medium", 10.0, "t4"),
        GameRecord("Easy", 8.0, "t5"),
        GameRecord("Hard", 25.0, "t6"),
    ]


def test_insert_sorted_orders_by_difficulty_then_time():
    records = []
    for rec in _sample():
        insert_sorted(records, rec)
    assert [r.timestamp for r in records] == ["t5", "t3", "t4", "t6", "t2", "t1"]
    keys = [(difficulty_rank(r.difficulty), r.time_spent) for r in records]
    assert keys == sorted(keys)


def test_insert_sorted_into_empty():
    records = []
    rec = GameRecord("Hard", 1.0, "now")
    insert_sorted(records, rec)
    assert records == [rec]


def test_format_records_empty():
    assert "No past records." in format_records([])
    assert "=== Game History ===" in format_records([])


def test_format_records_lines():
    text = format_records([GameRecord("Easy", 12.5, "2024-01-01 10:00:00")])
    assert "1. Easy | 12.50s | 2024-01-01 10:00:00" in text.splitlines()


def test_save_writes_comma_lines(tmp_path):
    path = tmp_path / "records.txt"
    save_records([GameRecord("Easy", 12.5, "2024-01-01 10:00:00")], path)
    assert path.read_text() == "Easy,12.5,2024-01-01 10:00:00\n"


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "records.txt"
    records = []
    for rec in _sample():
        insert_sorted(records, rec)
    save_records(records, path)
    assert load_records(path) == records


def test_load_sorts_unsorted_file(tmp_path):
    path = tmp_path / "records.txt"
    path.write_text("Hard,3,a\nEasy,9,b\nEasy,2,c\n")
    assert [r.timestamp for r in load_records(path)] == ["c", "b", "a"]


def test_load_missing_file(tmp_path):
    assert load_records(tmp_path / "absent.txt") == []


def test_load_bad_time(tmp_path):
    path = tmp_path / "records.txt"
    path.write_text("Easy,abc,x\n")
    with pytest.raises(ValueError):
        load_records(path)


def test_current_timestamp_format():
    fmt = "%Y-%m-%d %H:%M:%S"
    before = datetime.now().replace(microsecond=0)
    stamp = current_timestamp()
    after = datetime.now()
    parsed = datetime.strptime(stamp, fmt)
    assert parsed.strftime(fmt) == stamp
    assert len(stamp) == 19
    assert before - timedelta(seconds=1) <= parsed <= after + timedelta(seconds=1)


def test_delete_all_records(tmp_path):
    path = tmp_path / "records.txt"
    records = _sample()
    save_records(records, path)
    delete_all_records(records, path)
    assert records == []
    assert path.read_text() == ""
    assert load_records(path) == []