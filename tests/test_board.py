import io
import random

import pytest

from memory_puzzle.board import (
    Command,
    GameState,
    fisher_yates_shuffle,
    get_difficulty_level,
    get_selection,
    has_saved_game,
    load_game,
    parse_selection,
    render_board,
    save_game,
)
from memory_puzzle.fruits import FRUIT_NAMES, colorize


def _scripted(lines):
    it = iter(lines)
    return lambda prompt: next(it)


def _state(first_flipped=None):
    return GameState(
        board=[["Apple", "Kiwi"], ["Kiwi", "Apple"]],
        revealed=[[True, False], [False, True]],
        deck=["Apple", "Kiwi", "Kiwi", "Apple"],
        fruit_pool=list(FRUIT_NAMES),
        pairs_found=1,
        total_pairs=2,
        elapsed_time=12.5,
        first_flipped=first_flipped,
    )


def test_render_hidden_and_revealed():
    text = render_board([["Apple", "Kiwi"]], [[True, False]])
    assert colorize("Apple") in text
    assert "Kiwi" not in text
    assert "*" in text


def test_render_rows_have_equal_visible_width():
    board = [["Apple", "Kiwi", "Strawberry"], ["Pear", "Melon", "Lemon"]]
    revealed = [[False] * 3, [False] * 3]
    lines = render_board(board, revealed).splitlines()
    assert lines[1].startswith("   +")
    assert lines[1] == lines[-1]
    assert len(lines[2]) == len(lines[3]) == len(lines[1]) + 1


def test_save_game_format(tmp_path):
    path = tmp_path / "save.txt"
    save_game(_state(), path)
    lines = path.read_text().splitlines()
    assert lines[0] == "2 2"
    assert lines[1] == "1 2 12.5"
    assert lines[-1] == "0 "


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "save.txt"
    state = _state(first_flipped=(1, 0))
    save_game(state, path)
    assert load_game(path) == state


def test_load_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_game(tmp_path / "none.txt")
    assert has_saved_game(tmp_path / "none.txt") is False


def test_load_corrupt(tmp_path):
    path = tmp_path / "save.txt"
    path.write_text("2 2\n0 2 1.0\n0 1 1\n")
    with pytest.raises(ValueError):
        load_game(path)
    assert has_saved_game(path) is False


def test_has_saved_game_true(tmp_path):
    path = tmp_path / "save.txt"
    save_game(_state(), path)
    assert has_saved_game(path) is True


REVEALED = [[True, False], [False, False]]


@pytest.mark.parametrize(
    "text, expected",
    [("q", Command.QUIT), ("Q", Command.QUIT), ("s", Command.SAVE), ("S", Command.SAVE),
     ("1 1", (1, 1)), ("  0 1 extra", (0, 1))],
)
def test_parse_selection_valid(text, expected):
    assert parse_selection(text, REVEALED) == expected


@pytest.mark.parametrize("text", ["", "x", "1", "12", "1x 2", "quit"])
def test_parse_selection_invalid(text):
    with pytest.raises(ValueError, match="Invalid input"):
        parse_selection(text, REVEALED)


def test_parse_selection_out_of_range():
    with pytest.raises(ValueError, match="Out of range"):
        parse_selection("2 0", REVEALED)


def test_parse_selection_already_revealed():
    with pytest.raises(ValueError, match="already revealed"):
        parse_selection("0 0", REVEALED)


def test_get_selection_retries():
    out = io.StringIO()
    result = get_selection(REVEALED, _scripted(["x", "5 5", "0 0", "1 0"]), out)
    assert result == (1, 0)
    text = out.getvalue()
    assert "Invalid input" in text
    assert "Out of range" in text
    assert "already revealed" in text


@pytest.mark.parametrize(
    "answers, size",
    [(["e"], (4, 2)), (["M"], (4, 4)), (["h"], (6, 4)), (["c", "3", "2"], (3, 2))],
)
def test_get_difficulty_level(answers, size):
    assert get_difficulty_level(_scripted(answers), io.StringIO()) == size


def test_get_difficulty_level_invalid_then_valid():
    out = io.StringIO()
    assert get_difficulty_level(_scripted(["z", "E"]), out) == (4, 2)
    assert "Invalid choice." in out.getvalue()


def test_shuffle_is_permutation():
    items = list(FRUIT_NAMES)
    fisher_yates_shuffle(items, random.Random(3))
    assert sorted(items) == sorted(FRUIT_NAMES)


def test_shuffle_deterministic_with_seed():
    a = list(FRUIT_NAMES)
    b = list(FRUIT_NAMES)
    fisher_yates_shuffle(a, random.Random(7))
    fisher_yates_shuffle(b, random.Random(7))
    assert a == b


def test_shuffle_empty():
    items = []
    fisher_yates_shuffle(items, random.Random(1))
    assert items == []