"""Game flow: setting up a board, playing turns and the replay loop."""

from __future__ import annotations

import argparse
import os
import random
import sys
import time
from contextlib import suppress

from memory_puzzle.board import (
    SAVE_PATH,
    Command,
    GameState,
    clear_screen,
    fisher_yates_shuffle,
    get_difficulty_level,
    get_selection,
    has_saved_game,
    load_game,
    render_board,
    save_game,
)
from memory_puzzle.fruits import FRUIT_NAMES
from memory_puzzle.records import (
    RECORDS_PATH,
    GameRecord,
    current_timestamp,
    delete_all_records,
    format_records,
    insert_sorted,
    load_records,
    save_records,
)

PAUSE_SECONDS = 0.5

_NAMED_SIZES = {(4, 2): "Easy", (4, 4): "Medium", (6, 4): "Hard"}


def difficulty_name(rows, cols):
    """Name the difficulty of a board size; unknown sizes are "Custom"."""
    return _NAMED_SIZES.get((rows, cols), "Custom")


def build_board(rows, cols, rng=None):
    """Deal a fresh shuffled board of fruit pairs as a new GameState.

    Raises ValueError when the grid is negative, odd-sized or needs more
    fruits than the pool holds.
    """
    if rows < 0 or cols < 0:
        raise ValueError("Grid size must not be negative.")
    if (rows * cols) % 2 != 0:
        raise ValueError("Grid size (rows * cols) must be even.")
    pairs = rows * cols // 2
    if pairs > len(FRUIT_NAMES):
        raise ValueError("Not enough fruits in the pool for selected grid size.")
    rng = rng if rng is not None else random.Random()

    fruits = list(FRUIT_NAMES)
    fisher_yates_shuffle(fruits, rng)
    deck = [fruit for fruit in fruits[:pairs] for _ in range(2)]
    fisher_yates_shuffle(deck, rng)

    cards = iter(deck)
    board = [[next(cards) for _ in range(cols)] for _ in range(rows)]
    revealed = [[False] * cols for _ in range(rows)]
    return GameState(
        board=board,
        revealed=revealed,
        deck=deck,
        fruit_pool=list(FRUIT_NAMES),
        total_pairs=pairs,
    )


def _ask_char(input_func, prompt):
    text = input_func(prompt).strip()
    while not text:
        text = input_func("").strip()
    return text[0].upper()


def _clear(out):
    if out is sys.stdout:
        clear_screen()


def _show(state, out, heading=True):
    _clear(out)
    if heading:
        out.write(f"Memory Game: find all {state.total_pairs} pairs!\n\n")
    out.write(render_board(state.board, state.revealed))


def _initial_state(load_saved, input_func, out, save_path):
    if load_saved:
        try:
            return load_game(save_path)
        except FileNotFoundError:
            out.write("No saved game found.\n")
        except (OSError, ValueError):
            pass
    rows, cols = get_difficulty_level(input_func, out)
    return build_board(rows, cols)


def _save(state, start, save_path, out):
    state.elapsed_time = time.monotonic() - start
    try:
        save_game(state, save_path)
    except OSError:
        out.write("Error: Could not save game.\n")
        return
    out.write("Game saved successfully.\n")


def _finish(state, start, input_func, out, save_path, records_path):
    elapsed = time.monotonic() - start
    _clear(out)
    out.write(f"Congratulations! You found all {state.total_pairs} pairs!\n")
    out.write(f"Time taken: {elapsed:.2f} seconds.\n")

    records = load_records(records_path)
    record = GameRecord(
        difficulty_name(state.rows, state.cols), elapsed, current_timestamp()
    )
    insert_sorted(records, record)
    save_records(records, records_path)

    out.write("\nHigh Scores:\n")
    out.write(format_records(records))

    prompt = "\nWould you like to delete all records? (Y/N): "
    if _ask_char(input_func, prompt) == "Y":
        delete_all_records(records, records_path)
        out.write("All records have been deleted.\n")
        input_func("Press Enter to continue...")

    with suppress(OSError):
        os.remove(save_path)


def run_program(
    load_saved=False,
    input_func=input,
    out=None,
    save_path=SAVE_PATH,
    records_path=RECORDS_PATH,
):
    """Play one game, new or resumed, until it is won, quit or saved.

    Raises ValueError when a new game is asked for with an unusable grid size.
    """
    out = out if out is not None else sys.stdout
    state = _initial_state(load_saved, input_func, out, save_path)
    start = time.monotonic() - state.elapsed_time

    while state.pairs_found < state.total_pairs:
        _show(state, out)

        if state.first_flipped is not None:
            out.write("\nSelect second card:\n")
            selection = get_selection(state.revealed, input_func, out)
            if selection is Command.QUIT:
                return
            if selection is Command.SAVE:
                _save(state, start, save_path, out)
                return
            r2, c2 = selection
            state.revealed[r2][c2] = True
            _show(state, out, heading=False)

            r1, c1 = state.first_flipped
            if state.board[r1][c1] == state.board[r2][c2]:
                out.write(f"\nMatched! {state.board[r1][c1]}\n")
                time.sleep(PAUSE_SECONDS)
                state.pairs_found += 1
            else:
                out.write("\nNot a match.\n")
                time.sleep(PAUSE_SECONDS)
                state.revealed[r1][c1] = False
                state.revealed[r2][c2] = False
            state.first_flipped = None
            out.write(
                f"\n(Found {state.pairs_found} of {state.total_pairs} pairs.)\n"
            )
            input_func("Press Enter to continue...")
        else:
            out.write("\nSelect first card:\n")
            selection = get_selection(state.revealed, input_func, out)
            if selection is Command.QUIT:
                return
            if selection is Command.SAVE:
                _save(state, start, save_path, out)
                return
            r1, c1 = selection
            state.revealed[r1][c1] = True
            state.first_flipped = (r1, c1)
            _show(state, out)

    _finish(state, start, input_func, out, save_path, records_path)


def should_restart(input_func=input, out=None):
    """Ask whether to play again until the answer is y or n."""
    out = out if out is not None else sys.stdout
    while True:
        decision = _ask_char(input_func, "Do you want to play again? (y/n): ")
        if decision == "Y":
            return True
        if decision == "N":
            out.write("Thanks for playing! Goodbye!\n")
            return False
        out.write("Invalid input. Please enter 'y' or 'n'.\n")


def _ask_resume(input_func, out):
    while True:
        out.write("\nDo you want to:\n")
        out.write("  N - Start a new game\n")
        out.write("  R - Resume saved game\n")
        choice = _ask_char(input_func, "Enter N or R: ")
        out.write("\n")
        if choice == "R":
            return True
        if choice == "N":
            return False
        out.write("Invalid choice. Please enter N or R.\n")


def main(argv=None):
    """Run the memory puzzle in the terminal."""
    parser = argparse.ArgumentParser(
        prog="memory-puzzle", description="Find all the matching fruit pairs."
    )
    parser.parse_args(argv)

    out = sys.stdout
    clear_screen()
    out.write("Welcome to the Memory Puzzle Game!\n")
    try:
        while True:
            load_saved = _ask_resume(input, out) if has_saved_game() else False
            try:
                run_program(load_saved)
            except ValueError as exc:
                sys.stderr.write(f"Error: {exc}\n")
            if not should_restart():
                break
    except (EOFError, KeyboardInterrupt):
        out.write("\n")
        return 1

    clear_screen()
    out.write("Program ended.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())