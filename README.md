# memory-puzzle

A memory card-matching game for the terminal. Fruit cards are dealt face down
on a grid. You turn two over at a time and try to find every pair. Each round
is timed, and the times of finished games go into a high-score table.

## Installation

```
pip install .
```

The package needs nothing outside the Python standard library. To run the
tests, install the `test` extra (`pip install .[test]`) and run `pytest`.

## Playing

```
memory-puzzle
```

The command takes no options apart from `--help`. It reads and writes its
files in the current directory.

Choose a difficulty when the game asks:

| Key | Level  | Grid (rows x cols) | Pairs           |
|-----|--------|--------------------|-----------------|
| E   | Easy   | 4x2                | 4               |
| M   | Medium | 4x4                | 8               |
| H   | Hard   | 6x4                | 12              |
| C   | Custom | you choose         | rows × cols / 2 |

A custom grid must not have negative sides, must have an even number of cells
and can hold at most 19 pairs, one for each fruit in the pool. If the grid
breaks one of these rules, the game prints an error and asks whether you want
to play again.

To turn a card over, type its row and column separated by a space, for
example `1 2`. The game rejects cards that are off the board or already face
up. You can also type:

- `q` to quit the current game without saving it.
- `s` to save the game to `game_save.txt` and quit.

Revealed cards appear in colour, with ANSI escape codes, and hidden cards
appear as `*`. When two cards match they stay face up. When they don't, both
turn back over.

When the game starts and finds a saved game it can read, it asks whether to
start a new game (`N`) or resume the saved one (`R`). A resumed game keeps its
timer running from where it stopped. The save file is deleted after a game is
won.

Closing input with Ctrl-D or stopping the game with Ctrl-C ends the program
with exit status 1.

## High scores

When you win a game, its record goes into `records.txt`. Each record is one
line in this form:

```
difficulty,seconds,YYYY-MM-DD HH:MM:SS
```

A grid that is not one of the three listed sizes is recorded as `Custom`.
Records are sorted first by difficulty (Easy, Medium, Hard, then anything
else) and then by time, fastest first. The full table is shown after each win,
and you can then choose to delete all records.

## Using the pieces from Python

`memory_puzzle.fruits` holds the fruit pool:

- `FRUIT_NAMES` lists the fruits.
- `FRUIT_COLORS` gives the colour of each fruit.
- `colorize` wraps a fruit name in its colour.
- `max_name_length` gives the length of the longest name.

`memory_puzzle.records` handles the high-score table:

- `GameRecord` holds one record.
- `difficulty_rank` gives the sort rank of a difficulty.
- `insert_sorted` adds a record to a list in order.
- `format_records` renders the table as text.
- `save_records` and `load_records` write and read the records file.
- `delete_all_records` empties both the list and the file.
- `current_timestamp` gives the local time in the record format.

`memory_puzzle.board` handles the game state and player input:

- `GameState` holds a game in progress.
- `render_board` draws the grid.
- `save_game` and `load_game` write and read a saved game. `load_game` raises
  `FileNotFoundError` or `ValueError` when it cannot read the file.
- `has_saved_game` tells whether a saved game can be loaded.
- `parse_selection` turns one line of input into a `(row, col)` or a
  `Command` (`QUIT` or `SAVE`). It raises `ValueError` for unusable input.
- `get_selection` and `get_difficulty_level` ask the player until they get a
  usable answer.
- `fisher_yates_shuffle` shuffles a list in place and takes an optional
  `random.Random`.

`memory_puzzle.game` runs the game:

- `build_board` deals a new `GameState` for a given size.
- `difficulty_name` names a grid size.
- `run_program` plays one game.
- `should_restart` asks whether to play again.
- `main` is the `memory-puzzle` command.

`run_program`, `should_restart`, `get_selection` and `get_difficulty_level`
take an `input_func` and an `out` stream, so a script can drive a game. The
screen is cleared only when `out` is `sys.stdout`.