# tiles1024

A small sliding-tile puzzle in the spirit of 1024. The 4x4 board starts with
two tiles, each worth 1 or 2 (the two opening cells are drawn independently,
so they can land on the same cell). Every move pushes all tiles in one
direction, and two equal neighbouring tiles merge once into a tile holding
their sum. After every move a new 1 or 2 tile is placed in a random empty
cell, even when the move changed nothing.

## Installing

```
pip install .
```

The window display uses Tkinter, which comes with most Python installations.
The package has no other dependencies.

## Playing

```
tiles1024
```

opens a window with the grid. To play in the terminal instead:

```
tiles1024 --terminal
```

Options:

| Option          | Meaning                                       |
|-----------------|-----------------------------------------------|
| `--terminal`    | play in the terminal instead of a window      |
| `--seed N`      | seed the random tile placement, for replays   |

Controls:

| Key                | Action         |
|--------------------|----------------|
| Up arrow / `w`     | slide up       |
| Down arrow / `s`   | slide down     |
| Left arrow / `a`   | slide left     |
| Right arrow / `d`  | slide right    |
| `e`                | quit           |

The game ends when a move leaves no empty cell for the new tile: the window
closes, and the terminal view prints "Game over". In the window, cells are
grey squares and each tile's value is drawn in simple line-segment digits; in
the terminal the board is printed as rows of numbers.

There is no score, no win condition and no saving of games.

## Using the board in code

`tiles1024.board.Board` holds the game state on its own, with no display
attached. Cells are read as `board[row, col]`, with 0 for an empty cell.

```python
import random
from tiles1024.board import Board, Direction

board = Board.start(random.Random(1))
board.move(Direction.LEFT)   # slide, merge, then add a new tile
print(board.rows)
print(board)
```

- `Board(cells)` builds a board from four rows of four numbers and raises
  `ValueError` for any other shape.
- `Board.slide(direction)` slides and merges without adding a tile, and
  returns whether any cell changed.
- `Board.place_random()` adds a 1 or 2 tile, returns its `(row, col)`, and
  raises `BoardFullError` when no cell is empty.
- `Board.move(direction)` does both.

## Drawing

`tiles1024.graphics` has `Color` and the shapes `Line`, `Rect`, `Ellipse`,
`Text` and `Pixel`. A surface draws them: `TkSurface` opens a window, and
`RecordingSurface` keeps the shapes in its `shapes` list, which makes the
rendering easy to check in tests. `tiles1024.app.draw_grid(surface, board)`
draws a board onto either one, and `tiles1024.glyphs.number_shapes` returns
the strokes of a tile's number.

`tiles1024.console` has the terminal helpers: `place_cursor`,
`output_string`, `clear_screen`, and `check_key_pressed`, which waits a given
number of milliseconds for a key and returns its code (0 if none).

## Running the tests

```
pip install .[test]
pytest
```