"""The game loop: key handling, drawing the grid and the command entry point."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Any, Sequence, TextIO

from .board import Board, BoardFullError, Direction
from .console import Key, check_key_pressed, clear_screen, output_string
from .glyphs import number_shapes
from .graphics import BLACK, WHITE, Color, Ellipse, Line, Pixel, Rect, Shape, Text

CELL_SIZE = 120
GRID_OFFSET = 55
DIGIT_HEIGHT = 10
TITLE = "Play 1024 game"
QUIT_KEY = "e"

CELL_OUTLINE = Color(130, 130, 130)
CELL_FILL = Color(100, 100, 100)

_DIRECTIONS: dict[int, Direction] = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
    72: Direction.UP,
    80: Direction.DOWN,
    75: Direction.LEFT,
    77: Direction.RIGHT,
    ord("w"): Direction.UP,
    ord("s"): Direction.DOWN,
    ord("a"): Direction.LEFT,
    ord("d"): Direction.RIGHT,
}

_TK_KEYSYMS = {"Up": Key.UP, "Down": Key.DOWN, "Left": Key.LEFT, "Right": Key.RIGHT}


def _key_code(key: int | str) -> int:
    if isinstance(key, str):
        return ord(key) if len(key) == 1 else 0
    return int(key)


def key_direction(key: int | str) -> Direction | None:
    """Return the direction a key pushes the tiles, or None for other keys."""
    return _DIRECTIONS.get(_key_code(key))


def handle_key(board: Board, key: int | str) -> bool:
    """Apply one key press to ``board``; return False when the key ends the game.

    Raises BoardFullError when a move leaves no room for a new tile.
    """
    code = _key_code(key)
    if code == ord(QUIT_KEY):
        return False
    direction = _DIRECTIONS.get(code)
    if direction is not None:
        board.move(direction)
    return True


def _draw_shape(surface: Any, shape: Shape) -> None:
    if isinstance(shape, Line):
        surface.line(shape.x1, shape.y1, shape.x2, shape.y2, shape.color)
    elif isinstance(shape, Ellipse):
        surface.ellipse(
            shape.x1, shape.y1, shape.x2, shape.y2, shape.line_color, shape.fill_color
        )
    elif isinstance(shape, Rect):
        surface.rect(
            shape.x1, shape.y1, shape.x2, shape.y2, shape.line_color, shape.fill_color
        )
    elif isinstance(shape, Text):
        surface.text(
            shape.x, shape.y, shape.height, shape.text, shape.line_color, shape.fill_color
        )
    elif isinstance(shape, Pixel):
        surface.pixel(shape.x, shape.y, shape.color)


def draw_grid(surface: Any, board: Board) -> None:
    """Draw every cell of ``board`` as a box, labelling the non-empty ones."""
    for col in range(4):
        for row in range(4):
            x1 = col * CELL_SIZE + GRID_OFFSET
            y1 = row * CELL_SIZE + GRID_OFFSET
            x2 = (col + 1) * CELL_SIZE + GRID_OFFSET
            y2 = (row + 1) * CELL_SIZE + GRID_OFFSET
            surface.rect(x1, y1, x2, y2, CELL_OUTLINE, CELL_FILL)
            value = board[row, col]
            if value != 0:
                for shape in number_shapes(value, x1 + 50, y1 + 40, DIGIT_HEIGHT):
                    _draw_shape(surface, shape)


def _draw_title(surface: Any) -> None:
    surface.text(25, 25, 25, TITLE, WHITE, BLACK)


def _render_terminal(board: Board, stream: TextIO) -> None:
    clear_screen(stream)
    output_string(0, 0, TITLE, stream)
    for index, line in enumerate(str(board).splitlines()):
        output_string(0, index + 2, line, stream)
    output_string(0, 7, "arrows or w/a/s/d move, e quits", stream)


def _play_terminal(board: Board, stream: TextIO) -> None:
    _render_terminal(board, stream)
    try:
        while True:
            key = check_key_pressed(100)
            if key == 0:
                continue
            try:
                if not handle_key(board, key):
                    break
            except BoardFullError:
                _render_terminal(board, stream)
                output_string(0, 9, "Game over", stream)
                break
            _render_terminal(board, stream)
    except KeyboardInterrupt:
        pass
    stream.write("\n")
    stream.flush()


def _play_window(board: Board) -> None:
    from .graphics import TkSurface

    surface = TkSurface(width=600, height=600, title="1024")

    def redraw() -> None:
        surface.clear()
        _draw_title(surface)
        draw_grid(surface, board)

    def on_key(event: Any) -> None:
        code = _TK_KEYSYMS.get(event.keysym)
        if code is None:
            code = ord(event.char) if event.char else 0
        try:
            keep_playing = handle_key(board, code)
        except BoardFullError:
            keep_playing = False
        if not keep_playing:
            surface.root.destroy()
            return
        redraw()

    redraw()
    surface.root.bind("<Key>", on_key)
    surface.root.mainloop()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game; returns the exit status."""
    parser = argparse.ArgumentParser(
        prog="tiles1024", description="Slide and merge tiles on a 4x4 grid."
    )
    parser.add_argument(
        "--terminal", action="store_true", help="play in the terminal instead of a window"
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the tile placement")
    args = parser.parse_args(argv)

    board = Board.start(random.Random(args.seed))
    if args.terminal:
        _play_terminal(board, sys.stdout)
    else:
        _play_window(board)
    return 0


if __name__ == "__main__":
    sys.exit(main())