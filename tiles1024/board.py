"""The 4x4 playing field and its sliding and merging rules."""

from __future__ import annotations

import enum
import random
from typing import Iterable, Iterator, Sequence

SIZE = 4


class Direction(enum.Enum):
    """Direction in which the tiles are pushed, as seen on screen."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class BoardFullError(Exception):
    """Raised when a new tile is wanted but no cell is empty."""


def _merge_line(line: Sequence[int]) -> list[int]:
    """Push the tiles of one line towards index 0, merging equal neighbours once."""
    tiles = [value for value in line if value]
    merged: list[int] = []
    index = 0
    while index < len(tiles):
        if index + 1 < len(tiles) and tiles[index] == tiles[index + 1]:
            merged.append(tiles[index] + tiles[index + 1])
            index += 2
        else:
            merged.append(tiles[index])
            index += 1
    return merged + [0] * (len(line) - len(merged))


def _lines(direction: Direction) -> Iterator[list[tuple[int, int]]]:
    """Yield the cell coordinates of each line, leading edge first."""
    for fixed in range(SIZE):
        if direction is Direction.UP:
            yield [(row, fixed) for row in range(SIZE)]
        elif direction is Direction.DOWN:
            yield [(row, fixed) for row in reversed(range(SIZE))]
        elif direction is Direction.LEFT:
            yield [(fixed, col) for col in range(SIZE)]
        else:
            yield [(fixed, col) for col in reversed(range(SIZE))]


class Board:
    """A 4x4 grid of tiles, indexed as ``board[row, col]``; 0 means empty."""

    def __init__(
        self,
        cells: Iterable[Iterable[int]] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if cells is None:
            rows = [[0] * SIZE for _ in range(SIZE)]
        else:
            rows = [list(row) for row in cells]
            if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
                raise ValueError(f"a board has {SIZE} rows of {SIZE} cells")
        self._rows = rows
        self._rng = rng if rng is not None else random.Random()

    @classmethod
    def start(cls, rng: random.Random | None = None) -> "Board":
        """Return a new board holding the two opening tiles.

        Both cells are drawn independently, so the second tile may land on
        the first one.
        """
        board = cls(rng=rng)
        for _ in range(2):
            col = board._rng.randrange(SIZE)
            row = board._rng.randrange(SIZE)
            board._rows[row][col] = board._rng.randrange(2) + 1
        return board

    @property
    def rows(self) -> tuple[tuple[int, ...], ...]:
        """The cells as a tuple of rows, top row first."""
        return tuple(tuple(row) for row in self._rows)

    def __getitem__(self, position: tuple[int, int]) -> int:
        row, col = position
        return self._rows[row][col]

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        return iter(self.rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"Board({self.rows!r})"

    def __str__(self) -> str:
        width = max(len(str(value)) for row in self._rows for value in row)
        return "\n".join(
            " ".join(str(value).rjust(width) for value in row) for row in self._rows
        )

    def is_full(self) -> bool:
        """True when no cell is empty."""
        return all(value != 0 for row in self._rows for value in row)

    def place_random(self) -> tuple[int, int]:
        """Put a 1 or a 2 into a random empty cell and return its ``(row, col)``."""
        if self.is_full():
            raise BoardFullError("no empty cell left for a new tile")
        col = self._rng.randrange(SIZE)
        row = self._rng.randrange(SIZE)
        while self._rows[row][col] != 0:
            col = self._rng.randrange(SIZE)
            row = self._rng.randrange(SIZE)
        self._rows[row][col] = self._rng.randrange(2) + 1
        return row, col

    def slide(self, direction: Direction) -> bool:
        """Push every tile towards ``direction``, merging equal pairs.

        Returns True when any cell changed.
        """
        changed = False
        for coords in _lines(direction):
            old = [self._rows[row][col] for row, col in coords]
            new = _merge_line(old)
            if new != old:
                changed = True
                for (row, col), value in zip(coords, new):
                    self._rows[row][col] = value
        return changed

    def move(self, direction: Direction) -> tuple[int, int]:
        """Slide towards ``direction`` and then add a new tile.

        A tile is added even when the slide changed nothing; returns the
        position of the new tile and raises BoardFullError if there is none.
        """
        self.slide(direction)
        return self.place_random()