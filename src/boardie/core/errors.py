"""Exceptions raised by the board domain."""

from __future__ import annotations


class BoardError(Exception):
    """Base class for board errors."""


class InvalidFenFormat(BoardError, ValueError):
    """A FEN string could not be turned into a board."""


class OutOfBounds(BoardError, IndexError):
    """A cell index or coordinate falls outside the 8x8 board."""

    def __init__(self, index: int | tuple[int, int]) -> None:
        what = "Coordinate" if isinstance(index, tuple) else "Index"
        super().__init__(f"{what} outside the board: {index}")
        self.index = index  # cell index, or (row, col) pair
