"""Core domain layer — board model and FEN parsing, no GUI dependencies.

Quick start::

    from boardie.core import board_from_fen, STARTING_FEN

    board = board_from_fen(STARTING_FEN)
    print(board)
"""

from boardie.core.board import Board, Cell
from boardie.core.enums import Color, PieceType
from boardie.core.errors import BoardError, InvalidFenFormat, OutOfBounds
from boardie.core.notation import STARTING_FEN, board_from_fen, board_to_fen
from boardie.core.piece import Piece
from boardie.core.types import (
    Square,
    col_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Errors
    "BoardError",
    "InvalidFenFormat",
    "OutOfBounds",
    # Types / helpers
    "Square",
    "col_of",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "Board",
    "Cell",
    "Piece",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
]
