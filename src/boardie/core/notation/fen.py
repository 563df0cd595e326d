"""FEN placement parsing and serialization."""

from __future__ import annotations

from boardie.core.board import Board
from boardie.core.errors import InvalidFenFormat
from boardie.core.piece import KIND_BY_LETTER, Piece
from boardie.core.types import BOARD_SIZE, SQUARE_COUNT, make_square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_MAX_FIELDS = 6


def board_from_fen(fen: str) -> Board:
    """Parse the placement field of *fen* into a :class:`Board`.

    Only field 0 is read; the remaining FEN fields (side to move, castling,
    en passant, clocks) may be present but are ignored.  Letters that do not
    name a piece leave their cell empty.
    """
    parts = fen.split()
    if not (1 <= len(parts) <= _MAX_FIELDS):
        raise InvalidFenFormat(f"Invalid FEN (need 1-{_MAX_FIELDS} fields): {fen!r}")

    ranks = parts[0].split("/")
    if len(ranks) != BOARD_SIZE:
        raise InvalidFenFormat(f"Invalid FEN board (must contain 8 ranks): {fen!r}")

    placement: list[Piece | None] = [None] * SQUARE_COUNT
    for rank_idx, rank_text in enumerate(ranks):
        row = BOARD_SIZE - 1 - rank_idx
        col = 0
        for ch in rank_text:
            if ch in "0123456789":
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise InvalidFenFormat(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            elif ch.isalpha():
                if col >= BOARD_SIZE:
                    raise InvalidFenFormat(f"Invalid FEN rank width: {fen!r}")
                if ch.lower() in KIND_BY_LETTER:
                    placement[make_square(row, col)] = Piece.from_char(ch)
                col += 1
            else:
                raise InvalidFenFormat(f"Invalid FEN character {ch!r}: {fen!r}")
            if col > BOARD_SIZE:
                raise InvalidFenFormat(f"Invalid FEN rank width: {fen!r}")
        if col != BOARD_SIZE:
            raise InvalidFenFormat(f"Invalid FEN rank width: {fen!r}")

    return Board(placement)


def board_to_fen(board: Board) -> str:
    """Serialise the placement of *board* to a FEN placement field."""
    rows: list[str] = []
    for row in range(BOARD_SIZE - 1, -1, -1):
        empty = 0
        text = ""
        for cell in board.row(row):
            if cell.piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(cell.piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)
