"""Board - immutable snapshot of piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from boardie.core.enums import Color, PieceType
from boardie.core.piece import Piece
from boardie.core.types import (
    BOARD_SIZE,
    SQUARE_COUNT,
    Square,
    check_square,
    col_of,
    make_square,
    row_of,
)

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass(frozen=True, slots=True)
class Cell:
    """One of the 64 board positions, holding at most one piece."""

    row: int
    col: int
    piece: Piece | None = None

    @property
    def index(self) -> Square:
        return make_square(self.row, self.col)

    @property
    def kind(self) -> PieceType:
        return self.piece.piece_type if self.piece is not None else PieceType.NONE

    @property
    def color(self) -> Color | None:
        return self.piece.color if self.piece is not None else None

    @property
    def is_empty(self) -> bool:
        return self.piece is None


class Board:
    """Immutable 64-cell board indexed ``row * 8 + col``.

    Every mutation helper returns a new :class:`Board`; the receiver is
    never changed, so a board handed to a reader stays consistent.
    """

    __slots__ = ("_cells",)

    def __init__(self, pieces: Iterable[Piece | None] | None = None) -> None:
        placement = list(pieces) if pieces is not None else [None] * SQUARE_COUNT
        if len(placement) != SQUARE_COUNT:
            raise ValueError(f"Board needs {SQUARE_COUNT} cells, got {len(placement)}")
        self._cells: tuple[Cell, ...] = tuple(
            Cell(row_of(sq), col_of(sq), piece) for sq, piece in enumerate(placement)
        )

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._cells[check_square(sq)].piece

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return SQUARE_COUNT

    def cell(self, sq: Square) -> Cell:
        return self._cells[check_square(sq)]

    def cell_at(self, row: int, col: int) -> Cell:
        return self._cells[make_square(row, col)]

    def is_empty(self, sq: Square) -> bool:
        return self.cell(sq).is_empty

    def row(self, row: int) -> list[Cell]:
        """The eight cells of *row*, from column 0 to 7."""
        start = make_square(row, 0)
        return list(self._cells[start : start + BOARD_SIZE])

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> list[Cell]:
        """All cells holding a piece, in index order."""
        return [c for c in self._cells if c.piece is not None]

    # -- Derived boards -----------------------------------------------------

    def with_piece(self, sq: Square, piece: Piece | None) -> Board:
        """Return a copy with *sq* set to *piece* (``None`` clears it)."""
        check_square(sq)
        placement = [c.piece for c in self._cells]
        placement[sq] = piece
        return Board(placement)

    def with_move(self, from_sq: Square, to_sq: Square) -> Board:
        """Return a copy with the piece on *from_sq* relocated to *to_sq*.

        Whatever stood on *to_sq* is overwritten; no rules are checked.
        """
        check_square(from_sq)
        check_square(to_sq)
        placement = [c.piece for c in self._cells]
        placement[to_sq] = placement[from_sq]
        placement[from_sq] = None
        return Board(placement)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        placement: list[Piece | None] = [None] * SQUARE_COUNT
        for col in range(BOARD_SIZE):
            placement[make_square(1, col)] = Piece(Color.WHITE, PieceType.PAWN)
            placement[make_square(6, col)] = Piece(Color.BLACK, PieceType.PAWN)

        for col, pt in enumerate(_BACK_RANK):
            placement[make_square(0, col)] = Piece(Color.WHITE, pt)
            placement[make_square(7, col)] = Piece(Color.BLACK, pt)
        return cls(placement)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE - 1, -1, -1):
            marks = [str(c.piece) if c.piece else "." for c in self.row(row)]
            rows.append(f"{row + 1} {' '.join(marks)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
