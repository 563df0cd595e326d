"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from boardie.core.enums import Color, PieceType

# FEN letter (case-insensitive) → piece kind
KIND_BY_LETTER: dict[str, PieceType] = {
    "k": PieceType.KING,
    "q": PieceType.QUEEN,
    "b": PieceType.BISHOP,
    "n": PieceType.KNIGHT,
    "r": PieceType.ROOK,
    "p": PieceType.PAWN,
}

_LETTER_BY_KIND: dict[PieceType, str] = {v: k for k, v in KIND_BY_LETTER.items()}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.KING): "♔",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.BLACK, PieceType.KING): "♚",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.PAWN): "♟",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    piece_type: PieceType

    def __post_init__(self) -> None:
        if self.piece_type == PieceType.NONE:
            raise ValueError("A piece cannot have kind NONE")

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        letter = _LETTER_BY_KIND[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        kind = KIND_BY_LETTER.get(char.lower()) if len(char) == 1 else None
        if kind is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, kind)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]
