"""Immutable game snapshot: board, selection marker and turn."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar

from boardie.core.board import Board
from boardie.core.enums import Color
from boardie.core.notation import STARTING_FEN, board_from_fen
from boardie.core.piece import Piece
from boardie.core.types import Square, check_square, square_name
from boardie.game.interfaces import InteractionState


@dataclass(frozen=True, slots=True)
class Selection:
    """The single currently picked square, if any."""

    index: Square | None = None

    IDLE: ClassVar[Selection]

    def __post_init__(self) -> None:
        if self.index is not None:
            check_square(self.index)

    @property
    def is_idle(self) -> bool:
        return self.index is None

    @property
    def interaction(self) -> InteractionState:
        if self.index is None:
            return InteractionState.IDLE
        return InteractionState.PIECE_SELECTED


Selection.IDLE = Selection()


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single completed move."""

    from_sq: Square
    to_sq: Square
    piece: Piece
    move_number: int

    def __str__(self) -> str:
        return f"{self.piece.symbol} {square_name(self.from_sq)}-{square_name(self.to_sq)}"


@dataclass(frozen=True, slots=True)
class GameState:
    """One consistent view of the game.

    The controller never edits a snapshot; it builds the next one and swaps
    it in with a single assignment.
    """

    board: Board
    selection: Selection = Selection.IDLE
    turn: Color = Color.WHITE
    move_count: int = 0

    @classmethod
    def from_fen(cls, fen: str | None = None) -> GameState:
        """Fresh state with White to move; only the FEN placement is used."""
        return cls(board=board_from_fen(STARTING_FEN if fen is None else fen))

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def interaction(self) -> InteractionState:
        return self.selection.interaction

    @property
    def selected_square(self) -> Square | None:
        return self.selection.index

    def is_selected(self, sq: Square) -> bool:
        return self.selection.index == sq

    # ── Transitions ──────────────────────────────────────────────────────

    def select(self, sq: Square) -> GameState:
        return replace(self, selection=Selection(sq))

    def deselect(self) -> GameState:
        return replace(self, selection=Selection.IDLE)

    def move(self, from_sq: Square, to_sq: Square) -> GameState:
        """Relocate a piece, clear the selection and hand the turn over."""
        return GameState(
            board=self.board.with_move(from_sq, to_sq),
            selection=Selection.IDLE,
            turn=self.turn.opposite,
            move_count=self.move_count + 1,
        )
