"""BoardController — turns pointer clicks into selection and move transitions.

Owns the single current :class:`GameState` and notifies listeners via
simple callback lists so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field

from boardie.core.errors import OutOfBounds
from boardie.core.notation import board_to_fen
from boardie.core.types import BOARD_SIZE, Square, check_square, make_square, square_name
from boardie.game.interfaces import ClickResult, IBoardController
from boardie.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

DEFAULT_BOARD_PX = 600.0

# ── Event definitions ────────────────────────────────────────────────────────

StateCallback = Callable[[GameState], None]
MoveCallback = Callable[[MoveRecord, GameState], None]  # record, state after


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_state_changed: list[StateCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class BoardController(IBoardController):
    """Click-to-select / click-to-move state machine.

    Only the side whose turn it is may select a piece.  A selected piece
    moves to any empty square; clicking it again drops the selection and
    clicking an occupied square does nothing.  No chess rules are applied.

    All methods run on the UI thread; a transition is a single assignment
    of a new snapshot, so readers never see a half-applied move.
    """

    __slots__ = ("_state", "_board_px", "events")

    def __init__(self, fen: str | None = None, board_px: float = DEFAULT_BOARD_PX) -> None:
        if board_px <= 0:
            raise ValueError(f"Board size must be positive: {board_px!r}")
        self._board_px = float(board_px)
        self._state = GameState.from_fen(fen)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board_px(self) -> float:
        return self._board_px

    @property
    def square_size(self) -> float:
        return self._board_px / BOARD_SIZE

    # ── IBoardController impl ────────────────────────────────────────────

    def reset(self, fen: str | None = None) -> None:
        self._set_state(GameState.from_fen(fen))

    def square_at(self, x: float, y: float) -> Square:
        """Map board coordinates (origin bottom-left) to a square.

        Raises :class:`OutOfBounds` for points off the board.
        """
        if not (math.isfinite(x) and math.isfinite(y)):
            raise OutOfBounds(-1)
        col = math.floor(x / self.square_size)
        row = math.floor(y / self.square_size)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            raise OutOfBounds((row, col))
        return make_square(row, col)

    def click(self, x: float, y: float) -> ClickResult:
        try:
            sq = self.square_at(x, y)
        except OutOfBounds:
            _LOGGER.debug("Ignoring click outside the board at (%s, %s)", x, y)
            return ClickResult.IGNORED
        return self.click_square(sq)

    def click_square(self, sq: Square) -> ClickResult:
        try:
            check_square(sq)
        except OutOfBounds as exc:
            _LOGGER.debug("Ignoring click: %s", exc)
            return ClickResult.IGNORED

        state = self._state
        selected = state.selected_square
        if selected is None:
            return self._handle_idle_click(state, sq)
        if sq == selected:
            _LOGGER.debug("Deselected %s", square_name(sq))
            self._set_state(state.deselect())
            return ClickResult.DESELECTED
        if state.board.is_empty(sq):
            return self._move(state, selected, sq)
        return ClickResult.NO_OP

    # ── Internal helpers ─────────────────────────────────────────────────

    def _handle_idle_click(self, state: GameState, sq: Square) -> ClickResult:
        cell = state.board.cell(sq)
        if cell.is_empty or cell.color != state.turn:
            return ClickResult.NO_OP
        _LOGGER.debug("Selected %s on %s", cell.piece, square_name(sq))
        self._set_state(state.select(sq))
        return ClickResult.SELECTED

    def _move(self, state: GameState, from_sq: Square, to_sq: Square) -> ClickResult:
        piece = state.board[from_sq]
        assert piece is not None
        new_state = state.move(from_sq, to_sq)
        record = MoveRecord(from_sq, to_sq, piece, new_state.move_count)
        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug(
                "Move %d: %s, %s to move (%s)",
                record.move_number,
                record,
                new_state.turn,
                board_to_fen(new_state.board),
            )
        # Move listeners run even when a state listener raises.
        try:
            self._set_state(new_state)
        finally:
            self._emit_move(record)
        return ClickResult.MOVED

    def _set_state(self, state: GameState) -> None:
        """Install *state*, then notify listeners."""
        self._state = state
        for cb in self.events.on_state_changed:
            cb(state)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)
