"""Abstract interfaces for the game layer.

The board scene depends on :class:`IBoardController`, not on the concrete
controller, so tests can drive the scene with a stub.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from boardie.core.types import Square
    from boardie.game.controller import GameEvents
    from boardie.game.state import GameState


# ── Interaction FSM states ───────────────────────────────────────────────────


class InteractionState(IntEnum):
    """Finite-state-machine states for click handling."""

    IDLE = auto()
    PIECE_SELECTED = auto()


class ClickResult(IntEnum):
    """What a single click did to the game state."""

    IGNORED = auto()  # outside the board
    NO_OP = auto()
    SELECTED = auto()
    DESELECTED = auto()
    MOVED = auto()


# ── Controller interface ─────────────────────────────────────────────────────


class IBoardController(ABC):
    """Interprets pointer input against the current game snapshot."""

    events: GameEvents

    @property
    @abstractmethod
    def state(self) -> GameState: ...

    @property
    @abstractmethod
    def square_size(self) -> float:
        """Edge length of one square in board pixels."""

    @abstractmethod
    def click(self, x: float, y: float) -> ClickResult:
        """Handle a primary-button press at board coordinates (*x*, *y*).

        The origin is the bottom-left corner of the board (White's side).
        """

    @abstractmethod
    def click_square(self, sq: Square) -> ClickResult:
        """Handle a click that already resolved to square *sq*."""

    @abstractmethod
    def reset(self, fen: str | None = None) -> None:
        """Start over from *fen* (or the standard position)."""
