"""Game layer — selection/turn state machine driven by board clicks.

Quick start::

    from boardie.game import BoardController

    ctrl = BoardController()
    ctrl.click_square(12)   # select the e2 pawn
    ctrl.click_square(28)   # move it to e4, Black to move
"""

from boardie.game.controller import BoardController, GameEvents
from boardie.game.interfaces import ClickResult, IBoardController, InteractionState
from boardie.game.state import GameState, MoveRecord, Selection

__all__ = [
    # Interfaces
    "ClickResult",
    "IBoardController",
    "InteractionState",
    # Concrete
    "BoardController",
    "GameEvents",
    "GameState",
    "MoveRecord",
    "Selection",
]
