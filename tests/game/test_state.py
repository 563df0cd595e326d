"""Tests for GameState and Selection."""

import pytest

from boardie.core.board import Board
from boardie.core.enums import Color, PieceType
from boardie.core.errors import InvalidFenFormat, OutOfBounds
from boardie.core.piece import Piece
from boardie.core.types import E2, E4
from boardie.game.interfaces import InteractionState
from boardie.game.state import GameState, MoveRecord, Selection


class TestSelection:
    def test_idle_by_default(self) -> None:
        assert Selection() == Selection.IDLE
        assert Selection.IDLE.is_idle
        assert Selection.IDLE.interaction == InteractionState.IDLE

    def test_selected(self) -> None:
        sel = Selection(E2)
        assert not sel.is_idle
        assert sel.interaction == InteractionState.PIECE_SELECTED

    def test_out_of_range_index_rejected(self) -> None:
        with pytest.raises(OutOfBounds):
            Selection(64)


class TestGameStateSetup:
    def test_default_is_starting_position(self) -> None:
        gs = GameState.from_fen()
        assert gs.board == Board.initial()
        assert gs.turn == Color.WHITE
        assert gs.selection == Selection.IDLE
        assert gs.move_count == 0

    def test_side_to_move_field_does_not_set_turn(self) -> None:
        gs = GameState.from_fen("4k3/8/8/8/8/8/8/4K3 b - - 0 1")
        assert gs.turn == Color.WHITE

    def test_bad_fen_propagates(self) -> None:
        with pytest.raises(InvalidFenFormat):
            GameState.from_fen("not a fen")

    def test_empty_fen_is_not_the_starting_position(self) -> None:
        with pytest.raises(InvalidFenFormat):
            GameState.from_fen("")


class TestGameStateTransitions:
    def test_select_returns_new_snapshot(self) -> None:
        gs = GameState.from_fen()
        selected = gs.select(E2)
        assert selected.selected_square == E2
        assert selected.is_selected(E2)
        assert gs.selected_square is None
        assert selected.board is gs.board

    def test_deselect(self) -> None:
        gs = GameState.from_fen().select(E2).deselect()
        assert gs.interaction == InteractionState.IDLE

    def test_move_flips_turn_and_clears_selection(self) -> None:
        gs = GameState.from_fen().select(E2)
        after = gs.move(E2, E4)
        assert after.turn == Color.BLACK
        assert after.selection == Selection.IDLE
        assert after.move_count == 1
        assert after.board[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert gs.board[E2] == Piece(Color.WHITE, PieceType.PAWN)

    def test_snapshot_is_frozen(self) -> None:
        gs = GameState.from_fen()
        with pytest.raises(AttributeError):
            gs.turn = Color.BLACK  # type: ignore[misc]


def test_move_record_str() -> None:
    record = MoveRecord(E2, E4, Piece(Color.WHITE, PieceType.PAWN), 1)
    assert str(record) == "♙ e2-e4"
