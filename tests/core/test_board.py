"""Tests for Board and Cell."""

import pytest

from boardie.core.board import Board, Cell
from boardie.core.enums import Color, PieceType
from boardie.core.errors import OutOfBounds
from boardie.core.piece import Piece
from boardie.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    E2,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E4,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_pawns(self) -> None:
        board = Board.initial()
        for col in range(8):
            assert board[8 + col] == Piece(Color.WHITE, PieceType.PAWN)
            assert board[48 + col] == Piece(Color.BLACK, PieceType.PAWN)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for sq in range(16, 48):
            assert board[sq] is None

    def test_occupied_count(self) -> None:
        assert len(Board.initial().occupied()) == 32
        assert Board.empty().occupied() == []


class TestCell:
    def test_empty_cell_has_no_kind_and_no_color(self) -> None:
        cell = Board.empty().cell(E4)
        assert cell.kind == PieceType.NONE
        assert cell.color is None
        assert cell.is_empty

    def test_occupied_cell_reports_piece(self) -> None:
        cell = Board.initial().cell(E2)
        assert cell.kind == PieceType.PAWN
        assert cell.color == Color.WHITE
        assert (cell.row, cell.col) == (1, 4)
        assert cell.index == E2

    def test_every_cell_knows_its_coordinates(self) -> None:
        board = Board.initial()
        for sq, cell in enumerate(board):
            assert cell.index == sq

    def test_cell_at(self) -> None:
        assert Board.initial().cell_at(7, 4) == Cell(7, 4, Piece(Color.BLACK, PieceType.KING))


class TestBoardOperations:
    def test_with_piece_leaves_original_untouched(self) -> None:
        board = Board.empty()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        updated = board.with_piece(E4, piece)
        assert updated[E4] == piece
        assert board[E4] is None

    def test_with_move_relocates_piece(self) -> None:
        board = Board.initial()
        moved = board.with_move(E2, E4)
        assert moved[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert moved[E2] is None
        changed = [sq for sq in range(64) if board[sq] != moved[sq]]
        assert changed == [E2, E4]

    def test_with_move_overwrites_destination(self) -> None:
        board = Board.initial().with_move(D1, D8)
        assert board[D8] == Piece(Color.WHITE, PieceType.QUEEN)
        assert board[D1] is None

    @pytest.mark.parametrize("sq", [-1, 64, 100])
    def test_out_of_range_access_raises(self, sq: int) -> None:
        board = Board.initial()
        with pytest.raises(OutOfBounds):
            board[sq]
        with pytest.raises(OutOfBounds):
            board.with_move(E2, sq)

    def test_wrong_cell_count_rejected(self) -> None:
        with pytest.raises(ValueError, match="64 cells"):
            Board([None] * 63)

    def test_equality_and_hash(self) -> None:
        assert Board.initial() == Board.initial()
        assert hash(Board.initial()) == hash(Board.initial())
        assert Board.initial() != Board.empty()

    def test_repr_not_empty(self) -> None:
        text = repr(Board.initial())
        assert text.splitlines()[0] == "8 r n b q k b n r"
        assert "a b c d e f g h" in text
