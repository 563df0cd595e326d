"""Tests for sprite sheet lookup."""

from __future__ import annotations

from PyQt6.QtCore import QRect

from boardie.core.enums import Color, PieceType
from boardie.core.piece import Piece
from boardie.ui.resources import SHEET_PATH, SPRITE_CELLS, piece_pixmap, sprite_rect


def test_sheet_asset_is_bundled() -> None:
    assert SHEET_PATH.is_file()


def test_every_piece_has_a_distinct_sprite() -> None:
    kinds = [pt for pt in PieceType if pt != PieceType.NONE]
    keys = {(pt, color) for pt in kinds for color in Color}
    assert set(SPRITE_CELLS) == keys
    assert len(set(SPRITE_CELLS.values())) == len(keys)


def test_sprite_rect_uses_mapping() -> None:
    assert sprite_rect(Piece(Color.WHITE, PieceType.KING), 75) == QRect(0, 0, 75, 75)
    assert sprite_rect(Piece(Color.BLACK, PieceType.PAWN), 75) == QRect(375, 75, 75, 75)


def test_piece_pixmap_size(qapp) -> None:
    pixmap = piece_pixmap(Piece(Color.BLACK, PieceType.KNIGHT), 75)
    assert not pixmap.isNull()
    assert (pixmap.width(), pixmap.height()) == (75, 75)
