"""Piece sprites cut from the SVG sprite sheet."""

from __future__ import annotations

from functools import lru_cache

from PyQt6.QtCore import QRect, QRectF, Qt
from PyQt6.QtGui import QImage, QPainter, QPixmap
from PyQt6.QtSvg import QSvgRenderer

from boardie.core.enums import Color, PieceType
from boardie.core.piece import Piece
from boardie.runtime_assets import asset_path

SHEET_PATH = asset_path("pieces.svg")
SHEET_COLUMNS = 6
SHEET_ROWS = 2

# (piece kind, color) → (sheet column, sheet row)
SPRITE_CELLS: dict[tuple[PieceType, Color], tuple[int, int]] = {
    (PieceType.KING, Color.WHITE): (0, 0),
    (PieceType.QUEEN, Color.WHITE): (1, 0),
    (PieceType.BISHOP, Color.WHITE): (2, 0),
    (PieceType.KNIGHT, Color.WHITE): (3, 0),
    (PieceType.ROOK, Color.WHITE): (4, 0),
    (PieceType.PAWN, Color.WHITE): (5, 0),
    (PieceType.KING, Color.BLACK): (0, 1),
    (PieceType.QUEEN, Color.BLACK): (1, 1),
    (PieceType.BISHOP, Color.BLACK): (2, 1),
    (PieceType.KNIGHT, Color.BLACK): (3, 1),
    (PieceType.ROOK, Color.BLACK): (4, 1),
    (PieceType.PAWN, Color.BLACK): (5, 1),
}

_renderer: QSvgRenderer | None = None


def sheet_renderer() -> QSvgRenderer:
    """Load and cache the QSvgRenderer for the sprite sheet."""
    global _renderer
    if _renderer is None:
        renderer = QSvgRenderer(str(SHEET_PATH))
        if not renderer.isValid():
            raise FileNotFoundError(f"SVG sprite sheet not found or invalid: {SHEET_PATH}")
        _renderer = renderer
    return _renderer


def sprite_rect(piece: Piece, size: int) -> QRect:
    """Sub-image of a sheet rendered at *size* px per sprite."""
    col, row = SPRITE_CELLS[(piece.piece_type, piece.color)]
    return QRect(col * size, row * size, size, size)


@lru_cache(maxsize=8)
def _sheet_image(size: int) -> QImage:
    image = QImage(
        SHEET_COLUMNS * size, SHEET_ROWS * size, QImage.Format.Format_ARGB32_Premultiplied
    )
    image.fill(Qt.GlobalColor.transparent)

    painter = QPainter(image)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
    sheet_renderer().render(
        painter, QRectF(0, 0, SHEET_COLUMNS * size, SHEET_ROWS * size)
    )
    painter.end()
    return image


@lru_cache(maxsize=128)
def piece_pixmap(piece: Piece, size: int) -> QPixmap:
    """Return the *size* × *size* sprite for *piece*."""
    return QPixmap.fromImage(_sheet_image(size).copy(sprite_rect(piece, size)))
