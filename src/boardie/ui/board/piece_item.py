"""PieceItem — a chess piece sprite on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtWidgets import QGraphicsPixmapItem

from boardie.core.piece import Piece
from boardie.ui.resources import piece_pixmap


class PieceItem(QGraphicsPixmapItem):
    """A single piece drawn from the sprite sheet; clicks are handled by the scene."""

    def __init__(self, piece: Piece, tile_size: int) -> None:
        super().__init__(piece_pixmap(piece, tile_size))
        self.setZValue(1)
