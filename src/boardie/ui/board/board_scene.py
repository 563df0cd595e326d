"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

import math

from PyQt6.QtCore import QObject, QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QPen
from PyQt6.QtWidgets import QGraphicsRectItem, QGraphicsScene, QGraphicsSceneMouseEvent

from boardie.core.types import BOARD_SIZE, Square, col_of, row_of
from boardie.game.interfaces import ClickResult, IBoardController
from boardie.game.state import GameState
from boardie.ui.board.piece_item import PieceItem
from boardie.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the squares, the selection highlight, and piece items.

    The scene is a pure reader of the controller's current snapshot: every
    state change triggers :meth:`set_state`, which rebuilds the highlight and
    piece layers from that snapshot alone.
    """

    def __init__(
        self, controller: IBoardController, parent: QObject | None = None
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._theme = BoardTheme.default()
        self._state: GameState | None = None

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, PieceItem] = {}

        self._draw_board()
        controller.events.on_state_changed.append(self.set_state)
        self.set_state(controller.state)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def tile(self) -> float:
        return self._controller.square_size

    @property
    def board_px(self) -> float:
        return self.tile * BOARD_SIZE

    def set_state(self, state: GameState) -> None:
        """Redraw highlight and pieces from *state*."""
        self._state = state
        self._sync_highlight()
        self._sync_pieces()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw the 64 squares."""
        for sq in range(BOARD_SIZE * BOARD_SIZE):
            row, col = row_of(sq), col_of(sq)
            is_dark = (row + col) % 2 == 0
            color = self._theme.dark_square if is_dark else self._theme.light_square
            rect = self._make_rect(sq, color)
            rect.setZValue(0)
            self._square_items[sq] = rect

        self.setSceneRect(0, 0, self.board_px, self.board_px)

    # ── Snapshot synchronisation ─────────────────────────────────────────

    def _sync_highlight(self) -> None:
        for item in self._highlight_items:
            self.removeItem(item)
        self._highlight_items.clear()

        if self._state is None or self._state.selected_square is None:
            return
        rect = self._make_rect(self._state.selected_square, self._theme.highlight_selected)
        rect.setZValue(0.8)
        self._highlight_items.append(rect)

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current snapshot."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._state is None:
            return

        size = max(int(round(self.tile)), 1)
        for cell in self._state.board.occupied():
            assert cell.piece is not None
            item = PieceItem(cell.piece, size)
            x, y = self._square_origin(cell.index)
            item.setPos(x, y)
            self.addItem(item)
            self._piece_items[cell.index] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)
        self.click_at(event.scenePos())
        event.accept()

    def click_at(self, pos: QPointF) -> ClickResult:
        """Forward a scene-space click to the controller."""
        x, y = self._to_board_coords(pos)
        return self._controller.click(x, y)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _to_board_coords(self, pos: QPointF) -> tuple[float, float]:
        """Scene position (origin top-left) → board coordinates (origin bottom-left).

        Rows are mirrored; a point on a square edge stays in the square drawn
        below it in scene space.
        """
        y = pos.y()
        if not (0.0 <= y < self.board_px):
            return pos.x(), -1.0
        return pos.x(), math.nextafter(self.board_px - y, -math.inf)

    def _square_origin(self, sq: Square) -> tuple[float, float]:
        """Top-left scene position of *sq*; row 0 is drawn at the bottom."""
        t = self.tile
        return col_of(sq) * t, (BOARD_SIZE - 1 - row_of(sq)) * t

    def _make_rect(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a filled rectangle covering *sq*."""
        t = self.tile
        x, y = self._square_origin(sq)
        rect = QGraphicsRectItem(x, y, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        self.addItem(rect)
        return rect
