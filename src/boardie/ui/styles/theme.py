"""Visual theme constants for the board window."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_selected: QColor  # selected piece origin

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 210, 185),  # sand
            dark_square=QColor(162, 110, 91),  # clay
            highlight_selected=QColor(255, 255, 0, 100),  # yellow transparent
        )


APP_STYLE = """
QMainWindow {
    background-color: #2b2b2b;
}
QGraphicsView {
    border: none;
    background-color: #2b2b2b;
}
"""
