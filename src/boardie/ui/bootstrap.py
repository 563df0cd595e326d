"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from boardie.config import AppConfig
from boardie.core.errors import InvalidFenFormat

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication, config: AppConfig) -> None:
    """Apply app-wide settings and theme."""
    from boardie.ui.styles.theme import APP_STYLE

    app.setApplicationName(config.title)
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None, config: AppConfig | None = None
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication, QMessageBox

    from boardie.game.controller import BoardController
    from boardie.ui.main_window import MainWindow

    config = config or AppConfig()
    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app, config)

    try:
        controller = BoardController(config.start_fen, board_px=config.window_size)
    except InvalidFenFormat as exc:
        _LOGGER.error("Cannot start: %s", exc)
        QMessageBox.critical(None, config.title, f"Invalid starting position.\n\n{exc}")
        return 1

    window = MainWindow(controller, config)
    window.show()

    return app.exec()
