"""MainWindow — top-level window holding the board."""

from __future__ import annotations

from PyQt6.QtWidgets import QMainWindow

from boardie.config import AppConfig
from boardie.game.controller import BoardController
from boardie.game.state import GameState, MoveRecord
from boardie.ui.board.board_view import BoardView
from boardie.ui.sounds import SoundPlayer


class MainWindow(QMainWindow):
    """Fixed-size window showing one interactive board."""

    def __init__(
        self,
        controller: BoardController,
        config: AppConfig | None = None,
        sound_player: SoundPlayer | None = None,
    ) -> None:
        super().__init__()
        self._config = config or AppConfig()
        self._controller = controller
        self._sound_player = sound_player or SoundPlayer(
            enabled=self._config.sound_enabled,
            volume=self._config.sound_volume,
        )

        self.setWindowTitle(self._config.title)
        size = self._config.window_size
        if self._config.resizable:
            self.resize(size, size)
        else:
            self.setFixedSize(size, size)

        self._board_view = BoardView(controller)
        self.setCentralWidget(self._board_view)

        self._connect_game_events()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> BoardController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    # ── Game events ──────────────────────────────────────────────────────

    def _connect_game_events(self) -> None:
        self._controller.events.on_move.append(self._on_move)

    def _on_move(self, record: MoveRecord, state: GameState) -> None:
        self._sound_player.play_move_sound(record, state)
