"""Move sound effect player using Qt multimedia."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QUrl
from PyQt6.QtMultimedia import QSoundEffect

from boardie.game.state import GameState, MoveRecord
from boardie.runtime_assets import asset_path

_LOGGER = logging.getLogger(__name__)
_SOUNDS_DIR = asset_path("sounds")


class SoundPlayer:
    """Plays the move sound effect (WAV via QSoundEffect).

    The effect is pre-loaded at startup so playback is immediate.  A new
    move always interrupts the previous sound.
    """

    _NAMES: dict[str, str] = {
        "move": "move.wav",
    }

    def __init__(self, *, enabled: bool = True, volume: int = 80) -> None:
        self._enabled = enabled
        self._volume = max(0, min(100, volume)) / 100.0
        self._effects: dict[str, QSoundEffect] = {}
        self._current: QSoundEffect | None = None

        for name, filename in self._NAMES.items():
            path = _SOUNDS_DIR / filename
            if not path.exists():
                _LOGGER.warning("Sound file not found: %s", path)
                continue
            effect = QSoundEffect()
            effect.setSource(QUrl.fromLocalFile(str(path)))
            effect.setVolume(self._volume)
            self._effects[name] = effect

    # ── Public API ────────────────────────────────────────────────────────

    def play_move_sound(self, record: MoveRecord, state: GameState) -> None:
        """Play the move sound for a completed move."""
        self._play("move")

    # ── Internal helpers ──────────────────────────────────────────────────

    def _play(self, name: str) -> None:
        if not self._enabled:
            return
        effect = self._effects.get(name)
        if effect is None:
            return
        if self._current is not None and self._current.isPlaying():
            self._current.stop()
        self._current = effect
        effect.play()
