"""Static application configuration."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from boardie.core.notation import STARTING_FEN

_LOGGER = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class AppConfig:
    """Startup settings. The window is fixed-size and not resizable."""

    title: str = "Chess"
    window_size: int = 600
    resizable: bool = False
    start_fen: str = STARTING_FEN

    # Sound
    sound_enabled: bool = True
    sound_volume: int = 80  # 0–100

    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppConfig:
        """Defaults overridden by ``BOARDIE_*`` environment variables.

        Unparseable values are logged and the default is kept.
        """
        env = os.environ if environ is None else environ
        default = cls()

        fen = env.get("BOARDIE_FEN", "").strip() or default.start_fen

        sound = default.sound_enabled
        raw_sound = env.get("BOARDIE_SOUND")
        if raw_sound is not None:
            value = raw_sound.strip().lower()
            if value in _TRUE_VALUES:
                sound = True
            elif value in _FALSE_VALUES:
                sound = False
            else:
                _LOGGER.warning("Ignoring BOARDIE_SOUND=%r", raw_sound)

        volume = default.sound_volume
        raw_volume = env.get("BOARDIE_VOLUME")
        if raw_volume is not None:
            try:
                volume = max(0, min(100, int(raw_volume)))
            except ValueError:
                _LOGGER.warning("Ignoring BOARDIE_VOLUME=%r", raw_volume)

        level = default.log_level
        raw_level = env.get("BOARDIE_LOG_LEVEL")
        if raw_level is not None:
            if isinstance(logging.getLevelName(raw_level.upper()), int):
                level = raw_level.upper()
            else:
                _LOGGER.warning("Ignoring BOARDIE_LOG_LEVEL=%r", raw_level)

        return cls(
            start_fen=fen,
            sound_enabled=sound,
            sound_volume=volume,
            log_level=level,
        )
