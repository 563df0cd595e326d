"""Application entry point."""

from __future__ import annotations

import logging
import sys

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Route log records to stderr at *level*."""
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=level, format=_LOG_FORMAT, datefmt="%H:%M:%S")


def main() -> None:
    """Launch the Boardie application."""
    from boardie.config import AppConfig
    from boardie.ui.bootstrap import run_application

    config = AppConfig.from_env()
    setup_logging(config.log_level)
    sys.exit(run_application(config=config))


if __name__ == "__main__":
    main()
