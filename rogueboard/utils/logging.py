"""Logging setup shared by the API server and the headless CLI."""

from __future__ import annotations

import logging
import sys
from typing import IO

# Per-tick chatter that drowns out level and game-over lines at DEBUG
_CHATTY_LOGGERS = ("rogueboard.engine.turn_scheduler", "uvicorn.access")


def setup_logging(
    level: str = "INFO",
    stream: IO[str] | None = None,
    quiet_ticks: bool = False,
) -> logging.Handler:
    """Install one handler on the root logger and return it.

    With *quiet_ticks* the turn scheduler and HTTP access logs are held at
    WARNING regardless of *level*.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)-5s] %(name)-34s | %(message)s",
        datefmt="%H:%M:%S",
    ))

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING if quiet_ticks else logging.NOTSET)
    return handler
