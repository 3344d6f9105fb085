"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers under the ``clientaddress`` namespace.
    - Allow optional verbose/debug modes from the command line.

Notes/Edge cases:
    - Configuration is idempotent: repeated calls adjust the level but never
      stack a second handler.
    - Credentials must never be passed to a logger.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER = "clientaddress"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package root logger."""

    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Install a single stderr handler on the package logger and set ``level``."""

    global _handler

    root = logging.getLogger(ROOT_LOGGER)
    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_handler)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    root.setLevel(level)
    return root


__all__ = ["ROOT_LOGGER", "get_logger", "configure_logging"]
