"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers under the ``surrogate`` namespace.
    - Allow an optional verbose/debug mode for the CLI.

Notes/Edge cases:
    - Configuration is idempotent: repeated calls adjust the level but never
      attach a second handler.
    - Library code only obtains loggers; handlers are attached by the CLI.

Dependencies:
    - Python `logging` module.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

__all__ = ["ROOT_LOGGER", "get_logger", "configure_logging"]

ROOT_LOGGER = "surrogate"
_HANDLER_NAME = "surrogate-stderr"

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


class _StderrHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Stream handler that always writes to the current ``sys.stderr``."""

    @property  # type: ignore[override]
    def stream(self) -> Any:
        return sys.stderr

    @stream.setter
    def stream(self, value: Any) -> None:
        pass


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package namespace."""

    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """Attach a single stderr handler to the package logger and set ``level``."""

    logger = logging.getLogger(ROOT_LOGGER)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"unknown log level: {level}")
    logger.setLevel(level)
    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = _StderrHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    return logger
