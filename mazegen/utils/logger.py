"""Logging setup for the maze engine.

Every engine module holds a module-level ``LOGGER`` from :func:`get_logger`,
so all records live under the ``mazegen`` namespace: INFO for finished
mazes, DEBUG for the carve/shortcut/solve phases, ERROR for failed
validation.
"""

from __future__ import annotations

import logging
from typing import Optional

ENGINE_LOGGER_NAME = "mazegen"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO, engine_level: Optional[int] = None) -> None:
    """Install one stderr handler on the root logger.

    ``engine_level`` tunes the ``mazegen`` namespace on its own, e.g. DEBUG
    to trace generation phases while everything else stays at ``level``.
    """

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    logging.getLogger(ENGINE_LOGGER_NAME).setLevel(engine_level if engine_level is not None else logging.NOTSET)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the engine namespace, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or ENGINE_LOGGER_NAME)
