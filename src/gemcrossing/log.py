"""Logging configuration."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "GEMCROSSING_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configure root logging once; env ``GEMCROSSING_LOG_LEVEL`` wins."""
    root = logging.getLogger()
    if root.handlers:
        return

    name = (os.environ.get(LOG_LEVEL_ENV) or level or "INFO").strip().upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logging.basicConfig(level=resolved, format=LOG_FORMAT, datefmt="%H:%M:%S")
    logging.getLogger("gemcrossing").debug("logging initialized (level=%s)", logging.getLevelName(resolved))
