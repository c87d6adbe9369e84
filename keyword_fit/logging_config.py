"""
Logging configuration for the project.
"""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(filename)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_LEVEL_ENV = "KEYWORD_FIT_LOG_LEVEL"


def resolve_log_level(default: int = logging.INFO) -> int:
    """Read the log level name from the environment, falling back to `default`."""
    name = os.getenv(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def configure_logging(level: int | None = None) -> None:
    if level is None:
        level = resolve_log_level()
    if not logging.getLogger().handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT)
    logging.getLogger("keyword_fit").setLevel(level)
