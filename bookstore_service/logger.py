"""Shared logger for the bookstore query service."""

import logging
import sys

from config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LEVEL = logging.INFO


def resolve_level(name: str) -> int:
    """Map a level name to its number, falling back to INFO for unknown names."""
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else DEFAULT_LEVEL


logger = logging.getLogger("bookstore_service")

if not logger.handlers:
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(resolve_level(LOG_LEVEL))
    logger.propagate = False
    if not isinstance(logging.getLevelName(LOG_LEVEL), int):
        logger.warning("Unknown LOG_LEVEL %r, using INFO", LOG_LEVEL)
