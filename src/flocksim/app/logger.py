from __future__ import annotations

import sys

from loguru import logger

_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def configure_logging(level: str = "INFO") -> None:
    """Send flocksim logs to stderr at ``level``, replacing any earlier sinks."""
    logger.remove()
    logger.add(sys.stderr, format=_FORMAT, level=level.upper(), colorize=True)
