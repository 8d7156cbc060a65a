"""Logging configuration using loguru.

pathlex disables its own logger on import so embedding applications see
nothing unless they opt in. The CLI opts in through configure_logging().
"""

import sys

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(level: str = "WARNING") -> None:
    """Send pathlex log records at or above level to stderr.

    Args:
        level: loguru level name, e.g. "DEBUG"
    """
    # Remove default handler
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level.upper())
    logger.enable("pathlex")
    logger.debug("Logging configured: level={}", level)
