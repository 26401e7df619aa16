"""Loguru configuration for the weather client."""

import sys

from loguru import logger

from .config import settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level> | {extra}"
)


def setup_logging(level: str | None = None) -> int:
    """Configure loguru for structured logging.

    Replaces any existing handlers with a single stderr sink.

    Args:
        level: Log level; defaults to ``settings.LOG_LEVEL``

    Returns:
        The id of the installed handler
    """
    level = (level or settings.LOG_LEVEL).upper()

    # Remove default handler
    logger.remove()

    handler_id = logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=level,
        serialize=False,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    logger.info("Logging configured", level=level)
    return handler_id
