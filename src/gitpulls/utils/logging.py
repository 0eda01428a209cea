"""Logging setup."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """
    Route the ``gitpulls`` loggers to stderr through rich.

    Calling it again only changes the level.

    Args:
        level: Log level name or number

    Returns:
        The package logger
    """
    logger = logging.getLogger("gitpulls")
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True), show_path=False, rich_tracebacks=True
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
