"""
Logging helpers

Module loggers live under the "vibe_builder" namespace. setup_logger()
attaches a single rich handler to that namespace; calling it again only
changes the level.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "vibe_builder"


def setup_logger(level: Optional[str] = None, console: Optional[Console] = None) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Logging level name (defaults to Config.LOG_LEVEL)
        console: Rich console to write to (defaults to stderr)

    Returns:
        The configured "vibe_builder" logger
    """
    if level is None:
        from ..config import Config
        level = "DEBUG" if Config.DEBUG else Config.LOG_LEVEL

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger inside the package namespace."""
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
