"""
Logging utilities for the command framework.
Uses Rich for colored console output.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

# Custom theme for logging
CUSTOM_THEME = Theme({
    "logging.level.success": "green",
    "logging.level.command": "cyan",
    "logging.level.debug": "dim cyan",
})

console = Console(theme=CUSTOM_THEME, stderr=True)

LOG_FORMAT = "[%(asctime)s] [%(name)s] %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Set up a logger with RichHandler.

    Args:
        name: Logger name
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if level is None:
        level = logging.INFO

    logger.setLevel(level)

    # Replace only our own handler so repeated calls don't stack output
    for existing in list(logger.handlers):
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)

    handler = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Loggers already configured by setup_logging are returned as-is.
    """
    logger = logging.getLogger(name)
    if any(isinstance(h, RichHandler) for h in logger.handlers):
        return logger
    return setup_logging(name)


def set_level(level: int, *names: str) -> None:
    """Change the level of the named loggers and their Rich handlers."""
    for name in names:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        for handler in logger.handlers:
            if isinstance(handler, RichHandler):
                handler.setLevel(level)
