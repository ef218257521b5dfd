"""Logging utilities for the weather tools package."""

import logging
import sys
from typing import Union

_LOGGER_NAME = "weather_tools"


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance for the package.

    Args:
        name: Optional sub-logger name. If None, returns the root package logger.

    Returns:
        The requested logger.
    """
    if name:
        if name.startswith(_LOGGER_NAME):
            return logging.getLogger(name)
        return logging.getLogger(f"{_LOGGER_NAME}.{name}")
    return logging.getLogger(_LOGGER_NAME)


def setup_logging(
    level: Union[int, str] = logging.WARNING,
    format_str: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
) -> None:
    """Attach a stderr handler to the package logger.

    Stdout is reserved for the assistant's answer, so log records always go to stderr.
    Calling this more than once keeps the first handler.

    Args:
        level: Logging level, either numeric or a level name such as "DEBUG".
        format_str: Log format string.
    """
    logger = logging.getLogger(_LOGGER_NAME)

    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_str))
    logger.addHandler(handler)


# Default NullHandler avoids "No handler found" warnings when used as a library
logging.getLogger(_LOGGER_NAME).addHandler(logging.NullHandler())
