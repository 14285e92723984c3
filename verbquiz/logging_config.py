"""Logging configuration for the app."""
import logging
import sys
from typing import Optional, Union

from verbquiz.config import LOG_FORMAT, LOG_LEVEL


def setup_logging(level: Optional[Union[int, str]] = None) -> None:
    """Configure the root logger with a single stdout handler."""
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove any existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    root_logger.info(f"Logging configured with level: {logging.getLevelName(level)}")
