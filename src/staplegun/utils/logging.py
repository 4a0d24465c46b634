"""Logging configuration for Staplegun."""

import logging
import sys
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(
    level: LogLevel | None = None,
    format_string: str | None = None,
    stream: bool = True,
) -> None:
    """
    Set up logging for Staplegun.

    Args:
        level: Logging level. Falls back to the configured log level if None.
        format_string: Custom format string. Uses default if None.
        stream: If True, log to stdout.
    """
    if level is None:
        from staplegun.config import get_config

        level = get_config().log_level.upper()

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Get the root staplegun logger
    logger = logging.getLogger("staplegun")
    logger.setLevel(getattr(logging, level))

    # Clear existing handlers
    logger.handlers.clear()

    if stream:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(format_string))
        logger.addHandler(handler)

