"""
Logging setup for the longcalc console.

Library modules only create loggers; handlers are installed here, and only
when the console asks for them.

Usage:
    from longcalc.logging_config import configure_logging, get_logger

    configure_logging("DEBUG")
    logger = get_logger(__name__)
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

LOG_FORMAT = "[%(asctime)s] [%(levelname)-8s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Environment variable consulted when no level is given explicitly
LOG_LEVEL_ENV = "LONGCALC_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

ROOT_LOGGER_NAME = "longcalc"


def resolve_level(level: str | int | None = None) -> int:
    """
    Turn a level name or number into a logging level.

    Falls back to $LONGCALC_LOG_LEVEL, then WARNING.

    Raises:
        ValueError: If the name is not a known logging level
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(level: str | int | None = None, stream: TextIO | None = None) -> logging.Logger:
    """
    Install a single stream handler on the package logger.

    Calling this again replaces the previous handler instead of stacking
    another one.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(resolve_level(level))
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
