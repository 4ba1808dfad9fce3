"""Logging setup for the passarg package and its CLI."""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "passarg"

FORMATS = {
    "standard": "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    "json": (
        '{"time": "%(asctime)s", "level": "%(levelname)s", '
        '"module": "%(name)s", "message": "%(message)s"}'
    ),
}


def setup_logging(
    level: str = "WARNING", format_style: str = "standard", log_file: Optional[str] = None
) -> logging.Logger:
    """
    Route passarg's logs to stderr, and optionally a file.

    Only the package logger is configured, so an application embedding
    passarg keeps its own root logging. stdout is left for secrets.
    Calling again replaces the previous handlers.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format_style: 'standard' for humans, 'json' for log collectors
        log_file: Optional path that also receives every log line

    Returns:
        The package logger
    """
    formatter = logging.Formatter(FORMATS[format_style], datefmt="%Y-%m-%d %H:%M:%S")

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logger = logging.getLogger(PACKAGE_LOGGER)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(getattr(logging, level.upper()))
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Usage:
        from passarg.utils.logging import get_logger
        logger = get_logger(__name__)
    """
    return logging.getLogger(name)
