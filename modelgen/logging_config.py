"""Logging configuration for modelgen.

Console output goes through rich's ``RichHandler``; an optional plain-text
file handler can be attached for CI logs.
"""

import logging
from pathlib import Path

from rich.logging import RichHandler

LOGGER_NAME = "modelgen"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(level: int | str = logging.WARNING, log_file: str | Path | None = None) -> logging.Logger:
    """Configure the package logger.

    Args:
        level: Logging level for all handlers.
        log_file: Optional path of a file to mirror log records to.

    Returns:
        The configured package root logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Re-running setup (tests, repeated CLI calls) must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(show_path=False, rich_tracebacks=True)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace."""
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
