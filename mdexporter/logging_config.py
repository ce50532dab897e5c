"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def level_for_verbosity(verbosity: int) -> int:
    """Map ``-v`` counts to log levels (0=WARNING, 1=INFO, 2+=DEBUG)."""

    if verbosity >= 2:
        return logging.DEBUG
    if verbosity >= 1:
        return logging.INFO
    return logging.WARNING


def setup_logging(verbosity: int = 0) -> logging.Logger:
    """Configure the ``mdexporter`` logger and return it.

    Records go to stderr; the default level only lets warnings through.
    """

    logger = logging.getLogger("mdexporter")
    logger.setLevel(level_for_verbosity(verbosity))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(handler)
    return logger
