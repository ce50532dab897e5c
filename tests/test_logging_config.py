from __future__ import annotations

import logging

import pytest
from mdexporter.logging_config import level_for_verbosity, setup_logging


@pytest.mark.parametrize(
    ("verbosity", "level"),
    [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
)
def test_level_for_verbosity(verbosity: int, level: int) -> None:
    assert level_for_verbosity(verbosity) == level


def test_setup_logging_adds_single_handler() -> None:
    logger = logging.getLogger("mdexporter")
    saved = list(logger.handlers)
    for handler in saved:
        logger.removeHandler(handler)
    try:
        setup_logging(1)
        setup_logging(2)

        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        for handler in saved:
            logger.addHandler(handler)
        logger.setLevel(logging.NOTSET)
