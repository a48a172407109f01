"""Tests for logging setup."""

import logging

import colorlog
import pytest

from omani_lexicon.core.utils import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield root
    for h in list(root.handlers):
        if isinstance(h.formatter, colorlog.ColoredFormatter):
            root.removeHandler(h)
    root.setLevel(level)


@pytest.mark.parametrize(
    "kwargs,level",
    [
        ({}, logging.INFO),
        ({"verbose": True}, logging.DEBUG),
        ({"verbose": True, "warnings_only": True}, logging.WARNING),
        ({"warnings_only": True, "errors_only": True}, logging.ERROR),
    ],
)
def test_setup_logging_levels(restore_root_logger, kwargs, level):
    setup_logging(**kwargs)
    assert restore_root_logger.level == level


def test_setup_logging_replaces_handlers(restore_root_logger):
    setup_logging()
    setup_logging()
    handlers = restore_root_logger.handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0].formatter, colorlog.ColoredFormatter)
