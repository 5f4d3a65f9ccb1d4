import logging
from logging.handlers import RotatingFileHandler

import pytest

from fileops.core.logging import log_path
from fileops.core.logging_setup import level_from_name, setup_logging


@pytest.fixture
def clean_logger():
    root = logging.getLogger("fileops")
    saved = list(root.handlers)
    for h in saved:
        root.removeHandler(h)
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in saved:
        root.addHandler(h)


def test_setup_logging_writes_to_home(clean_logger, isolated_home):
    setup_logging(logging.INFO)
    logging.getLogger("fileops.test").info("hello log")
    for h in clean_logger.handlers:
        h.flush()
    assert log_path().parent == isolated_home / ".fileops"
    assert "hello log" in log_path().read_text(encoding="utf-8")


def test_setup_logging_does_not_duplicate_handlers(clean_logger):
    setup_logging(logging.INFO)
    setup_logging(logging.DEBUG)
    handlers = [h for h in clean_logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(handlers) == 1
    assert handlers[0].level == logging.DEBUG


def test_level_from_name():
    assert level_from_name("debug") == logging.DEBUG
    assert level_from_name("WARNING") == logging.WARNING
    assert level_from_name("nonsense") == logging.INFO
