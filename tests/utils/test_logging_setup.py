import logging
from logging.handlers import TimedRotatingFileHandler

import pytest

from wordcrawl.logging_setup import configure_logging, get_log_level


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize("name,level", [
    ("verbose", logging.DEBUG),
    ("Debug", logging.DEBUG),
    ("information", logging.INFO),
    ("WARNING", logging.WARNING),
    ("error", logging.ERROR),
    ("fatal", logging.CRITICAL),
    ("loud", logging.INFO),
    (None, logging.INFO),
    ("", logging.INFO),
])
def test_get_log_level(name, level):
    assert get_log_level(name) == level


def test_configure_logging_console_only(restore_root_logger):
    assert configure_logging("error") == logging.ERROR
    root = restore_root_logger
    assert root.level == logging.ERROR
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)


def test_configure_logging_with_file(tmp_path, restore_root_logger):
    log_file = tmp_path / "crawl.log"
    configure_logging("debug", str(log_file))
    root = restore_root_logger
    file_handlers = [h for h in root.handlers if isinstance(h, TimedRotatingFileHandler)]
    assert len(file_handlers) == 1

    logging.getLogger("wordcrawl.test").debug("written %s", "here")
    file_handlers[0].flush()
    assert "written here" in log_file.read_text(encoding="utf-8")
