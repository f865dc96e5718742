import logging

import pytest
from rich.logging import RichHandler

from pokedex.utils import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers = handlers
    root.setLevel(level)


def test_console_and_file_levels(tmp_path, restore_root_logger):
    log_file = tmp_path / "logs" / "pokedex.log"
    setup_logging(level="INFO", log_file=log_file)

    root = restore_root_logger
    console_handler = next(h for h in root.handlers if isinstance(h, RichHandler))
    file_handler = next(h for h in root.handlers if isinstance(h, logging.FileHandler))

    assert root.level == logging.DEBUG
    assert console_handler.level == logging.INFO
    assert file_handler.level == logging.DEBUG
    assert log_file.parent.exists()


def test_debug_messages_reach_the_file(tmp_path, restore_root_logger):
    log_file = tmp_path / "pokedex.log"
    setup_logging(level="WARNING", log_file=log_file)

    logging.getLogger("pokedex.test").debug("swept 3 entries")
    for h in restore_root_logger.handlers:
        h.flush()

    assert "swept 3 entries" in log_file.read_text()


def test_console_only_by_default(restore_root_logger, monkeypatch):
    from pokedex.config import settings
    monkeypatch.setattr(settings, "LOG_FILE_ENABLED", False)

    setup_logging()

    assert not any(isinstance(h, logging.FileHandler) for h in restore_root_logger.handlers)
