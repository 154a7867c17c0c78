import logging

import pytest

from shuffle import config
from shuffle import configure_logging


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(config.LOGGER_NAME)
    saved = (list(logger.handlers), logger.level, logger.propagate)
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


def test_configure_logging_is_idempotent(tmp_path, clean_logger):
    first = configure_logging(tmp_path)
    second = configure_logging(tmp_path)

    assert first is second is clean_logger
    assert len(clean_logger.handlers) == 2
    assert clean_logger.propagate is False


def test_configure_logging_writes_to_rotating_file(tmp_path, clean_logger):
    logger = configure_logging(tmp_path / "logs", level=logging.DEBUG)
    logging.getLogger(f"{config.LOGGER_NAME}.state").debug("hello %s", "stack")
    for handler in logger.handlers:
        handler.flush()

    contents = (tmp_path / "logs" / config.LOG_FILE_NAME).read_text(encoding="utf-8")
    assert "DEBUG - shuffle.state - hello stack" in contents
