import logging

import pytest

from ripples.viewer.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_handlers():
    yield
    logger = logging.getLogger("ripples")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_returns_package_logger():
    logger = setup_logging(logging.DEBUG)
    assert logger.name == "ripples"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_repeated_setup_does_not_stack_handlers():
    setup_logging()
    logger = setup_logging()
    assert len(logger.handlers) == 1


def test_log_file_receives_child_records(tmp_path):
    log_file = tmp_path / "ripples.log"
    logger = setup_logging(logging.INFO, log_file=str(log_file))
    assert len(logger.handlers) == 2

    logging.getLogger("ripples.engine.library").warning("Matcap %d failed to load", 4)
    logging.getLogger("ripples.engine.library").debug("not written")
    for handler in logger.handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "ripples.engine.library - WARNING - Matcap 4 failed to load" in text
    assert "not written" not in text
