"""
Tests for logging setup (csvtable/utils/logging_utils.py).
"""

import logging

from csvtable.utils.logging_utils import LOG_FORMAT, get_logger, setup_logger


def test_setup_logger_console_only():
    logger = setup_logger(name="csvtable.test_console", level="debug")

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)
    assert logger.handlers[0].formatter._fmt == LOG_FORMAT


def test_setup_logger_with_file(tmp_path):
    log_file = tmp_path / "csvtable.log"
    logger = setup_logger(name="csvtable.test_file", log_file=log_file, console_output=False)

    logger.warning("hello")
    for handler in logger.handlers:
        handler.flush()

    assert len(logger.handlers) == 1
    assert "csvtable.test_file - WARNING - hello" in log_file.read_text()

    for handler in logger.handlers:
        handler.close()


def test_setup_logger_replaces_handlers():
    setup_logger(name="csvtable.test_repeat")
    logger = setup_logger(name="csvtable.test_repeat")

    assert len(logger.handlers) == 1


def test_module_loggers_live_under_package_logger():
    from csvtable.data import codec

    assert codec.logger.name.startswith(get_logger().name + ".")
