"""
Logging utilities for csvtable.

Modules log through `logging.getLogger(__name__)`, which places them under the
"csvtable" logger. Nothing here runs on import; applications (and the CLI
action) call setup_logger() once.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(name: str = 'csvtable',
                 level: int | str = logging.WARNING,
                 log_file: Optional[Path] = None,
                 console_output: bool = True) -> logging.Logger:
    """
    Set up a logger with file and console handlers.

    Args:
        name: Logger name
        level: Logging level (int or level name such as "DEBUG")
        log_file: Path to log file (optional)
        console_output: Whether to output to console (stderr)

    Returns:
        Configured logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console_output:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str = 'csvtable') -> logging.Logger:
    """Get a logger instance"""
    return logging.getLogger(name)
