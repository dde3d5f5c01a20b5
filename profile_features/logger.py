"""
Logging - one package logger for the validation layer

The checks report through a single named logger instead of printing.
It is quiet by default (WARNING); raise the level to DEBUG to see how
each argument was resolved.
"""

import logging
import sys
from typing import Optional

from .config import CONFIG


# ============================================================
# Logger setup
# ============================================================

def setup_logger(
    name: str = 'profile_features',
    level: int = logging.WARNING,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Set up a logger

    Args:
        name (str): Logger name
        level (int): Log level (logging.DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file (str, optional): Log file path. Console only when None
        format_string (str, optional): Log format. Default format when None

    Returns:
        logging.Logger: Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # drop existing handlers (avoid duplicate output)
    if logger.handlers:
        logger.handlers.clear()

    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    formatter = logging.Formatter(format_string, datefmt='%Y-%m-%d %H:%M:%S')

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


# ============================================================
# Default logger
# ============================================================

_default_logger = setup_logger(
    name='profile_features',
    level=CONFIG['LOG_LEVEL'],
    format_string='[%(levelname)s] %(name)s: %(message)s'
)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger

    Args:
        name (str, optional): Logger name. The package logger when None

    Returns:
        logging.Logger: Logger
    """
    if name is None:
        return _default_logger
    return logging.getLogger(name)


# ============================================================
# Helpers
# ============================================================

def log_debug(message: str, logger: Optional[logging.Logger] = None):
    """DEBUG level message."""
    if logger is None:
        logger = _default_logger
    logger.debug(message)


def log_warning(message: str, logger: Optional[logging.Logger] = None):
    """WARNING level message."""
    if logger is None:
        logger = _default_logger
    logger.warning(message)


def set_log_level(level: int, logger: Optional[logging.Logger] = None):
    """
    Change the log level

    Args:
        level (int): Log level (logging.DEBUG, INFO, WARNING, ERROR, CRITICAL)
        logger (logging.Logger, optional): Logger. The package logger when None
    """
    if logger is None:
        logger = _default_logger
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)
