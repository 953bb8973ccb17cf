"""
Centralized logging configuration for Burstipy.

Two functions are provided:
1. setup_logging - Configure the package logger with console and optional file handlers
2. get_logger - Get a properly namespaced logger for a specific module

Usage:
    # In a script or notebook entry point:
    from Burstipy.shared.logging_config import setup_logging
    setup_logging(dev_mode=True)  # Enable development mode

    # In other modules:
    from Burstipy.shared.logging_config import get_logger
    log = get_logger(__name__)
    log.info("This is a log message")
"""
import os
import sys
import logging
from pathlib import Path
from datetime import datetime

PACKAGE_LOGGER_NAME = 'Burstipy'

DEFAULT_CONSOLE_LEVEL = logging.INFO
DEFAULT_FILE_LEVEL = logging.INFO
DEV_CONSOLE_LEVEL = logging.DEBUG
DEV_FILE_LEVEL = logging.DEBUG

STANDARD_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEV_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'


def setup_logging(dev_mode=False, log_dir=None, log_filename=None, stream=None):
    """
    Configure the logging system for Burstipy.

    Analysis runs are usually short scripts or notebook sessions, so file
    logging is opt-in: a file handler is only added when `log_dir` is given.

    Args:
        dev_mode (bool): If True, log DEBUG messages with file and line number.
        log_dir (Path, optional): Directory where a log file will be written.
        log_filename (str, optional): Name of the log file. A timestamped
            name is used if not provided.
        stream (file-like, optional): Console stream, defaults to sys.stdout.

    Returns:
        logging.Logger: The configured package logger
    """
    root_logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.setLevel(logging.DEBUG)

    console_level = DEV_CONSOLE_LEVEL if dev_mode else DEFAULT_CONSOLE_LEVEL
    file_level = DEV_FILE_LEVEL if dev_mode else DEFAULT_FILE_LEVEL
    formatter = logging.Formatter(DEV_FORMAT if dev_mode else STANDARD_FORMAT)

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file_path = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        os.makedirs(log_dir, exist_ok=True)

        if not log_filename:
            timestamp = datetime.now().strftime('%Y-%m-%d_%H-%M-%S')
            log_filename = f"burstipy_{timestamp}.log"

        log_file_path = log_dir / log_filename
        file_handler = logging.FileHandler(log_file_path)
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    mode_str = "DEVELOPMENT" if dev_mode else "PRODUCTION"
    root_logger.info(f"Burstipy logging initialized in {mode_str} mode")
    if log_file_path is not None:
        root_logger.info(f"Log file: {log_file_path}")

    return root_logger


def get_logger(name):
    """
    Get a logger with the specified name, namespaced under Burstipy.

    Args:
        name (str): The logger name, prefixed with 'Burstipy.' if not already.

    Returns:
        logging.Logger: A logger instance
    """
    if name != PACKAGE_LOGGER_NAME and not name.startswith(f'{PACKAGE_LOGGER_NAME}.'):
        name = f'{PACKAGE_LOGGER_NAME}.{name}'
    return logging.getLogger(name)
