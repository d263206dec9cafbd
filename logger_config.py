"""Logging setup shared by the API process and the Streamlit page.

Loggers are named ``api.*``, ``client.*`` or after the page; each top-level
part gets its own daily file so API and page logs stay apart when both run
from the same checkout.
"""

import logging
import sys
from datetime import datetime
from config import LOGS_PATH, LOG_LEVEL

_FORMAT = '%(asctime)s | %(levelname)-7s | %(name)s | %(message)s'


def log_file_for(name: str, day: datetime | None = None):
    """``api.employees`` -> logs/api_2026-10-19.log"""
    return LOGS_PATH / f"{name.split('.')[0]}_{(day or datetime.now()):%Y-%m-%d}.log"


def setup_logger(name: str) -> logging.Logger:
    """
    Configure logger with file + console handlers.

    Args:
        name: Logger name (``api.<module>``, ``client.<module>`` or the page name)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    # uvicorn installs root handlers; stop records printing twice
    logger.propagate = False

    # Streamlit re-executes the page on every rerun
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    try:
        LOGS_PATH.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file_for(name), encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    except (OSError, PermissionError):
        pass  # Console-only logging on read-only filesystems

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
