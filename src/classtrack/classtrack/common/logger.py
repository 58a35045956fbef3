"""
Application-wide logger.
"""
from __future__ import annotations

import logging
import sys

LOGGER_NAME = "classtrack"


def setup_logger(level: str | int = logging.INFO) -> logging.Logger:
    """
    Configures and returns the application logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(asctime)s - %(module)s - %(levelname)s - %(message)s"))
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger of the application logger, e.g. `classtrack.attendance.aggregator`."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
