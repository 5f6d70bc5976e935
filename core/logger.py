"""
Logging helper: one place that decides handler, format and level.
"""

from __future__ import annotations

import logging
import os

LOG_LEVEL = os.getenv("CASHFLOW_LOG_LEVEL", "WARNING")
LOG_FORMAT = os.getenv("CASHFLOW_LOG_FORMAT", "%(asctime)s [%(levelname)s] %(name)s: %(message)s")


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance for a module.

    Args:
        name: Module name (typically __name__)
    """
    logger = logging.getLogger(name)

    # Only add handler if not already present (avoid duplicates)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(getattr(logging, LOG_LEVEL.upper(), logging.WARNING))
    return logger
