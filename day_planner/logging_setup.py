"""Console logging for planner entry points."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "day_planner"


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Attach a single stdout handler to the package logger.

    Safe to call repeatedly; later calls only adjust the level.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    return logger


__all__ = ["setup_logging", "LOGGER_NAME"]
