"""Logging setup for paper-export."""

from __future__ import annotations

import logging

LOGGER_NAME = "paper_export"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure logging for a CLI run.

    The package logger runs at INFO, or DEBUG with ``debug``.  The root logger
    stays at WARNING so third-party libraries stay quiet; package records
    still reach the root handler through propagation.
    """

    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, datefmt=DATE_FORMAT)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    return logger
