"""Logging setup for the subdemux logger tree."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "subdemux"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FORMAT_DEBUG = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"


def _level(verbose: bool, debug: bool, quiet: bool) -> int:
    if verbose or debug:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def setup_logging(verbose: bool = False, debug: bool = False, quiet: bool = False) -> logging.Logger:
    """Send subdemux records to stderr, keeping stdout for cue output.

    ``quiet`` keeps only warnings and errors; ``verbose`` or ``debug`` win over it.
    Calling this again replaces the previous handler.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT_DEBUG if debug else LOG_FORMAT))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_level(verbose, debug, quiet))
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    return logging.getLogger(name)
