"""Logging setup for emdocs."""

from __future__ import annotations

import logging
import sys

from .config import LOG_FORMAT


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the package logger once and return it.

    Args:
        verbose: Log at DEBUG instead of WARNING

    Returns:
        The ``emdocs`` logger
    """
    log = logging.getLogger("emdocs")
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if log.handlers:
        return log

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    log.addHandler(handler)
    log.propagate = False
    return log
