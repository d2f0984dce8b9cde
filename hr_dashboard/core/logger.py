"""Logging setup for the HR dashboard."""

import logging
import sys

LOGGER_NAME = "hr_dashboard"


def setup_logger(name: str = LOGGER_NAME, level: int | str = logging.INFO) -> logging.Logger:
    """
    Configure and return the application logger.

    Idempotent: a logger that already has handlers is returned untouched, so
    re-importing the app (tests, reloaders) does not duplicate output.
    """
    log = logging.getLogger(name)
    if log.handlers:
        return log

    log.setLevel(level)
    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(fmt)
    log.addHandler(h)
    return log


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return a child of the application logger."""
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
