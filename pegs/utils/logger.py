"""Logging utilities tailored for board generation."""

from __future__ import annotations

import logging
from typing import Optional


# Loggers that trace every index change and move selection.
DIAGNOSTIC_LOGGERS = ("pegs.engine.move_index", "pegs.engine.generator")

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DIAGNOSTIC_FORMAT = "%(levelname)-7s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO, *, diagnostics: bool = False) -> None:
    """Configure root logging for the generator and solver.

    Generation may run many throwaway attempts, and each attempt performs
    hundreds of index updates, so that trace stays off unless
    ``diagnostics`` is set. Diagnostics raise only the generator loggers to
    DEBUG and drop timestamps, which keeps traces of two seeded runs
    diffable line by line. The root ``level`` still applies everywhere else.
    """

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt=DIAGNOSTIC_FORMAT if diagnostics else LOG_FORMAT,
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name in DIAGNOSTIC_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if diagnostics else logging.NOTSET)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "pegs")
