"""Centralized logging configuration for the ``coinbook`` packages.

``configure_logging`` attaches a single handler to the package root logger and
is meant to be called once by an entry point. Library modules never attach
handlers of their own; they call ``get_logger(__name__)`` and rely on the entry
point's configuration.

While the curses UI owns the terminal, log records must not reach stdout or
stderr, so the full-screen CLI only logs when a log file is configured.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import IO

_PKG_LOGGER_NAME = "coinbook"
_CONFIGURED = False

DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _parse_level(level: int | str | None) -> int:
    if level is None:
        level = os.getenv("COINBOOK_LOG_LEVEL")
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
    return logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    path: str | Path | None = None,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Configure the package root logger exactly once.

    Parameters
    ----------
    level:
        Logging level as ``int`` or level-name string. ``None`` falls back to
        ``COINBOOK_LOG_LEVEL`` and then ``logging.INFO``.
    path:
        Append records to this file. Takes precedence over ``stream``.
    fmt:
        Optional format string, defaults to ``DEFAULT_FORMAT``.
    stream:
        Stream for a ``StreamHandler`` when no ``path`` is given (defaults to
        ``sys.stderr``).
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    if path is not None:
        handler: logging.Handler = logging.FileHandler(path, encoding="utf-8")
    else:
        handler = logging.StreamHandler(stream or sys.stderr)
    numeric = _parse_level(level)
    handler.setLevel(numeric)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))

    logger.setLevel(numeric)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger by name, silent until ``configure_logging`` runs."""

    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
