"""Centralized logging configuration for the ``ledger`` package.

This module provides two public helpers:

- ``configure_logging(...)``: attach a single ``StreamHandler`` to the package
  root logger (``"ledger"``). Called by the CLI at process startup.
- ``get_logger(name)``: acquire a logger by name, ensuring that the package
  root logger has at least a ``NullHandler`` attached when not configured so
  library use stays silent.

Library modules never attach their own handlers. They only call
``get_logger(__name__)`` and rely on the configuration done by the CLI or the
host application.

Two output formats are supported: plain text, and one JSON object per line
(via ``python-json-logger``) for log collectors.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

from pythonjsonlogger.json import JsonFormatter

_PKG_LOGGER_NAME = "ledger"
_TEXT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_handler: logging.Handler | None = None


def _parse_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    level = level.strip().upper()
    if level.isdigit():
        return int(level)
    numeric = getattr(logging, level, None)
    if isinstance(numeric, int):
        return numeric
    raise ValueError(f"Unknown log level: {level!r}")


def configure_logging(
    level: int | str = "WARNING",
    *,
    fmt: str = "text",
    stream: IO[str] | None = None,
) -> None:
    """Configure the package root logger.

    Calling this again replaces the handler installed by the previous call,
    so the CLI can be invoked repeatedly in one process (e.g. from tests).

    Parameters
    ----------
    level:
        Logging level as ``int`` or level-name string (e.g., ``"INFO"``).
    fmt:
        ``"text"`` or ``"json"``.
    stream:
        Output stream for the handler; defaults to the current ``sys.stderr``.
    """

    global _handler

    numeric_level = _parse_level(level)
    if fmt == "json":
        formatter: logging.Formatter = JsonFormatter(_JSON_FORMAT)
    elif fmt == "text":
        formatter = logging.Formatter(_TEXT_FORMAT)
    else:
        raise ValueError(f"Unknown log format: {fmt!r}")

    logger = logging.getLogger(_PKG_LOGGER_NAME)

    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler) or h is _handler:
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(formatter)
    handler.setLevel(numeric_level)
    logger.setLevel(numeric_level)
    logger.addHandler(handler)
    # Avoid double emission via the root logger.
    logger.propagate = False

    _handler = handler


def get_logger(name: str) -> logging.Logger:
    """Return a logger by name, attaching a ``NullHandler`` to the package
    root until ``configure_logging`` has run."""

    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if _handler is None and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
