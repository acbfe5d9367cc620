"""Logging utilities for myshell."""

from __future__ import annotations

import logging
from typing import Final

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
_LEVELS: Final[dict[str, int]] = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def configure_logging(level: str = DEFAULT_LOG_LEVEL, fmt: str | None = None) -> None:
    """Configure shell logging.

    Records go to stderr so they never interleave with command output on stdout.

    Args:
        level: Logging level name (e.g., "WARNING", "DEBUG").
        fmt: Optional logging format string. Defaults to a standard structured format.
    """

    logging.basicConfig(
        level=normalize_level(level),
        format=fmt or DEFAULT_LOG_FORMAT,
    )


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger for the given module or component."""

    return logging.getLogger(name)


def normalize_level(level: str) -> int:
    """Map a level name to its numeric value, falling back to WARNING."""

    normalized = level.strip().upper()
    return _LEVELS.get(normalized, logging.WARNING)
