"""Console logging for the command line."""

from __future__ import annotations

import logging

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def normalize_level(level: str) -> str:
    """Return ``level`` upper-cased; raise ValueError if it is not in LOG_LEVELS."""
    name = level.strip().upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    return name


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Point the ``yatl`` logger at stderr, replacing earlier handlers.

    Records stop at ``yatl`` and do not reach the root logger.
    """

    root = logging.getLogger("yatl")
    root.setLevel(normalize_level(level))
    root.handlers.clear()
    stderr = logging.StreamHandler()
    stderr.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(stderr)
    root.propagate = False
    return root


__all__ = ["LOG_FORMAT", "LOG_LEVELS", "normalize_level", "setup_logging"]
