"""yatl - yet another timer library."""

from importlib import metadata

from .errors import AlreadyStarted, InternalClockError, NotStarted, TimerError
from .timing import Timer, duration_to_human_string


def get_version() -> str:
    """Return package version if available, else placeholder."""
    try:
        return metadata.version("yatl")
    except metadata.PackageNotFoundError:
        return "0.0.0"


__all__ = [
    "AlreadyStarted",
    "InternalClockError",
    "NotStarted",
    "Timer",
    "TimerError",
    "duration_to_human_string",
    "get_version",
]
