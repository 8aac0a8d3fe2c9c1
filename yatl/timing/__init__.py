"""Stopwatch and duration formatting."""

from .formatting import DurationLike, duration_to_human_string
from .timer import Timer

__all__ = ["DurationLike", "Timer", "duration_to_human_string"]
