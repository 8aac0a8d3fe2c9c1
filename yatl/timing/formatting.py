"""Human readable rendering of elapsed-time durations."""

from __future__ import annotations

from datetime import timedelta
from typing import Union

from ..clock import NS_PER_MS, NS_PER_S, NS_PER_US, S_PER_MIN

DurationLike = Union[int, timedelta]


def _as_nanos(duration: DurationLike) -> int:
    if isinstance(duration, timedelta):
        # timedelta is exact in whole microseconds
        us = (duration.days * 86_400 + duration.seconds) * 1_000_000 + duration.microseconds
        return us * NS_PER_US
    if isinstance(duration, bool) or not isinstance(duration, int):
        raise TypeError(
            f"duration must be int nanoseconds or timedelta, got {type(duration).__name__}"
        )
    return duration


def duration_to_human_string(duration: DurationLike) -> str:
    """Return ``duration`` in the coarsest unit that keeps it below rollover.

    Values are truncated, never rounded::

        >>> duration_to_human_string(13_674)
        '13us'
        >>> duration_to_human_string(60 * 1_000_000_000)
        '1m'
    """

    ns = _as_nanos(duration)
    if ns < 0:
        raise ValueError(f"duration must be non-negative, got {ns}ns")

    if ns < 1000:
        return f"{ns}ns"
    if ns // NS_PER_US < 1000:
        return f"{ns // NS_PER_US}us"
    if ns // NS_PER_MS < 1000:
        return f"{ns // NS_PER_MS}ms"
    secs = ns // NS_PER_S
    if secs < S_PER_MIN:
        return f"{secs}s"
    return f"{secs // S_PER_MIN}m"


__all__ = ["DurationLike", "duration_to_human_string"]
