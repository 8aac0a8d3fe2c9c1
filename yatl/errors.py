"""Exceptions raised by :class:`yatl.Timer`."""

from __future__ import annotations


class TimerError(Exception):
    """Base class for timer misuse and measurement failures."""


class AlreadyStarted(TimerError):
    """``start()`` was called on a timer that already has a start instant."""

    def __init__(self) -> None:
        super().__init__("Timer already started!")


class NotStarted(TimerError):
    """The timer has no start instant yet."""

    def __init__(self) -> None:
        super().__init__("Timer not started!")


class InternalClockError(TimerError):
    """Elapsed time could not be computed from the clock.

    Raised when the current reading is earlier than the recorded start, i.e.
    the wall clock stepped backwards.  The laps history is left untouched.
    """

    def __init__(self, started_ns: int, now_ns: int) -> None:
        self.started_ns = started_ns
        self.now_ns = now_ns
        super().__init__(
            f"Internal Error: clock reading {now_ns}ns is "
            f"{started_ns - now_ns}ns earlier than start {started_ns}ns"
        )


__all__ = ["TimerError", "AlreadyStarted", "NotStarted", "InternalClockError"]
