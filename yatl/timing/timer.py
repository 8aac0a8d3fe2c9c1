from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..clock import now_utc_ns
from ..errors import AlreadyStarted, InternalClockError, NotStarted
from .formatting import duration_to_human_string


@dataclass
class Timer:
    """Single-start stopwatch recording laps measured from the start instant.

    Not safe for concurrent mutation; guard a shared instance with a lock.
    """

    clock: Callable[[], int] = field(default=now_utc_ns, repr=False)
    _started_ns: Optional[int] = field(default=None, init=False)
    _laps: List[int] = field(default_factory=list, init=False, repr=False)

    def start(self) -> None:
        if self._started_ns is not None:
            raise AlreadyStarted()
        self._started_ns = self.clock()

    def start_time(self) -> int:
        """Return the start instant in nanoseconds since the epoch."""
        if self._started_ns is None:
            raise NotStarted()
        return self._started_ns

    def lap(self) -> int:
        """Record and return nanoseconds elapsed since ``start()``."""
        if self._started_ns is None:
            raise NotStarted()
        now = self.clock()
        if now < self._started_ns:
            raise InternalClockError(self._started_ns, now)
        d = now - self._started_ns
        self._laps.append(d)
        return d

    def laps(self) -> List[int]:
        return list(self._laps)

    def laps_formatted(self) -> List[str]:
        return [duration_to_human_string(d) for d in self._laps]

    @property
    def started_ns(self) -> Optional[int]:
        """Start instant, or None before ``start()``. Read-only."""
        return self._started_ns

    @property
    def started(self) -> bool:
        return self._started_ns is not None


__all__ = ["Timer"]
