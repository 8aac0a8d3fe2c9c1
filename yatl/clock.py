
from __future__ import annotations
import time
NS_PER_US = 1_000
NS_PER_MS = 1_000_000
NS_PER_S = 1_000_000_000
S_PER_MIN = 60
def now_utc_ns() -> int: return time.time_ns()
