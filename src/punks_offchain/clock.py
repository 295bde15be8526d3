"""
Time Sources

The ledger reads the current time through a clock object so the mint window
can be driven deterministically in tests.
"""

import time


class SystemClock:
    """Wall clock in whole POSIX seconds"""

    def now(self) -> int:
        return int(time.time())


class ManualClock:
    """Clock that only moves when told to"""

    def __init__(self, start: int = 0):
        self._now = start

    def now(self) -> int:
        return self._now

    def advance(self, seconds: int) -> None:
        if seconds < 0:
            raise ValueError("time only moves forward")
        self._now += seconds

    def set(self, timestamp: int) -> None:
        if timestamp < self._now:
            raise ValueError("time only moves forward")
        self._now = timestamp
