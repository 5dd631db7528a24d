"""Injectable millisecond clocks.

The engine never reads the system time directly; it asks a clock. Tests and
replays use ManualClock to move time forward deterministically.
"""

import time
from typing import Protocol, runtime_checkable

from .exceptions import ClockError

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND


@runtime_checkable
class Clock(Protocol):
    """Source of the current time in milliseconds since the epoch."""

    def now_ms(self) -> float:
        ...


class SystemClock:
    """Wall-clock time."""

    def now_ms(self) -> float:
        return time.time() * MS_PER_SECOND


class ManualClock:
    """Clock that only moves when told to."""

    def __init__(self, start_ms: float = 0.0) -> None:
        self._now_ms = float(start_ms)

    def now_ms(self) -> float:
        return self._now_ms

    def advance(self, milliseconds: float) -> float:
        """Move the clock forward and return the new time."""
        if milliseconds < 0:
            raise ClockError("Clock cannot move backwards", delta_ms=milliseconds)
        self._now_ms += milliseconds
        return self._now_ms

    def advance_seconds(self, seconds: float) -> float:
        return self.advance(seconds * MS_PER_SECOND)

    def advance_minutes(self, minutes: float) -> float:
        return self.advance(minutes * MS_PER_MINUTE)

    def __repr__(self) -> str:
        return f"ManualClock(now_ms={self._now_ms})"
