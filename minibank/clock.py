"""
Clock Module

Supplies the current date used to stamp account operations. The bank takes
a clock at construction so tests can pin time.
"""

from datetime import datetime, timedelta
from typing import Optional, Protocol


class Clock(Protocol):
    """Anything with a now() returning a datetime"""

    def now(self) -> datetime: ...


class SystemClock:
    """Local wall clock"""

    def now(self) -> datetime:
        return datetime.now().astimezone()


class FixedClock:
    """
    Clock frozen at a given instant until moved explicitly.
    """

    def __init__(self, instant: Optional[datetime] = None):
        self._instant = instant or datetime(2020, 1, 1)

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime) -> None:
        """Move the clock to an absolute instant"""
        self._instant = instant

    def advance(self, delta: timedelta) -> None:
        """Move the clock forward (or back, with a negative delta)"""
        self._instant = self._instant + delta
