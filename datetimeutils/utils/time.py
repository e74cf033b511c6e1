"""
Clock abstractions for deterministic "now" lookups.

Operations that need the current moment (for example, combining a local time
with today's date) ask an injected clock instead of calling datetime.now()
directly. Production code uses RealClock; tests pass a FrozenClock so that
"today" is fixed and assertions stay deterministic.
"""

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """
    Abstract time source protocol.

    **Conceptual**: A Clock is any object that can answer "what time is it right
    now?". DateTimeUtils accepts a Clock through its constructor and reads it on
    every call that depends on the current date, never caching the answer.

    **Example**:
        utils = DateTimeUtils(clock=FrozenClock(datetime(2016, 1, 1, tzinfo=timezone.utc)))
        utils.from_local_time(time(10, 30))  # combined with 2016-01-01
    """

    def now(self) -> datetime:
        """
        Return the current time according to this clock.

        Returns:
            Timezone-aware datetime representing "now".
        """
        ...


class RealClock:
    """Clock that returns the actual current system time (UTC)."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FrozenClock:
    """
    Clock that always returns a fixed timestamp.

    **Usage**:
        clock = FrozenClock(datetime(2020, 2, 9, 12, 0, tzinfo=timezone.utc))
        clock.now()  # always 2020-02-09T12:00:00+00:00

    Naive datetimes are accepted and interpreted as UTC so that now() always
    returns an aware value, like RealClock.
    """

    def __init__(self, fixed_now: datetime):
        """
        Initialize a FrozenClock with a fixed timestamp.

        Args:
            fixed_now: The datetime to return on every call to now().
        """
        if fixed_now.tzinfo is None:
            fixed_now = fixed_now.replace(tzinfo=timezone.utc)
        self._fixed_now = fixed_now

    def now(self) -> datetime:
        return self._fixed_now


def get_real_clock() -> Clock:
    """Factory function to create a RealClock instance."""
    return RealClock()


def get_frozen_clock(fixed_now: datetime) -> Clock:
    """
    Factory function to create a FrozenClock with a given timestamp.

    Args:
        fixed_now: The datetime to freeze at (naive values are read as UTC).

    Returns:
        FrozenClock instance configured with fixed_now.
    """
    return FrozenClock(fixed_now)
