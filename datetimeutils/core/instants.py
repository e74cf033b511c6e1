"""
Absolute-instant value type.

**Conceptual**: An Instant is a point on the UTC timeline, stored as a count
of milliseconds since 1970-01-01T00:00:00Z. It has no zone and no calendar;
projecting it onto a wall clock always needs a zone (see core.zones).

Besides plain instants there are two tagged variants that already carry the
exact local precision a caller asked for:
  - TIME_ONLY: a time-of-day reading (wall_time). Converting it to a local
    time returns wall_time directly and never consults a zone.
  - DATE_ONLY: a calendar date (wall_date). Converting it to a local date
    returns wall_date directly and never consults a zone.
Every other conversion treats tagged instants like plain ones.

**Inputs**: public operations accept anything to_instant() understands:
Instant, datetime, pandas.Timestamp, numpy.datetime64 and integer epoch
milliseconds. Sub-millisecond precision is truncated.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Optional, Union

import numpy as np
import pandas as pd

from datetimeutils.core.zones import (
    EPOCH,
    ONE_MILLISECOND,
    ZoneLike,
    from_wall_clock,
    resolve_zone,
    to_wall_clock,
)
from datetimeutils.utils.time import Clock, get_real_clock

NANOS_PER_MILLI = 1_000_000


class InstantKind(Enum):
    """Precision tag of an Instant."""
    PLAIN = "plain"
    TIME_ONLY = "time_only"
    DATE_ONLY = "date_only"


@dataclass(frozen=True)
class Instant:
    """
    Immutable absolute point in time.

    Attributes:
        epoch_millis: Milliseconds since the Unix epoch (may be negative).
        kind: Precision tag, PLAIN unless built by time_only()/date_only().
        wall_time: Time-of-day carried by TIME_ONLY instants, else None.
        wall_date: Calendar date carried by DATE_ONLY instants, else None.

    Equality compares every field, so a TIME_ONLY instant never equals a PLAIN
    one. Use is_before()/is_after() or epoch_millis to compare positions on
    the timeline.
    """
    epoch_millis: int
    kind: InstantKind = InstantKind.PLAIN
    wall_time: Optional[time] = None
    wall_date: Optional[date] = None

    @classmethod
    def from_epoch_millis(cls, epoch_millis: int) -> "Instant":
        return cls(int(epoch_millis))

    @classmethod
    def from_datetime(cls, value: datetime) -> "Instant":
        """
        Build a plain instant from a datetime.

        Naive datetimes are read as system local time, the way
        datetime.timestamp() reads them.
        """
        if value.tzinfo is None:
            value = value.astimezone()
        return cls((value - EPOCH) // ONE_MILLISECOND)

    @classmethod
    def time_only(cls, value: time, zone: ZoneLike = timezone.utc) -> "Instant":
        """
        Build a TIME_ONLY instant.

        The absolute position is value on 1970-01-01 in zone; the wall_time
        tag keeps the reading itself.
        """
        local = datetime.combine(date(1970, 1, 1), value.replace(tzinfo=None))
        return cls(
            from_wall_clock(local, resolve_zone(zone)),
            kind=InstantKind.TIME_ONLY,
            wall_time=value.replace(tzinfo=None),
        )

    @classmethod
    def date_only(cls, value: date, zone: ZoneLike = timezone.utc) -> "Instant":
        """
        Build a DATE_ONLY instant.

        The absolute position is the start of value in zone; the wall_date
        tag keeps the calendar date itself.
        """
        if isinstance(value, datetime):
            value = value.date()
        return cls(
            from_wall_clock(datetime.combine(value, time()), resolve_zone(zone)),
            kind=InstantKind.DATE_ONLY,
            wall_date=value,
        )

    @classmethod
    def now(cls, clock: Optional[Clock] = None) -> "Instant":
        """Current instant according to clock (RealClock by default)."""
        return cls.from_datetime((clock or get_real_clock()).now())

    def to_datetime(self, zone: ZoneLike = timezone.utc) -> datetime:
        """Aware datetime for this instant in zone (UTC by default)."""
        return to_wall_clock(self.epoch_millis, resolve_zone(zone))

    def to_pandas(self) -> pd.Timestamp:
        """UTC pandas Timestamp for this instant."""
        return pd.Timestamp(self.epoch_millis, unit="ms", tz="UTC")

    def is_before(self, other: "Instant") -> bool:
        return self.epoch_millis < other.epoch_millis

    def is_after(self, other: "Instant") -> bool:
        return self.epoch_millis > other.epoch_millis


InstantLike = Union[Instant, datetime, pd.Timestamp, np.datetime64, int]


def to_instant(value: InstantLike) -> Instant:
    """
    Coerce a supported instant representation into an Instant.

    **Functionally**:
    - Instant: returned unchanged (tags preserved).
    - pandas.Timestamp: naive values are UTC, following pandas' own convention.
    - numpy.datetime64: converted through pandas, so also UTC.
    - datetime: see Instant.from_datetime().
    - int / numpy integer: epoch milliseconds.

    Raises:
        TypeError: For any other type (bool included).
    """
    if isinstance(value, Instant):
        return value
    # pd.Timestamp subclasses datetime, so it must be checked first
    if isinstance(value, pd.Timestamp):
        return Instant(value.value // NANOS_PER_MILLI)
    if isinstance(value, np.datetime64):
        return Instant(pd.Timestamp(value).value // NANOS_PER_MILLI)
    if isinstance(value, datetime):
        return Instant.from_datetime(value)
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        return Instant(int(value))
    raise TypeError(f"Cannot interpret {type(value).__name__} as an instant")

