"""
Date/time conversion and query utilities.

**Conceptual**: DateTimeUtils bridges two views of time:
  - Instants: absolute points on the timeline (see core.instants).
  - Local values: wall-clock readings without a zone (datetime.time,
    datetime.date and naive datetime.datetime).
Going from one view to the other always goes through a zone. Locale-sensitive
queries (week boundaries, month names, formatting) also need a locale.

**Defaults**: zone and locale arguments are optional. Missing ones come from
the injected DateTimeSettings, or, when none was injected, from the
environment read at call time (see config.settings). "Today" comes from the
injected clock, also read at call time.

**Usage**:
    utils = DateTimeUtils(settings=DateTimeSettings(timezone="Europe/London", locale="en_GB"))
    start = utils.first_day_of_week(datetime(2020, 2, 9, 15, 30, tzinfo=timezone.utc))

    # Module-level shortcuts use ambient defaults:
    format_instant(Instant.now(), "yyyy-MM-dd")

Every operation is pure and returns a new value. Operations do not log;
only loading the ambient settings emits debug events.
"""

from datetime import date, datetime, time, timedelta, tzinfo
from typing import Callable, Optional

from babel import Locale

from datetimeutils.config.settings import DateTimeSettings, get_settings
from datetimeutils.core.instants import Instant, InstantKind, InstantLike, to_instant
from datetimeutils.core.locales import (
    LocaleLike,
    TextStyle,
    first_weekday,
    month_display_name,
    resolve_locale,
)
from datetimeutils.core.patterns import format_pattern
from datetimeutils.core.zones import ZoneLike, from_wall_clock, resolve_zone, to_wall_clock
from datetimeutils.utils.time import Clock, get_real_clock


class DateTimeUtils:
    """
    Stateless function library over instants and local date/time values.

    Args:
        settings: Default zone/locale. None means "read the environment on
            every call".
        clock: Source of the current moment, used for today's date.
            Defaults to RealClock.
    """

    def __init__(
        self,
        settings: Optional[DateTimeSettings] = None,
        clock: Optional[Clock] = None,
    ):
        if settings is None:
            self._settings_provider: Callable[[], DateTimeSettings] = get_settings
        else:
            self._settings_provider = lambda: settings
        self._clock = clock or get_real_clock()

    # ------------------------------------------------------------------
    # Ambient defaults
    # ------------------------------------------------------------------

    def default_zone(self) -> tzinfo:
        return self._settings_provider().zone()

    def default_locale(self) -> Locale:
        return self._settings_provider().babel_locale()

    def _zone(self, zone: Optional[ZoneLike]) -> tzinfo:
        return self.default_zone() if zone is None else resolve_zone(zone)

    def _locale(self, locale: Optional[LocaleLike]) -> Locale:
        return self.default_locale() if locale is None else resolve_locale(locale)

    # ------------------------------------------------------------------
    # Instant -> local
    # ------------------------------------------------------------------

    def to_local_time(self, instant: InstantLike, zone: Optional[ZoneLike] = None) -> time:
        """
        Wall-clock time of day of an instant.

        A TIME_ONLY instant returns its own reading and zone is ignored;
        otherwise the instant is projected into zone (default zone if None).
        """
        instant = to_instant(instant)
        if instant.kind is InstantKind.TIME_ONLY:
            return instant.wall_time
        return to_wall_clock(instant.epoch_millis, self._zone(zone)).time()

    def to_local_date(self, instant: InstantLike, zone: Optional[ZoneLike] = None) -> date:
        """
        Calendar date of an instant.

        A DATE_ONLY instant returns its own date and zone is ignored;
        otherwise the instant is projected into zone (default zone if None).
        """
        instant = to_instant(instant)
        if instant.kind is InstantKind.DATE_ONLY:
            return instant.wall_date
        return to_wall_clock(instant.epoch_millis, self._zone(zone)).date()

    def to_local_date_time(self, instant: InstantLike, zone: Optional[ZoneLike] = None) -> datetime:
        """Naive wall-clock date-time of an instant in zone. Tags are not consulted."""
        instant = to_instant(instant)
        return to_wall_clock(instant.epoch_millis, self._zone(zone)).replace(tzinfo=None)

    # ------------------------------------------------------------------
    # Local -> instant
    # ------------------------------------------------------------------

    def from_local_time(
        self,
        local_time: time,
        local_date: Optional[date] = None,
        zone: Optional[ZoneLike] = None,
    ) -> Instant:
        """
        Instant showing local_time on local_date in zone.

        Args:
            local_time: Wall-clock time of day.
            local_date: Calendar date; defaults to today in the default zone,
                read from the clock on every call.
            zone: Zone of the reading; default zone if None.
        """
        if local_date is None:
            local_date = self.today()
        return self.from_local_date_time(
            datetime.combine(local_date, local_time.replace(tzinfo=None)), zone
        )

    def from_local_date(self, local_date: date, zone: Optional[ZoneLike] = None) -> Instant:
        """
        Instant at the start of local_date in zone.

        When midnight does not exist in zone (a DST gap at 00:00), the result
        is the first valid instant of that day.
        """
        if isinstance(local_date, datetime):
            local_date = local_date.date()
        return self.from_local_date_time(datetime.combine(local_date, time()), zone)

    def from_local_date_time(self, local_date_time: datetime, zone: Optional[ZoneLike] = None) -> Instant:
        """
        Instant showing local_date_time in zone.

        Readings inside a DST gap move forward by the gap length; readings in
        an overlap resolve to the earlier offset.
        """
        local = local_date_time.replace(tzinfo=None)
        return Instant(from_wall_clock(local, self._zone(zone)))

    def without_time(self, instant: InstantLike) -> Instant:
        """Start of the instant's calendar day in the default zone."""
        return self.from_local_date(self.to_local_date(instant))

    def today(self) -> date:
        """Current calendar date in the default zone."""
        return self._clock.now().astimezone(self.default_zone()).date()

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format_instant(self, instant: InstantLike, pattern: str, locale: Optional[LocaleLike] = None) -> str:
        """
        Format an instant's wall-clock reading in the default zone.

        Args:
            instant: Instant to format.
            pattern: Date pattern such as "yyyy-MM-dd'T'HH:mm:ss.SSS"
                (letters listed in core.patterns).
            locale: Locale for month/day names and AM/PM markers.

        Raises:
            InvalidPatternError: If the pattern is malformed.
        """
        instant = to_instant(instant)
        value = to_wall_clock(instant.epoch_millis, self.default_zone())
        return format_pattern(value, pattern, self._locale(locale))

    # ------------------------------------------------------------------
    # Calendar boundaries
    # ------------------------------------------------------------------

    def first_day_of_week(self, instant: InstantLike, locale: Optional[LocaleLike] = None) -> Instant:
        """
        Start of the first day of the instant's week.

        Which weekday opens a week depends on the locale: Monday for en_GB or
        ru_RU, Sunday for en_US.
        """
        return self.from_local_date(self._first_date_of_week(instant, locale))

    def last_day_of_week(self, instant: InstantLike, locale: Optional[LocaleLike] = None) -> Instant:
        """Start of the last day of the instant's week (first day + 6 days)."""
        return self.from_local_date(self._first_date_of_week(instant, locale) + timedelta(days=6))

    def _first_date_of_week(self, instant: InstantLike, locale: Optional[LocaleLike]) -> date:
        local_date = self.to_local_date(instant)
        week_start = first_weekday(self._locale(locale))
        # position within the locale's week, 0 for its first day
        offset = (local_date.isoweekday() - week_start) % 7
        return local_date - timedelta(days=offset)

    def first_day_of_month(self, instant: InstantLike) -> Instant:
        """
        Start of the first day of the instant's month.

        2011-01-15 gives 2011-01-01; 2011-02-15 gives 2011-02-01.
        """
        return self.from_local_date(self.to_local_date(instant).replace(day=1))

    def last_day_of_month(self, instant: InstantLike) -> Instant:
        """
        Start of the last day of the instant's month.

        2011-01-15 gives 2011-01-31, 2011-02-15 gives 2011-02-28,
        2012-02-15 gives 2012-02-29 and 2011-04-15 gives 2011-04-30.
        """
        local_date = self.to_local_date(instant)
        first_of_next = (local_date.replace(day=28) + timedelta(days=4)).replace(day=1)
        return self.from_local_date(first_of_next - timedelta(days=1))

    # ------------------------------------------------------------------
    # Field extraction
    # ------------------------------------------------------------------

    def month_name(
        self,
        instant: InstantLike,
        style: TextStyle = TextStyle.FULL,
        locale: Optional[LocaleLike] = None,
    ) -> str:
        """
        Display name of the instant's month, e.g. 'January' or 'Jan'.

        Falls back to the month number when the locale has no textual name.
        """
        return month_display_name(self.to_local_date(instant).month, style, self._locale(locale))

    def day_of_month(self, instant: InstantLike) -> int:
        return self.to_local_date(instant).day

    def year(self, instant: InstantLike) -> int:
        return self.to_local_date(instant).year

    def day_of_week(self, instant: InstantLike) -> int:
        """ISO day of week, 1 (Monday) to 7 (Sunday), whatever the locale."""
        return self.to_local_date(instant).isoweekday()

    # ------------------------------------------------------------------
    # Range membership
    # ------------------------------------------------------------------

    def is_within_range(self, value: InstantLike, start: InstantLike, end: InstantLike) -> bool:
        """
        Check whether value lies within [start, end], both ends inclusive.

        Raises:
            ValueError: If start is after end, whatever value is.
        """
        start = to_instant(start)
        end = to_instant(end)
        if start.is_after(end):
            raise ValueError("The start date must be earlier than or equal to the end date")
        value = to_instant(value)
        return not (value.is_before(start) or value.is_after(end))

    def is_not_within_range(self, value: InstantLike, start: InstantLike, end: InstantLike) -> bool:
        """
        Negation of is_within_range().

        Raises:
            ValueError: If start is after end, like is_within_range().
        """
        return not self.is_within_range(value, start, end)


_default_utils = DateTimeUtils()

to_local_time = _default_utils.to_local_time
to_local_date = _default_utils.to_local_date
to_local_date_time = _default_utils.to_local_date_time
from_local_time = _default_utils.from_local_time
from_local_date = _default_utils.from_local_date
from_local_date_time = _default_utils.from_local_date_time
without_time = _default_utils.without_time
format_instant = _default_utils.format_instant
first_day_of_week = _default_utils.first_day_of_week
last_day_of_week = _default_utils.last_day_of_week
first_day_of_month = _default_utils.first_day_of_month
last_day_of_month = _default_utils.last_day_of_month
month_name = _default_utils.month_name
day_of_month = _default_utils.day_of_month
year = _default_utils.year
day_of_week = _default_utils.day_of_week
is_within_range = _default_utils.is_within_range
is_not_within_range = _default_utils.is_not_within_range
