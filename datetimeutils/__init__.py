"""
datetimeutils - conversion, formatting and calendar queries over instants
and local date/time values.

The public API is re-exported here:

    from datetimeutils import DateTimeUtils, Instant, format_instant
"""

from datetimeutils.config.settings import DateTimeSettings, get_settings
from datetimeutils.core.datetime_utils import (
    DateTimeUtils,
    day_of_month,
    day_of_week,
    first_day_of_month,
    first_day_of_week,
    format_instant,
    from_local_date,
    from_local_date_time,
    from_local_time,
    is_not_within_range,
    is_within_range,
    last_day_of_month,
    last_day_of_week,
    month_name,
    to_local_date,
    to_local_date_time,
    to_local_time,
    without_time,
    year,
)
from datetimeutils.core.instants import Instant, InstantKind, to_instant
from datetimeutils.core.locales import TextStyle
from datetimeutils.core.patterns import InvalidPatternError

__version__ = "0.1.0"

__all__ = [
    "DateTimeSettings",
    "DateTimeUtils",
    "Instant",
    "InstantKind",
    "InvalidPatternError",
    "TextStyle",
    "day_of_month",
    "day_of_week",
    "first_day_of_month",
    "first_day_of_week",
    "format_instant",
    "from_local_date",
    "from_local_date_time",
    "from_local_time",
    "get_settings",
    "is_not_within_range",
    "is_within_range",
    "last_day_of_month",
    "last_day_of_week",
    "month_name",
    "to_instant",
    "to_local_date",
    "to_local_date_time",
    "to_local_time",
    "without_time",
    "year",
]
