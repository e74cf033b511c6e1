"""
Zone resolution and wall-clock projection.

A zone is either a tzinfo instance or an IANA identifier such as
"Europe/Moscow". Named zones are built with zoneinfo. The system zone is read
from TZ, then from /etc/localtime, and resolved against the tz database so
that historical offset changes apply; dateutil's tzlocal() is the last resort.

Projection rules for wall-clock readings that do not map one-to-one onto
instants:
  - Gap (clocks jump forward): the reading is shifted forward by the length of
    the gap, so midnight in a 00:00 -> 01:00 transition becomes 01:00.
  - Overlap (clocks fall back): the earlier of the two offsets is used.
"""

import os
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil import tz

ZoneLike = Union[tzinfo, str]

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MILLISECOND = timedelta(milliseconds=1)

LOCALTIME_PATH = "/etc/localtime"


def system_zone() -> tzinfo:
    """
    Return the process's configured system zone, read fresh on each call.

    TZ wins over /etc/localtime. A setting that names an IANA zone (directly or
    through the /etc/localtime symlink) becomes a ZoneInfo, which keeps the
    zone's full rule history and its key for zone-name formatting. Other TZ
    values (POSIX rule strings, file paths) go through dateutil's gettz().
    """
    setting = os.environ.get("TZ", "").lstrip(":")
    if setting:
        zone = _named_zone(setting)
        if zone is None:
            zone = tz.gettz.nocache(setting)
        if zone is not None:
            return zone
    else:
        zone = _named_zone(_localtime_key())
        if zone is not None:
            return zone
        zone = tz.gettz.nocache()
        if zone is not None:
            return zone
    return tz.tzlocal()


def _named_zone(key: Optional[str]) -> Optional[tzinfo]:
    if not key:
        return None
    if key.upper() in ("UTC", "Z"):
        return timezone.utc
    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return None


def _localtime_key() -> Optional[str]:
    """IANA key that /etc/localtime links to, e.g. 'Europe/Moscow'."""
    if not os.path.islink(LOCALTIME_PATH):
        return None
    target = os.path.realpath(LOCALTIME_PATH)
    marker = "/zoneinfo/"
    if marker not in target:
        return None
    return target.split(marker, 1)[1]


def resolve_zone(zone: ZoneLike) -> tzinfo:
    """
    Turn a zone identifier into a tzinfo.

    Args:
        zone: tzinfo instance (returned unchanged) or IANA zone name.
              "UTC" and "Z" map to datetime.timezone.utc.

    Returns:
        tzinfo for the identifier.

    Raises:
        ValueError: If the name is not a known IANA zone.
        TypeError: If zone is neither a string nor a tzinfo.
    """
    if isinstance(zone, tzinfo):
        return zone
    if not isinstance(zone, str):
        raise TypeError(f"Zone must be a tzinfo or a zone name, got {type(zone).__name__}")

    name = zone.strip()
    if name.upper() in ("UTC", "Z"):
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown time zone: {zone!r}") from e


def to_wall_clock(epoch_millis: int, zone: tzinfo) -> datetime:
    """
    Project an instant into a zone.

    Returns:
        Aware datetime showing the wall-clock reading of the instant in zone.
    """
    return (EPOCH + timedelta(milliseconds=epoch_millis)).astimezone(zone)


def from_wall_clock(local: datetime, zone: tzinfo) -> int:
    """
    Find the instant (epoch millis) that a naive wall-clock reading denotes in a zone.

    Args:
        local: Naive datetime (wall-clock reading).
        zone: Zone the reading belongs to.

    Returns:
        Milliseconds since the epoch.
    """
    aware = local.replace(tzinfo=zone, fold=0)
    if not tz.datetime_exists(aware):
        aware = tz.resolve_imaginary(aware)
    return (aware - EPOCH) // ONE_MILLISECOND
