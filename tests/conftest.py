"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import datetimeutils' works
without an install, and provides shared settings fixtures.
"""
import os
import sys
import time
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from datetimeutils.config.settings import DateTimeSettings  # noqa: E402
from datetimeutils.core.datetime_utils import DateTimeUtils  # noqa: E402


@pytest.fixture(autouse=True)
def clear_datetimeutils_env(monkeypatch):
    """Keep developer .env / shell overrides out of the tests."""
    monkeypatch.delenv("DATETIMEUTILS_TIMEZONE", raising=False)
    monkeypatch.delenv("DATETIMEUTILS_LOCALE", raising=False)


@pytest.fixture
def utc_utils():
    """DateTimeUtils pinned to UTC and en_US."""
    return DateTimeUtils(settings=DateTimeSettings(timezone="UTC", locale="en_US"))


@pytest.fixture
def moscow_utils():
    """DateTimeUtils pinned to Europe/Moscow (UTC+3, no DST) and ru_RU."""
    return DateTimeUtils(settings=DateTimeSettings(timezone="Europe/Moscow", locale="ru_RU"))


@pytest.fixture
def new_york_utils():
    """DateTimeUtils pinned to America/New_York (observes DST) and en_US."""
    return DateTimeUtils(settings=DateTimeSettings(timezone="America/New_York", locale="en_US"))


@pytest.fixture
def system_tz():
    """
    Switch the process zone (TZ plus time.tzset()) for one test.

    Returns a setter; the original TZ is restored and re-applied afterwards.
    """
    original = os.environ.get("TZ")

    def set_zone(name: str) -> None:
        os.environ["TZ"] = name
        time.tzset()

    yield set_zone

    if original is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = original
    time.tzset()
