"""
Tests for datetimeutils/utils/time.py

These tests verify the clock abstraction works correctly for both real and frozen time.
"""

from datetime import datetime, timezone, timedelta
import time

from datetimeutils.utils.time import (
    RealClock,
    FrozenClock,
    get_real_clock,
    get_frozen_clock,
)


def test_real_clock_returns_current_time():
    """Test that RealClock returns a time close to actual current time."""
    clock = RealClock()

    before = datetime.now(timezone.utc)
    clock_time = clock.now()
    after = datetime.now(timezone.utc)

    assert before <= clock_time <= after
    assert clock_time.tzinfo == timezone.utc


def test_real_clock_advances():
    """Test that RealClock returns different times on successive calls."""
    clock = RealClock()

    time1 = clock.now()
    time.sleep(0.01)
    time2 = clock.now()

    assert time2 > time1


def test_frozen_clock_returns_fixed_time():
    """Test that FrozenClock always returns the configured timestamp."""
    fixed_time = datetime(2016, 1, 1, 12, 30, 45, tzinfo=timezone.utc)
    clock = FrozenClock(fixed_time)

    assert clock.now() == fixed_time
    assert clock.now() == fixed_time


def test_frozen_clock_naive_is_read_as_utc():
    """A naive fixed time is stored as UTC so now() is always aware."""
    clock = FrozenClock(datetime(2020, 2, 9, 8, 0))

    assert clock.now() == datetime(2020, 2, 9, 8, 0, tzinfo=timezone.utc)
    assert clock.now().tzinfo == timezone.utc


def test_frozen_clock_keeps_offset():
    """An aware fixed time keeps its own offset."""
    plus_three = timezone(timedelta(hours=3))
    fixed_time = datetime(2020, 2, 9, 23, 30, tzinfo=plus_three)
    clock = FrozenClock(fixed_time)

    assert clock.now().utcoffset() == timedelta(hours=3)
    assert clock.now() == fixed_time


def test_get_real_clock_factory():
    """Test that get_real_clock() returns a working RealClock."""
    clock = get_real_clock()

    now = clock.now()
    assert isinstance(now, datetime)
    assert now.tzinfo == timezone.utc


def test_get_frozen_clock_factory():
    """Test that get_frozen_clock() returns a working FrozenClock."""
    fixed_time = datetime(2018, 3, 10, 8, 15, 0, tzinfo=timezone.utc)
    clock = get_frozen_clock(fixed_time)

    assert clock.now() == fixed_time
