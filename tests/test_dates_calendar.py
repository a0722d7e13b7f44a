"""
Tests for date_tasks/dates/calendar.py
"""

import calendar
from datetime import date, datetime

import pandas as pd
import pytest

from date_tasks.dates.calendar import is_leap_year, is_leap_year_number


@pytest.mark.parametrize(
    "year, expected",
    [
        (1900, False),  # century, not divisible by 400
        (2000, True),   # divisible by 400
        (2001, False),
        (2012, True),
        (2015, False),
    ],
)
def test_is_leap_year_known_years(year, expected):
    """Test the classic examples using dates in February."""
    assert is_leap_year(date(year, 2, 1)) is expected
    assert is_leap_year(datetime(year, 2, 1)) is expected


def test_is_leap_year_number_matches_gregorian_rule():
    """Test the divisibility rule against the standard library for four centuries."""
    for year in range(1600, 2401):
        assert is_leap_year_number(year) == calendar.isleap(year), year


def test_is_leap_year_accepts_other_date_likes():
    """Test Timestamps, epoch milliseconds and strings."""
    assert is_leap_year(pd.Timestamp("2012-06-01", tz="UTC")) is True
    # 2016-01-26 13:48:02 UTC
    assert is_leap_year(1453816082000) is True
    assert is_leap_year("2015-03-01T00:00:00Z") is False


def test_is_leap_year_reads_year_in_local_timezone():
    """Test that the calendar year is the one shown on the local wall clock."""
    instant = pd.Timestamp("2000-12-31 23:30", tz="UTC")

    assert is_leap_year(instant) is True
    # Already 2001-01-01 08:30 in Tokyo
    assert is_leap_year(instant, local_tz="Asia/Tokyo") is False


@pytest.mark.parametrize("value", [None, pd.NaT, "not a date", "now"])
def test_is_leap_year_invalid_is_false(value):
    """Test that an invalid instant is never a leap year."""
    assert is_leap_year(value) is False
