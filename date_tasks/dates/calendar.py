"""
Calendar predicates.

**Gregorian leap-year rule**: a year is a leap year if it is divisible by 4,
except century years, which must also be divisible by 400. So 2000 is a leap
year and 1900 is not.
"""

from datetime import date, datetime
from typing import Any

import pandas as pd

from date_tasks.utils.time import TimezoneLike, to_local


def is_leap_year_number(year: int) -> bool:
    """
    Apply the Gregorian leap-year rule to a year number.

    **Mathematical**:
        year % 400 == 0  -> leap
        year % 100 == 0  -> not leap
        year % 4 == 0    -> leap
        otherwise        -> not leap

    Args:
        year: Calendar year (proleptic Gregorian).

    Returns:
        True if the year has 366 days.
    """
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def is_leap_year(value: Any, local_tz: TimezoneLike = None) -> bool:
    """
    Return True if the date falls in a leap year.

    **Functionally**:
    - Only the calendar year is used, read in the local timezone.
    - datetime.date values and naive datetimes already are local calendar
      values, so their own year is used directly.
    - Aware datetimes, Timestamps, epoch milliseconds and strings are first
      converted to local time; e.g. 2000-12-31 23:30 UTC is already 2001 in
      Tokyo.
    - An invalid instant (NaT, unparseable string) is not a leap year.

    Args:
        value: Anything as_instant() accepts.
        local_tz: Timezone whose calendar decides the year (defaults to settings).

    Returns:
        bool.

    Example:
        >>> is_leap_year(date(2000, 2, 1))
        True
        >>> is_leap_year(date(1900, 2, 1))
        False
    """
    if value is None or value is pd.NaT:
        return False

    if isinstance(value, date) and not isinstance(value, datetime):
        return is_leap_year_number(value.year)

    if isinstance(value, datetime) and value.tzinfo is None:
        return is_leap_year_number(value.year)

    local = to_local(value, local_tz)
    if pd.isna(local):
        return False
    return is_leap_year_number(local.year)
