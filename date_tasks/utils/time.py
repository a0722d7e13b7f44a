"""
Instant coercion helpers shared by every date function.

**Conceptual**: The date functions accept "anything that names a point in
time": datetimes, dates, pandas Timestamps, epoch milliseconds, or date
strings. This module turns all of them into one canonical representation,
an *instant*: a timezone-aware pandas Timestamp in UTC. The invalid instant
is pandas.NaT.

**Rules**:
  - Aware datetimes/Timestamps are converted to UTC.
  - Naive datetimes are wall-clock time in the local timezone.
  - datetime.date values mean local midnight of that date.
  - Numbers are milliseconds since the Unix epoch (UTC).
  - Strings go through parse_date_string().
  - None, NaT, NaN and anything unparseable become NaT. Nothing here raises
    for bad *values*; only an unknown timezone *name* raises ValueError.

**Local timezone**: Every helper takes an optional local_tz (tzinfo or IANA
name). When omitted, the configured Settings.local_timezone is used.
"""

import logging
import re
from datetime import date, datetime, time, tzinfo
from typing import Any, Optional, Union

import numpy as np
import pandas as pd
from dateutil import parser as dateutil_parser

from date_tasks.config.settings import get_settings, load_timezone

logger = logging.getLogger(__name__)

TimezoneLike = Union[tzinfo, str, None]

EPOCH = pd.Timestamp("1970-01-01", tz="UTC")
ONE_MILLISECOND = pd.Timedelta(milliseconds=1)

# A bare calendar date ("2016-01-19") is UTC midnight, not local midnight
_ISO_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Words pandas resolves against the current clock
_RELATIVE_KEYWORDS = re.compile(r"^(now|today|tomorrow|yesterday)$", re.IGNORECASE)

# Two defaults that differ in year, month and day; a string that names all
# three parses to the same value under both
_FILL_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def resolve_local_timezone(local_tz: TimezoneLike = None) -> tzinfo:
    """
    Return the timezone to use for naive values.

    Args:
        local_tz: A tzinfo, an IANA name, or None for the configured zone.

    Returns:
        tzinfo object.

    Raises:
        ValueError: If local_tz is a name that is not a known timezone.
    """
    if local_tz is None:
        return get_settings().local_timezone
    if isinstance(local_tz, str):
        return load_timezone(local_tz)
    return local_tz


def _to_utc(ts: pd.Timestamp, local_tz: TimezoneLike) -> pd.Timestamp:
    if pd.isna(ts):
        return pd.NaT
    if ts.tzinfo is None:
        # Ambiguous wall-clock times take the first (DST) occurrence; times
        # inside a spring-forward gap move to the first valid instant.
        ts = ts.tz_localize(
            resolve_local_timezone(local_tz),
            ambiguous=True,
            nonexistent="shift_forward",
        )
    return ts.tz_convert("UTC")


def parse_date_string(value: Any, local_tz: TimezoneLike = None) -> pd.Timestamp:
    """
    Parse a date string with pandas' general-purpose date parser.

    **Functionally**:
    - Offsets and "Z"/"GMT"/"UTC" markers in the string are honoured.
    - Strings without an offset are local wall-clock time, except a bare ISO
      calendar date ("YYYY-MM-DD"), which is UTC midnight.
    - Returns NaT for non-strings, empty strings and unparseable input.
    - Relative words ("now", "today") and strings missing a year, month or
      day also return NaT, so the result never depends on the current date.

    Args:
        value: The date string.
        local_tz: Timezone for strings that carry no offset.

    Returns:
        UTC Timestamp, or NaT.

    Example:
        >>> parse_date_string("2016-01-19T08:07:37Z")
        Timestamp('2016-01-19 08:07:37+0000', tz='UTC')
        >>> parse_date_string("garbage")
        NaT
    """
    if not isinstance(value, str) or not value.strip():
        return pd.NaT

    text = value.strip()
    if not has_complete_date(text):
        logger.debug("Date string is relative or incomplete: %r", value)
        return pd.NaT

    parsed = pd.to_datetime(text, errors="coerce")

    if pd.isna(parsed):
        logger.debug("Could not parse date string %r", value)
        return pd.NaT

    if parsed.tzinfo is None and _ISO_DATE_ONLY.match(text):
        return parsed.tz_localize("UTC")

    return _to_utc(parsed, local_tz)


def has_complete_date(text: str) -> bool:
    """
    Return True if the string names a year, a month and a day.

    Partial strings ("03:00", "17 May", "May 2016") would otherwise be
    completed from today's date or from year 1, so the same text could name
    different instants.
    """
    if _RELATIVE_KEYWORDS.match(text):
        return False
    try:
        first = dateutil_parser.parse(text, default=_FILL_DEFAULTS[0])
        second = dateutil_parser.parse(text, default=_FILL_DEFAULTS[1])
    except (ValueError, OverflowError):
        return False
    return first == second


def from_epoch_millis(millis: Union[int, float]) -> pd.Timestamp:
    """Convert milliseconds since the Unix epoch into a UTC instant (NaT for NaN/out of range)."""
    if pd.isna(millis):
        return pd.NaT
    try:
        return pd.Timestamp(millis, unit="ms", tz="UTC")
    except (OverflowError, ValueError):
        logger.debug("Epoch milliseconds out of range: %r", millis)
        return pd.NaT


def as_instant(value: Any, local_tz: TimezoneLike = None) -> pd.Timestamp:
    """
    Coerce a date-like value into a UTC instant.

    Args:
        value: datetime, date, pandas Timestamp, numpy datetime64, epoch
               milliseconds, or a date string.
        local_tz: Timezone for naive values (defaults to settings).

    Returns:
        Timezone-aware pandas Timestamp in UTC, or NaT if the value does not
        name a point in time.
    """
    if value is None or value is pd.NaT:
        return pd.NaT

    if isinstance(value, str):
        return parse_date_string(value, local_tz)

    if isinstance(value, (bool, np.bool_)):
        return pd.NaT

    if isinstance(value, (int, float, np.integer, np.floating)):
        return from_epoch_millis(value)

    if isinstance(value, date) and not isinstance(value, datetime):
        value = datetime.combine(value, time())

    try:
        ts = pd.Timestamp(value)
    except (TypeError, ValueError):
        logger.debug("Value is not date-like: %r", value)
        return pd.NaT

    return _to_utc(ts, local_tz)


def to_local(value: Any, local_tz: TimezoneLike = None) -> pd.Timestamp:
    """
    Return the instant viewed in the local timezone.

    Used wherever a calendar component (year, month, ...) must be read the
    way a wall clock in the local zone would show it.
    """
    instant = as_instant(value, local_tz)
    if pd.isna(instant):
        return pd.NaT
    return instant.tz_convert(resolve_local_timezone(local_tz))


def to_epoch_millis(value: Any, local_tz: TimezoneLike = None) -> float:
    """
    Milliseconds since the Unix epoch for a date-like value.

    Returns:
        float milliseconds (NaN for an invalid instant).
    """
    instant = as_instant(value, local_tz)
    if pd.isna(instant):
        return float("nan")
    return float((instant - EPOCH) / ONE_MILLISECOND)
