"""
Parsers for the two textual date formats used on the wire.

  - RFC 2822: email headers and HTTP dates ("Tue, 26 Jan 2016 13:48:02 GMT").
  - ISO 8601: sortable timestamps ("2016-01-19T08:07:37Z").

Both return a UTC pandas Timestamp and never raise on malformed input; they
return pandas.NaT instead, the same way pd.to_datetime(errors="coerce") does.
"""

import re

import pandas as pd

from date_tasks.utils.time import TimezoneLike, parse_date_string


# RFC 2822 allows a parenthesised comment after the zone, e.g. "+0100 (BST)"
_TRAILING_COMMENT = re.compile(r"\s*\([^()]*\)$")
_GMT_SHORT_OFFSET = re.compile(r"GMT([+-])(\d{1,2})(?!\d)")
_GMT_FULL_OFFSET = re.compile(r"GMT([+-]\d{4})\b")


def normalize_rfc2822(value: str) -> str:
    """
    Rewrite a GMT-relative offset into a plain RFC 2822 numeric offset.

    "GMT+01" is widened to "GMT+0100" by appending "00", then the "GMT"
    prefix is dropped so the offset is read as "+0100" (one hour east of
    UTC). A bare "GMT" and an already complete "GMT+hhmm" are not widened.
    A trailing comment such as "(BST)" is dropped first.

    Example:
        >>> normalize_rfc2822("Sun, 17 May 1998 03:00:00 GMT+01")
        'Sun, 17 May 1998 03:00:00 +0100'
        >>> normalize_rfc2822("Tue, 26 Jan 2016 13:48:02 GMT")
        'Tue, 26 Jan 2016 13:48:02 GMT'
        >>> normalize_rfc2822("Sun, 17 May 1998 03:00:00 GMT+0100 (BST)")
        'Sun, 17 May 1998 03:00:00 +0100'
    """
    text = _TRAILING_COMMENT.sub("", value.strip())
    text = _GMT_SHORT_OFFSET.sub(lambda m: f"GMT{m.group(1)}{int(m.group(2)):02d}00", text)
    # dateutil reads "GMT+0100" as POSIX-style (sign inverted); a bare offset is unambiguous
    return _GMT_FULL_OFFSET.sub(r"\1", text)


def parse_rfc2822(value: str, local_tz: TimezoneLike = None) -> pd.Timestamp:
    """
    Parse an RFC 2822 date string into a UTC instant.

    Args:
        value: e.g. "Tue, 26 Jan 2016 13:48:02 GMT",
               "Sun, 17 May 1998 03:00:00 GMT+01" or
               "December 17, 1995 03:24:00" (no offset, so local time).
        local_tz: Timezone for strings without an offset (defaults to settings).

    Returns:
        UTC Timestamp, or NaT if the string is not a date.
    """
    if not isinstance(value, str):
        return pd.NaT
    return parse_date_string(normalize_rfc2822(value), local_tz)


def parse_iso8601(value: str, local_tz: TimezoneLike = None) -> pd.Timestamp:
    """
    Parse an ISO 8601 date string ("2016-01-19T16:07:37+00:00", "...Z") into a UTC instant.

    Returns NaT for malformed input.
    """
    return parse_date_string(value, local_tz)
