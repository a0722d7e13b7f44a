"""
date_tasks - small, pure date/time utilities.

Parses RFC 2822 and ISO 8601 strings, answers leap-year questions, formats
durations as "HH:mm:ss.sss" and measures the angle between clock hands.
"""

from date_tasks.dates.calendar import is_leap_year, is_leap_year_number
from date_tasks.dates.clock import clock_angle
from date_tasks.dates.parsing import parse_iso8601, parse_rfc2822
from date_tasks.dates.spans import format_time_span
from date_tasks.utils.log import setup_logging
from date_tasks.utils.time import as_instant, from_epoch_millis, to_epoch_millis, to_local

__all__ = [
    "parse_rfc2822",
    "parse_iso8601",
    "is_leap_year",
    "is_leap_year_number",
    "format_time_span",
    "clock_angle",
    "as_instant",
    "to_local",
    "to_epoch_millis",
    "from_epoch_millis",
    "setup_logging",
]
