"""
Duration formatting.
"""

from typing import Any

import pandas as pd

from date_tasks.utils.time import ONE_MILLISECOND, TimezoneLike, as_instant

HOUR_MS = 3_600_000
MINUTE_MS = 60_000
SECOND_MS = 1_000

INVALID_SPAN = "NaN:NaN:NaN.NaN"


def format_time_span(start: Any, end: Any, local_tz: TimezoneLike = None) -> str:
    """
    Format the time between two instants as "HH:mm:ss.sss".

    **Functionally**:
    - Hours do not roll over into days, so a 30 hour span is "30:00:00.000".
    - Minutes and seconds are padded to 2 digits, milliseconds to 3.
    - Sub-millisecond remainders are truncated.
    - end < start gives a "-" prefix followed by the absolute span.
    - If either instant is invalid the result is "NaN:NaN:NaN.NaN".

    Args:
        start: Start of the span (anything as_instant() accepts).
        end: End of the span.
        local_tz: Timezone for naive inputs (defaults to settings).

    Returns:
        Formatted duration string.

    Example:
        >>> format_time_span(pd.Timestamp("2000-02-01 10:00"), pd.Timestamp("2000-02-01 15:20:10.453"))
        '05:20:10.453'
    """
    start_ts = as_instant(start, local_tz)
    end_ts = as_instant(end, local_tz)
    if pd.isna(start_ts) or pd.isna(end_ts):
        return INVALID_SPAN

    span = end_ts - start_ts
    sign = "-" if span < pd.Timedelta(0) else ""
    span_ms = abs(span) // ONE_MILLISECOND

    hours, remainder = divmod(span_ms, HOUR_MS)
    minutes, remainder = divmod(remainder, MINUTE_MS)
    seconds, millis = divmod(remainder, SECOND_MS)

    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"
