"""
Analog clock geometry.

**Conceptual**: Both hands sweep 360 degrees; the minute hand once per hour,
the hour hand once per 12 hours. The hour hand also creeps forward as the
minutes pass, so at 3:30 it sits halfway between 3 and 4.

**Mathematical**: For hour h (UTC) and minute m:
    minute_hand = m * 360 / 60                 (6 degrees per minute)
    hour_hand   = ((h % 12) + m / 60) * 360 / 12 (30 degrees per hour)
    angle       = |hour_hand - minute_hand|, folded into [0, 180]
"""

from typing import Any

import numpy as np
import pandas as pd

from date_tasks.utils.time import TimezoneLike, as_instant


def clock_angle(value: Any, local_tz: TimezoneLike = None) -> float:
    """
    Angle in radians between the hands of an analog clock showing UTC time.

    Args:
        value: Anything as_instant() accepts. Only the UTC hour and minute
               are used; seconds are ignored.
        local_tz: Timezone for naive inputs (defaults to settings).

    Returns:
        Angle in [0, pi], or nan for an invalid instant.

    Example:
        >>> clock_angle(pd.Timestamp("2016-04-05 03:00", tz="UTC"))  # pi / 2
        1.5707963267948966
    """
    instant = as_instant(value, local_tz)
    if pd.isna(instant):
        return float("nan")

    hours = instant.hour
    minutes = instant.minute

    minute_hand = minutes * 360 / 60
    hour_hand = ((hours % 12) + minutes / 60) * 360 / 12

    angle = abs(hour_hand - minute_hand)
    # The hands always enclose two arcs; report the smaller one
    if angle > 180:
        angle = 360 - angle

    return float(np.deg2rad(angle))
