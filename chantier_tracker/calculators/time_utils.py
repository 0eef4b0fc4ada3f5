"""Time calculation utilities for the chantier tracker.

This module provides low-level utilities for time calculations including:
- Converting a time of day to minutes since midnight
- Calculating shift durations (with wraparound past midnight)
- Formatting durations as "{h}h {m}m"

These utilities are timezone-agnostic and work with wall-clock dt.time values.
"""

import datetime as dt
from typing import Optional, Union

from chantier_tracker.utils.coercion import coerce_time_of_day

MINUTES_PER_DAY = 24 * 60

TimeLike = Union[dt.time, str, None]


def convert_time_to_minutes(time: dt.time) -> int:
    """Convert a dt.time object to minutes since midnight.

    Args:
        time: The time to convert

    Returns:
        Number of minutes since midnight (0-1439)

    Example:
        >>> convert_time_to_minutes(dt.time(9, 30))
        570
        >>> convert_time_to_minutes(dt.time(23, 59))
        1439
    """
    return time.hour * 60 + time.minute


def parse_time_of_day(value: TimeLike) -> Optional[dt.time]:
    """Parse "HH:MM" / "HH:MM:SS" strings; absent or invalid gives None."""
    return coerce_time_of_day(value)


def calculate_duration_minutes(arrival: TimeLike, departure: TimeLike) -> int:
    """Calculate the length of a shift in minutes.

    A departure earlier than the arrival is read as a shift that ran past
    midnight, so 1440 minutes are added. Equal times are a zero-length
    shift, not a full day.

    Args:
        arrival: Arrival time (dt.time or "HH:MM"), may be absent
        departure: Departure time (dt.time or "HH:MM"), may be absent

    Returns:
        Duration in minutes, always in [0, 1439]. 0 if either time is absent.

    Example:
        >>> calculate_duration_minutes(dt.time(9, 0), dt.time(17, 30))
        510
        >>> calculate_duration_minutes("22:00", "02:00")
        240
        >>> calculate_duration_minutes("08:00", "08:00")
        0
        >>> calculate_duration_minutes(None, "17:00")
        0
    """
    start = parse_time_of_day(arrival)
    end = parse_time_of_day(departure)
    if start is None or end is None:
        return 0

    minutes = convert_time_to_minutes(end) - convert_time_to_minutes(start)
    if minutes < 0:
        minutes += MINUTES_PER_DAY
    return minutes


def format_duration(minutes: int) -> str:
    """Format a number of minutes as "{h}h {m}m".

    Hours are not capped at 24, so site totals read naturally.

    Example:
        >>> format_duration(510)
        '8h 30m'
        >>> format_duration(0)
        '0h 0m'
        >>> format_duration(1500)
        '25h 0m'
    """
    hours, remaining = divmod(minutes, 60)
    return f"{hours}h {remaining}m"
