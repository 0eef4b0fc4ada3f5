"""Lenient coercion of raw backend values.

Records arrive from the hosted backend as JSON rows: numbers may be strings,
time columns may be "HH:MM" or "HH:MM:SS", and older rows may hold empty
strings or garbage. These helpers turn such values into Decimal and dt.time
without ever raising, so the aggregation code stays a total function:

- anything non-numeric or absurdly large becomes Decimal("0")
- anything that is not a time of day becomes None
"""

import datetime as dt
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

ZERO = Decimal("0")

# Rates, amounts and margins stay below 10**13; larger values are garbage
MAX_ADJUSTED_EXPONENT = 12

_TIME_FORMATS = ("%H:%M", "%H:%M:%S", "%H:%M:%S.%f")


def coerce_decimal(value: Any) -> Decimal:
    """Convert a raw value to a finite Decimal, falling back to zero.

    Args:
        value: Number, numeric string, Decimal or anything else

    Returns:
        The value as a Decimal, or Decimal("0") if it is not numeric

    Example:
        >>> coerce_decimal("12.50")
        Decimal('12.50')
        >>> coerce_decimal(20)
        Decimal('20')
        >>> coerce_decimal("abc")
        Decimal('0')
        >>> coerce_decimal(None)
        Decimal('0')
        >>> coerce_decimal("1e30")
        Decimal('0')
    """
    # bool is an int subclass; a flag is never an amount
    if value is None or isinstance(value, bool):
        return ZERO

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        result = Decimal(str(value))
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return ZERO
        try:
            result = Decimal(text)
        except InvalidOperation:
            return ZERO
    else:
        return ZERO

    if not result.is_finite() or result.adjusted() > MAX_ADJUSTED_EXPONENT:
        return ZERO
    return result


def coerce_non_negative_decimal(value: Any) -> Decimal:
    """Like coerce_decimal, but negative values are clamped to zero.

    Used for hourly rates and amounts, which are non-negative by definition.

    Example:
        >>> coerce_non_negative_decimal("-5")
        Decimal('0')
    """
    result = coerce_decimal(value)
    if result < ZERO:
        return ZERO
    return result


def coerce_optional_amount(value: Any) -> Optional[Decimal]:
    """Coerce an amount that may legitimately be absent.

    None and blank strings stay None so callers can tell "not provided"
    apart from "zero". Everything else goes through
    coerce_non_negative_decimal.

    Example:
        >>> coerce_optional_amount(None) is None
        True
        >>> coerce_optional_amount("  ") is None
        True
        >>> coerce_optional_amount("oops")
        Decimal('0')
    """
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return coerce_non_negative_decimal(value)


def coerce_time_of_day(value: Any) -> Optional[dt.time]:
    """Convert a raw value to a wall-clock time with minute resolution.

    Seconds and microseconds are dropped; durations are counted in whole
    minutes.

    Args:
        value: dt.time, "HH:MM", "HH:MM:SS" or anything else

    Returns:
        A dt.time, or None if the value is absent or unparsable

    Example:
        >>> coerce_time_of_day("09:30")
        datetime.time(9, 30)
        >>> coerce_time_of_day("17:45:00")
        datetime.time(17, 45)
        >>> coerce_time_of_day("") is None
        True
        >>> coerce_time_of_day("25:00") is None
        True
    """
    if isinstance(value, dt.datetime):
        return value.time().replace(second=0, microsecond=0, tzinfo=None)
    if isinstance(value, dt.time):
        return value.replace(second=0, microsecond=0, tzinfo=None)
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    for fmt in _TIME_FORMATS:
        try:
            parsed = dt.datetime.strptime(text, fmt)
        except ValueError:
            continue
        return parsed.time().replace(second=0, microsecond=0)

    return None
