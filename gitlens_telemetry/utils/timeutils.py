"""
Time input normalisation.

OpenTelemetry's Python SDK takes span timestamps as integer nanoseconds since
the epoch. Callers may also pass float seconds (``time.time()``) or datetimes.
"""
import math
import time
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_EVEN
from typing import Optional, Union

TimeInput = Union[int, float, datetime]


def now_ns() -> int:
    """Current time in nanoseconds since the epoch."""
    return time.time_ns()


def to_time_ns(value: Optional[TimeInput]) -> Optional[int]:
    """Convert a time input to epoch nanoseconds.

    Args:
        value: int nanoseconds, float seconds, datetime, or None. Floats carry
            about 16 significant digits, so epoch seconds keep microsecond precision

    Returns:
        int: nanoseconds since the epoch, or None when value is None

    Raises:
        ValueError: value is not a supported time input
    """
    if value is None:
        return None
    # bool is an int subclass
    if isinstance(value, bool):
        raise ValueError(f"Unsupported time input: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"Unsupported time input: {value!r}")
        # via the shortest decimal repr; value * 1e9 is only exact to ~256ns at current epochs
        return int(Decimal(repr(value)).scaleb(9).to_integral_value(rounding=ROUND_HALF_EVEN))
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        delta = value - datetime(1970, 1, 1, tzinfo=timezone.utc)
        return (delta.days * 86400 + delta.seconds) * 10**9 + delta.microseconds * 1000
    raise ValueError(f"Unsupported time input: {value!r}")
