"""Human-readable duration parsing for token lifetimes.

Accepts the same strings JWT_EXPIRES_IN has always accepted:

    parse("24h")       -> timedelta(hours=24)
    parse("7d")        -> timedelta(days=7)
    parse("2 days")    -> timedelta(days=2)
    parse("1.5h")      -> timedelta(hours=1, minutes=30)
    parse("90000")     -> timedelta(milliseconds=90000)   # unitless string = ms
    parse(3600)        -> timedelta(seconds=3600)         # number = seconds
"""

import re
from datetime import timedelta

_PATTERN = re.compile(
    r"^(?P<value>-?(?:\d+)?\.?\d+) *(?P<unit>[a-z]+)?$",
    re.IGNORECASE,
)

_MS_PER_UNIT = {
    "ms": 1,
    "msec": 1,
    "msecs": 1,
    "millisecond": 1,
    "milliseconds": 1,
    "s": 1000,
    "sec": 1000,
    "secs": 1000,
    "second": 1000,
    "seconds": 1000,
    "m": 60_000,
    "min": 60_000,
    "mins": 60_000,
    "minute": 60_000,
    "minutes": 60_000,
    "h": 3_600_000,
    "hr": 3_600_000,
    "hrs": 3_600_000,
    "hour": 3_600_000,
    "hours": 3_600_000,
    "d": 86_400_000,
    "day": 86_400_000,
    "days": 86_400_000,
    "w": 604_800_000,
    "week": 604_800_000,
    "weeks": 604_800_000,
    "y": 31_557_600_000,
    "yr": 31_557_600_000,
    "yrs": 31_557_600_000,
    "year": 31_557_600_000,
    "years": 31_557_600_000,
}


def parse(value: str | int | float) -> timedelta:
    """Parse a duration into a timedelta.

    Raises:
        ValueError: If the value is empty, too long, has an unknown unit,
            or is not positive.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid duration: {value!r}")

    if isinstance(value, (int, float)):
        result = timedelta(seconds=value)
    else:
        text = value.strip()
        if not text or len(text) > 100:
            raise ValueError(f"Invalid duration: {value!r}")

        match = _PATTERN.match(text)
        if match is None:
            raise ValueError(f"Invalid duration: {value!r}")

        unit = (match.group("unit") or "ms").lower()
        if unit not in _MS_PER_UNIT:
            raise ValueError(f"Unknown duration unit {unit!r} in {value!r}")

        result = timedelta(milliseconds=float(match.group("value")) * _MS_PER_UNIT[unit])

    if result <= timedelta(0):
        raise ValueError(f"Duration must be positive: {value!r}")
    return result
