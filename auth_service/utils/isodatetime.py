"""Unix timestamp utilities.

JWT iat and exp claims are integer unix seconds. All conversions between
those and Python datetimes go through this module.
"""

from datetime import datetime, UTC


def now_unix() -> int:
    """Get current UTC time as integer unix seconds."""
    return int(datetime.now(UTC).timestamp())


def from_unix(ts: int) -> datetime:
    """Convert unix seconds to an aware UTC datetime."""
    return datetime.fromtimestamp(ts, UTC)
