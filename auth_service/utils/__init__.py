"""Utility functions for the auth service.

Import convention: use module-level imports for clarity.

    from auth_service.utils import isodatetime, duration
    issued_at = isodatetime.now_unix()
    lifetime = duration.parse("24h")
"""

from . import duration, isodatetime

__all__ = ["duration", "isodatetime"]
