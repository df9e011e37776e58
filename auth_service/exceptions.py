"""Custom exceptions for the auth service.

Each exception carries the HTTP status it maps to. The message is what the
client sees; details are logged server-side only.
"""


class AuthServiceError(Exception):
    """Base exception for all auth service errors."""

    status_code = 500

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(AuthServiceError):
    """Request is missing required data."""

    status_code = 400


class AuthenticationError(AuthServiceError):
    """Bad credentials or a missing, invalid or expired token."""

    status_code = 401


class InternalError(AuthServiceError):
    """Unexpected failure. The client only ever sees a generic message."""

    status_code = 500
