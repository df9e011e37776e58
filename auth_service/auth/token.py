"""JWT access token issuance and validation.

Tokens are HS256-signed and self-contained: the claims are the session, so
validation only needs the shared secret, never a lookup. There is no
revocation list; a token lives until the client discards it or it expires.
"""

from datetime import timedelta

import jwt
from pydantic import ValidationError

from ..config import settings
from ..utils import isodatetime
from .schemas import TokenPayload, UserBase


ALGORITHM = "HS256"
REQUIRED_CLAIMS = ["sub", "iat", "exp"]


def generate_access_token(
    user: UserBase,
    secret: str | None = None,
    expires_in: timedelta | None = None,
) -> str:
    """
    Generate a signed access token for a user.

    Args:
        user: User whose identity fields become the token claims
        secret: Signing secret; defaults to settings.jwt_secret
        expires_in: Token lifetime; defaults to settings.token_lifetime (24h)

    Returns:
        Encoded JWT string
    """
    lifetime = expires_in if expires_in is not None else settings.token_lifetime
    issued_at = isodatetime.now_unix()

    payload = {
        "sub": user.id,
        "email": user.email,
        "role": str(user.role),
        "staffId": user.staff_id,
        "firstName": user.first_name,
        "lastName": user.last_name,
        "iat": issued_at,
        "exp": issued_at + int(lifetime.total_seconds()),
    }

    signing_secret = secret if secret is not None else settings.jwt_secret
    return jwt.encode(payload, signing_secret, algorithm=ALGORITHM)


def validate_access_token(token: str, secret: str | None = None) -> TokenPayload:
    """
    Validate a token and return its claims.

    Args:
        token: Encoded JWT string
        secret: Verification secret; defaults to settings.jwt_secret

    Returns:
        Decoded claims

    Raises:
        jwt.ExpiredSignatureError: If the current time is at or after exp
        jwt.InvalidTokenError: If the signature, structure or claims are invalid
    """
    payload = jwt.decode(
        token,
        secret if secret is not None else settings.jwt_secret,
        algorithms=[ALGORITHM],
        options={"require": REQUIRED_CLAIMS},
    )

    try:
        return TokenPayload.model_validate(payload)
    except ValidationError as e:
        raise jwt.InvalidTokenError(f"Token claims are invalid: {e.error_count()} error(s)") from e


# ============================================================================
# Token Introspection
# ============================================================================


def decode_token_no_validation(token: str) -> dict:
    """
    Decode a token without checking its signature or expiry.

    For debugging and logging only. Never trust the result.

    Raises:
        jwt.DecodeError: If the token is not structurally a JWT
    """
    return jwt.decode(token, options={"verify_signature": False})


def get_token_expiry_remaining(token: str, secret: str | None = None) -> timedelta | None:
    """
    Return the time left before a token expires.

    The token is verified with `secret` (default settings.jwt_secret).
    Returns None if the token is invalid or already expired.
    """
    try:
        payload = validate_access_token(token, secret=secret)
    except jwt.InvalidTokenError:
        return None

    return isodatetime.from_unix(payload.exp) - isodatetime.from_unix(isodatetime.now_unix())


def is_token_expired(token: str, secret: str | None = None) -> bool:
    """Return True if the token is expired or invalid."""
    return get_token_expiry_remaining(token, secret=secret) is None
