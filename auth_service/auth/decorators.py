"""Authentication decorators for protected endpoints.

- @token_required - Requires a valid `Authorization: Bearer <token>` header

Validated claims are stored in flask.g.token_payload for the endpoint.
"""

import logging
from functools import wraps

import jwt
from flask import current_app, g, request

from ..exceptions import AuthenticationError
from . import token

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def extract_bearer_token() -> str:
    """
    Pull the token out of the Authorization header.

    The scheme match is case-sensitive, the same as the header clients send.

    Raises:
        AuthenticationError: If the header is missing or not a Bearer header
    """
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith(BEARER_PREFIX):
        raise AuthenticationError(
            "No token provided",
            {"expected": "Authorization: Bearer <token>"}
        )
    return auth_header[len(BEARER_PREFIX):]


def authenticate_request():
    """
    Validate the bearer token on the current request.

    Expired, tampered and malformed tokens all fail with the same message so
    the response does not reveal which check rejected the token.

    Raises:
        AuthenticationError: If no token is provided or the token is invalid
    """
    token_str = extract_bearer_token()
    secret = current_app.extensions["auth_service"].settings.jwt_secret

    try:
        g.token_payload = token.validate_access_token(token_str, secret=secret)
    except jwt.ExpiredSignatureError:
        logger.warning("Expired token presented")
        raise AuthenticationError("Invalid token", {"code": "token_expired"})
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid token: {e}")
        raise AuthenticationError(
            "Invalid token",
            {"code": "invalid_token", "token": token_str[:20] + "..."}
        )


def token_required(f):
    """
    Decorator to require a valid bearer token for endpoint access.

    Example:
    ```python
    @token_required
    def protected_endpoint():
        user_id = g.token_payload.id
        ...
    ```
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        authenticate_request()
        return f(*args, **kwargs)

    return wrapper
