"""Authentication endpoints for the auth service.

- POST /api/auth/login    - Check credentials and return a signed token
- POST /api/auth/validate - Return the user carried by a bearer token
- GET  /api/auth/me       - Same claims, flattened into `data`
- POST /api/auth/logout   - Stateless; always succeeds

All responses use the envelope {success, data?, error?, message?}.
Failure messages are deliberately uniform: an unknown email and a wrong
password both give "Invalid credentials", and every token failure gives
"Invalid token".
"""

import logging

from flask import Blueprint, current_app, g, jsonify

from ..auth import token
from ..auth.decorators import token_required
from ..auth.password import verify_password
from ..auth.schemas import LoginData, UserLogin
from ..exceptions import AuthenticationError, AuthServiceError, InternalError
from .validation import validate_request

logger = logging.getLogger(__name__)


# Create blueprint
auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")


def _context():
    return current_app.extensions["auth_service"]


@auth_bp.post("/login")
@validate_request
def login(data: UserLogin):
    """
    Authenticate with email and password and return a JWT.

    Example request:
    ```json
    {"email": "anna.virtanen@nursinghome.com", "password": "nursing123"}
    ```

    Example response:
    ```json
    {
        "success": true,
        "data": {
            "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
            "user": {
                "id": "user_0001",
                "email": "anna.virtanen@nursinghome.com",
                "role": "nurse",
                "staffId": "S0001",
                "firstName": "Anna",
                "lastName": "Virtanen"
            }
        }
    }
    ```

    Raises:
        ValidationError: If email or password is missing (400)
        AuthenticationError: If the credentials do not match (401)
        InternalError: On any unexpected failure (500)
    """
    context = _context()

    try:
        user = context.users.find_by_email(data.email)

        if user is None or user.password_hash is None:
            # Run bcrypt anyway so an unknown email costs the same as a bad password
            verify_password(data.password, context.dummy_hash)
            logger.warning("Login failed: unknown email")
            raise AuthenticationError("Invalid credentials")

        if not verify_password(data.password, user.password_hash):
            logger.warning(f"Login failed: wrong password for {user.id}")
            raise AuthenticationError("Invalid credentials")

        access_token = token.generate_access_token(
            user,
            secret=context.settings.jwt_secret,
            expires_in=context.settings.token_lifetime,
        )
    except AuthServiceError:
        raise
    except Exception as e:
        logger.exception("Login error")
        raise InternalError("Internal server error", {"cause": type(e).__name__}) from e

    logger.info(f"Login successful: {user.id} ({user.role})")

    response = LoginData(token=access_token, user=user.to_response())
    return jsonify({
        "success": True,
        "data": response.model_dump(by_alias=True, mode="json"),
    }), 200


@auth_bp.post("/validate")
@token_required
def validate():
    """
    Validate a bearer token and return the user it carries.

    Example response:
    ```json
    {"success": true, "data": {"user": {"id": "user_0001", "email": "...", ...}}}
    ```
    """
    user = g.token_payload.to_user()
    return jsonify({
        "success": True,
        "data": {"user": user.model_dump(by_alias=True, mode="json")},
    }), 200


@auth_bp.post("/logout")
def logout():
    """
    Logout (no-op).

    Tokens are self-validating and stateless; the client discards its token.
    No revocation state is kept, so this always succeeds.
    """
    return jsonify({"success": True, "message": "Logged out successfully"}), 200


@auth_bp.get("/me")
@token_required
def me():
    """
    Get current user info from the bearer token.

    Unlike /validate, the user fields are the `data` object itself.
    """
    user = g.token_payload.to_user()
    return jsonify({
        "success": True,
        "data": user.model_dump(by_alias=True, mode="json"),
    }), 200
