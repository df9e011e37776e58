"""Flask application entry point."""

import logging
from dataclasses import dataclass

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .api import auth_bp
from .auth.password import hash_password
from .config import DEFAULT_JWT_SECRET, Settings, settings
from .directory import FIXTURE_PASSWORD, UserRepository, build_default_repository, seed
from .exceptions import AuthServiceError

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

SERVICE_NAME = "auth-service"

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "X-DNS-Prefetch-Control": "off",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "Cross-Origin-Resource-Policy": "same-origin",
}


@dataclass
class AuthContext:
    """Dependencies handed to request handlers via app.extensions."""

    settings: Settings
    users: UserRepository
    # bcrypt hash compared against when the email is unknown, to equalize timing
    dummy_hash: str


# Error handlers
def handle_auth_service_error(error: AuthServiceError):
    """Map AuthServiceError subclasses to the envelope with their status."""
    if error.details:
        logger.info(f"{error.__class__.__name__}: {error.message} {error.details}")
    return jsonify({"success": False, "error": error.message}), error.status_code


def handle_http_exception(error: HTTPException):
    """Handle routing errors (404, 405) with the JSON envelope."""
    return jsonify({"success": False, "error": error.name}), error.code


def handle_internal_error(error: Exception):
    """Handle anything unexpected. The cause is logged, never returned."""
    logger.error(f"Internal error: {error}", exc_info=error)
    return jsonify({"success": False, "error": "Internal server error"}), 500


def apply_security_headers(response):
    """Add browser hardening headers to every response."""
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response


# Health check endpoint
def health():
    """Health check endpoint."""
    return jsonify({"status": "ok", "service": SERVICE_NAME})


def create_app(
    app_settings: Settings | None = None,
    repository: UserRepository | None = None,
) -> Flask:
    """
    Build the Flask application.

    The user directory is seeded here, before the app is returned, so no
    request can ever reach an account without a password hash.

    Args:
        app_settings: Settings to use; defaults to the environment-loaded settings
        repository: User directory; defaults to the staff roster

    Returns:
        Configured Flask app
    """
    app_settings = app_settings or settings

    if app_settings.jwt_secret == DEFAULT_JWT_SECRET:
        logger.warning("JWT_SECRET is not set; using the insecure default secret")

    users = repository if repository is not None else build_default_repository()
    if not users.is_seeded:
        seed(users, work_factor=app_settings.bcrypt_work_factor)

    app = Flask(__name__)
    app.extensions["auth_service"] = AuthContext(
        settings=app_settings,
        users=users,
        dummy_hash=hash_password("timing-equalization", work_factor=app_settings.bcrypt_work_factor),
    )

    # CORS configuration
    CORS(app, origins=[app_settings.cors_origin], supports_credentials=True)

    app.register_error_handler(AuthServiceError, handle_auth_service_error)
    app.register_error_handler(HTTPException, handle_http_exception)
    app.register_error_handler(Exception, handle_internal_error)
    app.after_request(apply_security_headers)

    app.add_url_rule("/health", view_func=health, methods=["GET"])
    app.register_blueprint(auth_bp)

    return app


def log_available_accounts(users: UserRepository) -> None:
    """Log the fixture accounts so developers know who they can log in as."""
    logger.info(f"Available users (password: {FIXTURE_PASSWORD}):")
    for user in users.all():
        logger.info(f"  {user.email} ({user.staff_id}) - {user.role}")


app = create_app()


def run() -> None:
    """Start the development server unless running under the test harness."""
    if settings.is_test:
        logger.info("APP_ENV=test; app built without binding a socket")
        return

    log_available_accounts(app.extensions["auth_service"].users)
    logger.info(f"Auth service listening at http://{settings.host}:{settings.port}")
    app.run(host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
