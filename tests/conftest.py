"""Shared test fixtures for auth-service."""

import pytest

from auth_service.auth.token import generate_access_token
from auth_service.config import Settings
from auth_service.directory import FIXTURE_PASSWORD, build_default_repository
from auth_service.main import create_app

TEST_SECRET = "test-secret-key-for-auth-service-tests"
ANNA_EMAIL = "anna.virtanen@nursinghome.com"


@pytest.fixture
def test_settings():
    """Settings with a known secret and a cheap bcrypt work factor."""
    return Settings(
        _env_file=None,
        jwt_secret=TEST_SECRET,
        bcrypt_work_factor=4,
        app_env="test",
    )


@pytest.fixture
def app(test_settings):
    """Create a Flask app over a freshly seeded staff roster."""
    test_app = create_app(test_settings, build_default_repository())
    test_app.config['TESTING'] = True
    return test_app


@pytest.fixture
def client(app):
    """Create test client for API testing."""
    with app.test_client() as client:
        yield client


@pytest.fixture
def users(app):
    """The seeded user directory the app serves."""
    return app.extensions["auth_service"].users


@pytest.fixture
def anna(users):
    """Anna Virtanen's record (nurse, S0001)."""
    return users.find_by_email(ANNA_EMAIL)


@pytest.fixture
def credentials():
    """Valid login body for the fixture nurse account."""
    return {"email": ANNA_EMAIL, "password": FIXTURE_PASSWORD}


@pytest.fixture
def jwt_token(anna, jwt_secret):
    """A token for Anna signed with the test secret."""
    return generate_access_token(anna, secret=jwt_secret)


@pytest.fixture
def auth_headers(jwt_token):
    """Get authentication headers with JWT token."""
    return {"Authorization": f"Bearer {jwt_token}"}


@pytest.fixture
def jwt_secret(test_settings):
    """The secret the test app signs and verifies with."""
    return test_settings.jwt_secret
