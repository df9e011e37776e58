"""Tests for the @token_required decorator."""

from datetime import timedelta

import pytest
from flask import g, jsonify

from auth_service.auth.decorators import extract_bearer_token, token_required
from auth_service.auth.token import generate_access_token
from auth_service.exceptions import AuthenticationError


@pytest.fixture
def protected_client(app):
    """App with an extra route guarded by @token_required."""

    @app.get("/test/protected")
    @token_required
    def protected():
        return jsonify({"user_id": g.token_payload.id}), 200

    with app.test_client() as client:
        yield client


class TestExtractBearerToken:
    """Tests for extract_bearer_token."""

    def test_extracts_token(self, app):
        with app.test_request_context(headers={"Authorization": "Bearer abc.def.ghi"}):
            assert extract_bearer_token() == "abc.def.ghi"

    def test_missing_header(self, app):
        with app.test_request_context():
            with pytest.raises(AuthenticationError) as exc_info:
                extract_bearer_token()
        assert exc_info.value.message == "No token provided"

    @pytest.mark.parametrize("header", [
        "Basic dXNlcjpwYXNz",
        "bearer abc.def.ghi",
        "Token abc.def.ghi",
        "abc.def.ghi",
    ])
    def test_wrong_scheme(self, app, header):
        with app.test_request_context(headers={"Authorization": header}):
            with pytest.raises(AuthenticationError) as exc_info:
                extract_bearer_token()
        assert exc_info.value.message == "No token provided"


class TestTokenRequired:
    """Tests for @token_required on a real route."""

    def test_valid_token_sets_payload(self, protected_client, auth_headers, anna):
        response = protected_client.get("/test/protected", headers=auth_headers)

        assert response.status_code == 200
        assert response.get_json() == {"user_id": anna.id}

    def test_missing_token(self, protected_client):
        response = protected_client.get("/test/protected")

        assert response.status_code == 401
        assert response.get_json() == {"success": False, "error": "No token provided"}

    def test_expired_token(self, protected_client, anna, jwt_secret):
        token = generate_access_token(anna, secret=jwt_secret, expires_in=timedelta(seconds=-1))
        response = protected_client.get(
            "/test/protected", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401
        assert response.get_json()["error"] == "Invalid token"

    def test_token_signed_with_other_secret(self, protected_client, anna):
        token = generate_access_token(anna, secret="not-the-app-secret")
        response = protected_client.get(
            "/test/protected", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401
        assert response.get_json()["error"] == "Invalid token"
