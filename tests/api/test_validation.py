"""Tests for the @validate_request decorator."""

from typing import ClassVar

import pytest
from flask import jsonify
from pydantic import BaseModel, Field

from auth_service.api.validation import validate_request


class MockCreateRequest(BaseModel):
    """Test schema with the default error message."""
    name: str = Field(..., min_length=1)
    count: int = 0


class MockCustomMessageRequest(BaseModel):
    """Test schema with a client-facing message."""
    validation_message: ClassVar[str] = "Name is required"

    name: str


@pytest.fixture
def validation_client(app):
    """App with extra routes using @validate_request."""

    @app.post("/test/valid")
    @validate_request
    def route_valid(data: MockCreateRequest):
        return jsonify({"name": data.name, "count": data.count}), 200

    @app.post("/test/custom")
    @validate_request
    def route_custom(data: MockCustomMessageRequest):
        return jsonify({"name": data.name}), 200

    @app.post("/test/path/<item_id>")
    @validate_request
    def route_path(item_id: str, data: MockCreateRequest):
        return jsonify({"item_id": item_id, "name": data.name}), 200

    @app.post("/test/plain/<item_id>")
    @validate_request
    def route_plain(item_id: str):
        return jsonify({"item_id": item_id}), 200

    with app.test_client() as client:
        yield client


def test_validates_valid_request_body(validation_client):
    response = validation_client.post("/test/valid", json={"name": "Widget", "count": 3})

    assert response.status_code == 200
    assert response.get_json() == {"name": "Widget", "count": 3}


def test_default_values_applied(validation_client):
    response = validation_client.post("/test/valid", json={"name": "Widget"})

    assert response.get_json()["count"] == 0


def test_invalid_body_uses_default_message(validation_client):
    response = validation_client.post("/test/valid", json={"count": "many"})

    assert response.status_code == 400
    assert response.get_json() == {"success": False, "error": "Invalid request body"}


def test_invalid_body_uses_model_message(validation_client):
    response = validation_client.post("/test/custom", json={})

    assert response.status_code == 400
    assert response.get_json() == {"success": False, "error": "Name is required"}


def test_field_errors_not_exposed(validation_client):
    response = validation_client.post("/test/valid", json={"name": ""})

    assert response.status_code == 400
    assert response.get_json() == {"success": False, "error": "Invalid request body"}


def test_non_object_json_is_rejected(validation_client):
    response = validation_client.post("/test/valid", json=["name", "Widget"])

    assert response.status_code == 400


def test_path_parameter_with_body(validation_client):
    response = validation_client.post("/test/path/abc", json={"name": "Widget"})

    assert response.status_code == 200
    assert response.get_json() == {"item_id": "abc", "name": "Widget"}


def test_route_without_model_is_untouched(validation_client):
    response = validation_client.post("/test/plain/xyz")

    assert response.status_code == 200
    assert response.get_json() == {"item_id": "xyz"}
