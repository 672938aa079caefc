"""Tests for error handling and custom exceptions."""

import pytest
from flask import Flask

from todovault.exceptions import (
    AuthenticationError,
    HashingError,
    InvalidCredentialsError,
    ResourceNotFound,
    SessionError,
    SessionErrorKind,
    TodoVaultError,
    TokenError,
    TokenErrorKind,
    ValidationError,
)
from todovault.main import (
    handle_authentication_error,
    handle_internal_error,
    handle_not_found,
    handle_session_error,
    handle_todovault_error,
    handle_validation_error,
)


@pytest.fixture
def error_client():
    """Create a test app with error testing routes."""
    test_app = Flask(__name__)
    test_app.config["TESTING"] = True

    test_app.register_error_handler(ResourceNotFound, handle_not_found)
    test_app.register_error_handler(ValidationError, handle_validation_error)
    test_app.register_error_handler(AuthenticationError, handle_authentication_error)
    test_app.register_error_handler(SessionError, handle_session_error)
    test_app.register_error_handler(TodoVaultError, handle_todovault_error)
    test_app.register_error_handler(Exception, handle_internal_error)

    @test_app.route("/test/not-found")
    def not_found():
        raise ResourceNotFound("Todo not found", details={"id": "123"})

    @test_app.route("/test/not-found-no-details")
    def not_found_no_details():
        raise ResourceNotFound("Not found")

    @test_app.route("/test/validation")
    def validation():
        raise ValidationError("Invalid request payload", details={"field": "title"})

    @test_app.route("/test/credentials")
    def credentials():
        raise InvalidCredentialsError()

    @test_app.route("/test/session/<kind>")
    def session(kind):
        raise SessionError(SessionErrorKind(kind))

    @test_app.route("/test/hashing")
    def hashing():
        raise HashingError("Failed to hash password")

    @test_app.route("/test/internal")
    def internal():
        raise RuntimeError("Something went wrong")

    return test_app.test_client()


class TestExceptionClasses:
    """Test custom exception classes."""

    def test_base_error_with_message(self):
        error = TodoVaultError("Test error")
        assert str(error) == "Test error"
        assert error.message == "Test error"
        assert error.details == {}

    def test_base_error_with_details(self):
        details = {"id": "123"}
        assert TodoVaultError("Not found", details=details).details == details

    @pytest.mark.parametrize("cls", [
        ResourceNotFound, ValidationError, AuthenticationError, HashingError, TokenError, SessionError,
    ])
    def test_inherits_base(self, cls):
        assert issubclass(cls, TodoVaultError)

    def test_invalid_credentials_is_authentication_error(self):
        error = InvalidCredentialsError()
        assert isinstance(error, AuthenticationError)
        assert error.message == "Invalid username or password"

    def test_token_error_carries_kind(self):
        error = TokenError(TokenErrorKind.EXPIRED)
        assert error.kind is TokenErrorKind.EXPIRED
        assert error.details == {"code": "expired"}

    def test_session_error_messages(self):
        assert SessionError(SessionErrorKind.UNAUTHORIZED).message == "Unauthorized"
        assert SessionError(SessionErrorKind.BAD_REQUEST).message == "Bad request"


class TestErrorHandlers:
    """Test Flask error handlers."""

    def test_not_found_response_format(self, error_client):
        response = error_client.get("/test/not-found")
        data = response.get_json()

        assert response.status_code == 404
        assert data["error"]["type"] == "ResourceNotFound"
        assert data["error"]["message"] == "Todo not found"
        assert data["error"]["details"] == {"id": "123"}

    def test_error_without_details(self, error_client):
        """Error without details should not include details key."""
        response = error_client.get("/test/not-found-no-details")
        assert "details" not in response.get_json()["error"]

    def test_validation_response(self, error_client):
        response = error_client.get("/test/validation")
        assert response.status_code == 400
        assert response.get_json()["error"]["type"] == "ValidationError"

    def test_invalid_credentials_response(self, error_client):
        response = error_client.get("/test/credentials")
        assert response.status_code == 401
        assert response.get_json()["error"]["type"] == "AuthenticationError"

    @pytest.mark.parametrize("kind, status, error_type", [
        ("unauthorized", 401, "Unauthorized"),
        ("bad_request", 400, "BadRequest"),
    ])
    def test_session_error_response(self, error_client, kind, status, error_type):
        response = error_client.get(f"/test/session/{kind}")
        assert response.status_code == status
        assert response.get_json()["error"]["type"] == error_type

    def test_hashing_error_is_server_error(self, error_client):
        response = error_client.get("/test/hashing")
        assert response.status_code == 500
        assert response.get_json()["error"]["type"] == "HashingError"

    def test_internal_server_error_handler(self, error_client):
        """Generic errors should return the internal error format."""
        response = error_client.get("/test/internal")
        data = response.get_json()

        assert response.status_code == 500
        assert data["error"]["type"] == "InternalServerError"
        assert data["error"]["message"] == "An internal error occurred"
