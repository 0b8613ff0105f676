"""
Unit tests for the exception hierarchy and error response mapping.
"""

import pytest

from cosmoskit.exceptions import (
    BadRequestError,
    ConflictError,
    CosmosClientError,
    CosmosHttpError,
    ForbiddenError,
    InvalidResourceError,
    PreconditionFailedError,
    ResourceNotFoundError,
    ServiceUnavailableError,
    TooManyRequestsError,
    UnauthorizedError,
    error_from_response,
)


class TestErrorFromResponse:
    """Test mapping of status codes to exceptions."""

    @pytest.mark.parametrize("status_code,error_cls", [
        (400, BadRequestError),
        (401, UnauthorizedError),
        (403, ForbiddenError),
        (404, ResourceNotFoundError),
        (409, ConflictError),
        (412, PreconditionFailedError),
        (429, TooManyRequestsError),
        (503, ServiceUnavailableError),
    ])
    def test_known_status_codes(self, status_code, error_cls):
        """Test each known status maps to its exception."""
        error = error_from_response(status_code, {"code": "Code", "message": "msg"})

        assert type(error) is error_cls
        assert error.status_code == status_code
        assert error.error_code == "Code"
        assert error.message == "msg"

    def test_unknown_status_code(self):
        """Test unmapped statuses fall back to CosmosHttpError."""
        error = error_from_response(418, None)

        assert type(error) is CosmosHttpError
        assert error.status_code == 418
        assert "418" in error.message

    def test_default_error_code(self):
        """Test the error code defaults per class when the body has none."""
        error = error_from_response(404, "plain text")

        assert error.error_code == "NotFound"
        assert error.message == "plain text"

    def test_headers_are_kept(self):
        """Test activity id and sub-status come from headers."""
        error = error_from_response(
            404,
            {"code": "NotFound", "message": "gone"},
            {"x-ms-activity-id": "act-1", "x-ms-substatus": "1003"},
        )

        assert error.activity_id == "act-1"
        assert error.sub_status == 1003

    def test_retry_after(self):
        """Test the retry hint of throttled requests is parsed."""
        error = error_from_response(429, {}, {"x-ms-retry-after-ms": "250"})

        assert error.retry_after_ms == 250.0

    def test_str_includes_status_and_code(self):
        """Test the string form carries status, code and message."""
        error = error_from_response(409, {"code": "Conflict", "message": "exists"})

        assert str(error) == "(409 Conflict) exists"


class TestHierarchy:
    """Test exception inheritance."""

    def test_http_errors_are_client_errors(self):
        """Test HTTP errors share the client base class."""
        assert issubclass(ResourceNotFoundError, CosmosHttpError)
        assert issubclass(CosmosHttpError, CosmosClientError)

    def test_invalid_resource_error(self):
        """Test local validation errors are ValueErrors with a BadRequest code."""
        error = InvalidResourceError("Id is required.")

        assert isinstance(error, ValueError)
        assert isinstance(error, CosmosClientError)
        assert error.error_code == "BadRequest"
