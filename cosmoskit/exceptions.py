"""
Cosmos Client Exceptions.

Exception classes raised by the client, matching the status codes and
error codes returned by the document-database REST API.

Author: Cosmoskit Team
Date: 2026-10-18
"""

from typing import Any, Dict, Mapping, Optional, Type


class CosmosClientError(Exception):
    """Base exception for client errors.

    Attributes:
        message: Error message
        error_code: Service error code
    """

    def __init__(self, message: str, error_code: str = "InternalServerError"):
        """Initialize client error.

        Args:
            message: Error message
            error_code: Service error code
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class InvalidResourceError(CosmosClientError, ValueError):
    """Resource definition rejected locally, before any request is sent."""

    def __init__(self, message: str, resource_id: Optional[Any] = None):
        """Initialize invalid resource error.

        Args:
            message: Error message
            resource_id: Offending resource identifier, if any
        """
        super().__init__(message, "BadRequest")
        self.resource_id = resource_id


class ServiceRequestError(CosmosClientError):
    """Transport failure: the request never produced an HTTP response."""

    def __init__(self, message: str, method: str = "", url: str = ""):
        super().__init__(message, "ServiceRequestError")
        self.method = method
        self.url = url


class CosmosHttpError(CosmosClientError):
    """Error response returned by the service.

    Attributes:
        status_code: HTTP status code
        headers: Response headers
        activity_id: Activity id echoed by the service
        sub_status: Value of the x-ms-substatus header, if present
    """

    status = 500
    default_code = "InternalServerError"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ):
        """Initialize HTTP error.

        Args:
            message: Error message
            status_code: HTTP status code
            error_code: Service error code
            headers: Response headers
        """
        super().__init__(message, error_code or self.default_code)
        self.status_code = status_code if status_code is not None else self.status
        self.headers: Dict[str, str] = dict(headers or {})
        self.activity_id = self.headers.get("x-ms-activity-id")
        sub_status = self.headers.get("x-ms-substatus")
        self.sub_status = int(sub_status) if sub_status and sub_status.isdigit() else None

    def __str__(self) -> str:
        return f"({self.status_code} {self.error_code}) {self.message}"


class BadRequestError(CosmosHttpError):
    """Bad request error."""

    status = 400
    default_code = "BadRequest"


class UnauthorizedError(CosmosHttpError):
    """Missing or invalid authorization token."""

    status = 401
    default_code = "Unauthorized"


class ForbiddenError(CosmosHttpError):
    """Forbidden error."""

    status = 403
    default_code = "Forbidden"


class ResourceNotFoundError(CosmosHttpError):
    """Resource not found error."""

    status = 404
    default_code = "NotFound"


class ConflictError(CosmosHttpError):
    """Resource already exists error."""

    status = 409
    default_code = "Conflict"


class PreconditionFailedError(CosmosHttpError):
    """Precondition failed error (ETag mismatch)."""

    status = 412
    default_code = "PreconditionFailed"


class RequestEntityTooLargeError(CosmosHttpError):
    """Request body exceeds the service limit."""

    status = 413
    default_code = "RequestEntityTooLarge"


class TooManyRequestsError(CosmosHttpError):
    """Request rate too large.

    Attributes:
        retry_after_ms: Back-off hint from x-ms-retry-after-ms, in milliseconds
    """

    status = 429
    default_code = "TooManyRequests"

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        retry_after = self.headers.get("x-ms-retry-after-ms")
        try:
            self.retry_after_ms: Optional[float] = float(retry_after) if retry_after else None
        except ValueError:
            self.retry_after_ms = None


class ServiceUnavailableError(CosmosHttpError):
    """Service unavailable error."""

    status = 503
    default_code = "ServiceUnavailable"


_ERRORS_BY_STATUS: Dict[int, Type[CosmosHttpError]] = {
    cls.status: cls
    for cls in (
        BadRequestError,
        UnauthorizedError,
        ForbiddenError,
        ResourceNotFoundError,
        ConflictError,
        PreconditionFailedError,
        RequestEntityTooLargeError,
        TooManyRequestsError,
        ServiceUnavailableError,
    )
}


def error_from_response(
    status_code: int,
    body: Any,
    headers: Optional[Mapping[str, str]] = None,
) -> CosmosHttpError:
    """Build the exception matching an error response.

    Args:
        status_code: HTTP status code
        body: Decoded JSON body, a raw string, or None
        headers: Response headers

    Returns:
        CosmosHttpError subclass instance for the status code
    """
    error_code = None
    message = None
    if isinstance(body, dict):
        error_code = body.get("code")
        message = body.get("message")
    elif isinstance(body, str) and body:
        message = body

    error_cls = _ERRORS_BY_STATUS.get(status_code, CosmosHttpError)
    return error_cls(
        message or f"Request failed with status {status_code}",
        status_code=status_code,
        error_code=error_code,
        headers=headers,
    )
