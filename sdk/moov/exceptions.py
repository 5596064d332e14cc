"""Exception classes for the Moov SDK."""

from typing import Any, Optional


class MoovError(Exception):
    """Base exception for all Moov SDK errors."""

    def __init__(self, message: str, operation: Optional[str] = None) -> None:
        self.message = message
        self.operation = operation
        super().__init__(message)

    def __str__(self) -> str:
        if self.operation:
            return f"{self.operation}: {self.message}"
        return self.message


class CredentialsNotSet(MoovError):
    """Raised when no API credentials were supplied or found in the environment."""

    def __init__(self, message: str = "API credentials are not set") -> None:
        super().__init__(message)


class MalformedPath(MoovError):
    """Raised when a path template and its arguments don't line up."""


class TransportError(MoovError):
    """Raised when the request never produced an HTTP response (network, timeout)."""


class MalformedResponse(MoovError):
    """Raised when a successful response body doesn't decode into the expected type."""

    def __init__(
        self,
        message: str,
        status_code: int,
        body: bytes = b"",
        operation: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message, operation=operation)


class HTTPError(MoovError):
    """Raised for a non-success response whose body could not be interpreted."""

    def __init__(
        self,
        status_code: int,
        body: str = "",
        message: Optional[str] = None,
        operation: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message or body or "unexpected response", operation=operation)

    def __str__(self) -> str:
        return f"{self.operation + ': ' if self.operation else ''}[{self.status_code}] {self.message}"


class APIError(HTTPError):
    """Raised when the API returns a structured error payload."""

    def __init__(
        self,
        message: str,
        status_code: int,
        details: Any = None,
        body: str = "",
        operation: Optional[str] = None,
    ) -> None:
        self.details = details
        super().__init__(status_code, body=body, message=message, operation=operation)


class BadRequest(APIError):
    """Raised when the request was rejected as malformed (400)."""


class Unauthorized(APIError):
    """Raised when the credentials were missing or invalid (401)."""


class Forbidden(APIError):
    """Raised when the credentials lack access to the resource (403)."""


class NotFound(APIError):
    """Raised when the resource does not exist (404)."""


class Conflict(APIError):
    """Raised when the request conflicts with the resource state (409)."""


class FailedValidation(APIError):
    """Raised when one or more fields failed server-side validation (422)."""


class RateLimited(APIError):
    """Raised when the rate limit is exceeded (429)."""


class ServerError(APIError):
    """Raised when the API failed to process the request (5xx)."""


# Mapping from status codes to exception classes
STATUS_CODE_MAP: dict[int, type[APIError]] = {
    400: BadRequest,
    401: Unauthorized,
    403: Forbidden,
    404: NotFound,
    409: Conflict,
    422: FailedValidation,
    429: RateLimited,
}


def error_class_for_status(status_code: int) -> type[APIError]:
    """Return the APIError subclass matching a status code."""
    if status_code >= 500:
        return ServerError
    return STATUS_CODE_MAP.get(status_code, APIError)
