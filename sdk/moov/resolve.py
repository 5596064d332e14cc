"""Resolution of raw responses into typed results or errors.

One mechanism serves every endpoint: the expected result type is a parameter,
and pydantic does the decoding.
"""

from functools import lru_cache
from typing import Any, NoReturn, Optional, TypeVar

from pydantic import TypeAdapter, ValidationError

from moov.exceptions import HTTPError, MalformedResponse, error_class_for_status
from moov.transport import CallResponse
from moov.types import ErrorResponse

T = TypeVar("T")

_FIELD_ERRORS = TypeAdapter(dict[str, Any])


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def decode(resp: CallResponse, target: Any) -> Any:
    """Decode a response body into ``target``.

    Raises:
        MalformedResponse: If the body is not valid JSON for ``target``
    """
    try:
        return _adapter(target).validate_json(resp.body)
    except ValidationError as e:
        raise MalformedResponse(
            f"unable to decode response into {getattr(target, '__name__', target)}: {e}",
            status_code=resp.status_code,
            body=resp.body,
            operation=resp.operation,
        ) from e


def completed_object_or_error(resp: CallResponse, model: type[T]) -> Optional[T]:
    """Resolve a response expected to carry a single ``model`` object.

    Returns:
        The decoded object, or None for a successful response with no body

    Raises:
        MalformedResponse: If a successful body doesn't decode
        HTTPError: If the status is outside the success range
    """
    if not resp.is_success:
        raise_for_error_response(resp)
    if not resp.body.strip():
        return None
    return decode(resp, model)


def completed_list_or_error(resp: CallResponse, model: type[T]) -> list[T]:
    """Resolve a response expected to carry a JSON array of ``model``.

    Items keep the order the server returned them in. A successful response
    with no body resolves to an empty list.
    """
    if not resp.is_success:
        raise_for_error_response(resp)
    if not resp.body.strip():
        return []
    return decode(resp, list[model])  # type: ignore[valid-type]


def raise_for_error_response(resp: CallResponse) -> NoReturn:
    """Raise the appropriate exception for a non-success response.

    Structured bodies (``{"error": ..., "details": ...}`` or a flat
    field -> message mapping) become an ``APIError`` subclass picked by status
    code; anything else becomes a plain ``HTTPError`` with the raw body text.
    """
    message: Optional[str] = None
    details: Any = None

    try:
        error = ErrorResponse.model_validate_json(resp.body)
        message, details = error.error, error.details
    except ValidationError:
        try:
            fields = _FIELD_ERRORS.validate_json(resp.body)
        except ValidationError:
            fields = {}
        if fields:
            message, details = "validation failed", fields

    if message is None:
        raise HTTPError(resp.status_code, body=resp.text, operation=resp.operation)

    exception_class = error_class_for_status(resp.status_code)
    raise exception_class(
        message=message,
        status_code=resp.status_code,
        details=details,
        body=resp.text,
        operation=resp.operation,
    )
