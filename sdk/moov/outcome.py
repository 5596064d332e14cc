"""Outcome of an operation the server may finish now or later.

A transfer can complete synchronously (200/201 with the full resource) or be
accepted for asynchronous processing (202 with a minimal handle). ``Outcome``
holds exactly one of the two and makes the caller pick explicitly:

    ```python
    outcome = client.create_transfer(partner_id, create)
    transfer, ok = outcome.completed()
    if not ok:
        started, _ = outcome.started()
    ```
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

from moov.exceptions import HTTPError
from moov.resolve import decode, raise_for_error_response
from moov.transport import CallResponse

T = TypeVar("T")
S = TypeVar("S")

COMPLETED_STATUSES = frozenset({200, 201})
STARTED_STATUSES = frozenset({202})


@dataclass(frozen=True)
class Completed(Generic[T]):
    value: T


@dataclass(frozen=True)
class Started(Generic[S]):
    handle: S


class Outcome(Generic[T, S]):
    """Either ``Completed(T)`` or ``Started(S)``, never both and never neither."""

    __slots__ = ("_variant",)

    def __init__(self, variant: Union[Completed[T], Started[S]]) -> None:
        if not isinstance(variant, (Completed, Started)):
            raise TypeError(f"expected Completed or Started, got {type(variant).__name__}")
        self._variant = variant

    def __repr__(self) -> str:
        return f"Outcome({self._variant!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Outcome) and self._variant == other._variant

    @property
    def variant(self) -> Union[Completed[T], Started[S]]:
        return self._variant

    @property
    def is_completed(self) -> bool:
        return isinstance(self._variant, Completed)

    def completed(self) -> tuple[Optional[T], bool]:
        """Return ``(value, True)`` if the operation completed, else ``(None, False)``."""
        if isinstance(self._variant, Completed):
            return self._variant.value, True
        return None, False

    def started(self) -> tuple[Optional[S], bool]:
        """Return ``(handle, True)`` if the operation is still processing, else ``(None, False)``."""
        if isinstance(self._variant, Started):
            return self._variant.handle, True
        return None, False


def resolve_outcome(
    resp: CallResponse,
    completed_model: type[T],
    started_model: type[S],
) -> Outcome[T, S]:
    """Resolve a response into a completed or started outcome.

    Raises:
        MalformedResponse: If the body doesn't decode into the model for its status
        HTTPError: For error statuses and any success status other than 200, 201 or 202
    """
    if not resp.is_success:
        raise_for_error_response(resp)

    if resp.status_code in COMPLETED_STATUSES:
        return Outcome(Completed(decode(resp, completed_model)))
    if resp.status_code in STARTED_STATUSES:
        return Outcome(Started(decode(resp, started_model)))

    raise HTTPError(
        resp.status_code,
        body=resp.text,
        message=f"unexpected status {resp.status_code}",
        operation=resp.operation,
    )
