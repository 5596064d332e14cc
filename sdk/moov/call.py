"""Request construction: endpoints, call options and the request descriptor.

Every endpoint wrapper describes its request declaratively as an ``Endpoint``
plus a sequence of call options. Options are plain data transformations over a
``CallBuilder``; they never perform I/O, so a request can be built and
inspected without a network.

Example:
    ```python
    request = build_request(
        Endpoint("GET", "/accounts/{accountID}/transfers", account_id),
        accept_json(),
        skip(0),
        count(10),
    )
    ```
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, Optional, Protocol
from urllib.parse import quote

from pydantic_core import to_json

from moov.exceptions import MalformedPath

PLACEHOLDER = re.compile(r"\{[^{}/]+\}")


@dataclass(frozen=True)
class Request:
    """A fully built request, ready to be dispatched."""

    method: str
    path: str
    params: Mapping[str, str] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None
    timeout: Optional[float] = None
    operation: Optional[str] = None


class CallBuilder:
    """In-progress request that call options write into."""

    def __init__(self, operation: Optional[str] = None) -> None:
        self.operation = operation
        self.method = "GET"
        self.path = "/"
        self.params: dict[str, str] = {}
        self.headers: dict[str, str] = {}
        self.body: Optional[bytes] = None
        self.timeout: Optional[float] = None

    def apply(self, *args: "CallArg") -> "CallBuilder":
        """Apply options left to right; later writes to the same key win."""
        for arg in args:
            arg.apply(self)
        return self

    def build(self) -> Request:
        return Request(
            method=self.method,
            path=self.path,
            params=MappingProxyType(dict(self.params)),
            headers=MappingProxyType(dict(self.headers)),
            body=self.body,
            timeout=self.timeout,
            operation=self.operation,
        )


class CallArg(Protocol):
    """Anything that can modify a request before it is sent."""

    def apply(self, call: CallBuilder) -> None: ...


class call_builder_fn:
    """Adapt a plain ``fn(call)`` function into a ``CallArg``."""

    def __init__(self, fn: Callable[[CallBuilder], None]) -> None:
        self._fn = fn

    def apply(self, call: CallBuilder) -> None:
        self._fn(call)


class Endpoint:
    """An HTTP method plus a path template with positional ``{name}`` placeholders.

    Args:
        method: HTTP method
        template: Path template, e.g. ``/accounts/{accountID}/sweeps/{sweepID}``
        *args: Values substituted into the placeholders, in order
    """

    def __init__(self, method: str, template: str, *args: str) -> None:
        self.method = method.upper()
        self.template = template
        self.args = args

    def __repr__(self) -> str:
        return f"Endpoint({self.method!r}, {self.template!r}, *{self.args!r})"

    def resolve(self) -> str:
        """Substitute the arguments into the template.

        Raises:
            MalformedPath: If the argument count doesn't match the placeholder count
        """
        placeholders = PLACEHOLDER.findall(self.template)
        if len(placeholders) != len(self.args):
            raise MalformedPath(
                f"path {self.template} expects {len(placeholders)} argument(s), got {len(self.args)}"
            )

        values = iter(self.args)
        return PLACEHOLDER.sub(lambda _: quote(str(next(values)), safe=""), self.template)

    def apply(self, call: CallBuilder) -> None:
        call.method = self.method
        call.path = self.resolve()


def build_request(endpoint: Endpoint, *args: CallArg, operation: Optional[str] = None) -> Request:
    """Build a request from an endpoint and call options.

    Raises:
        MalformedPath: If the endpoint path can't be resolved
    """
    try:
        return CallBuilder(operation).apply(endpoint, *args).build()
    except MalformedPath as e:
        e.operation = e.operation or operation
        raise


def prepend_args(args: Iterable[CallArg], *front: CallArg) -> list[CallArg]:
    """Place ``front`` before ``args`` so caller-supplied options are applied last."""
    return [*front, *args]


# ==================== Options ====================


def header(name: str, value: str) -> CallArg:
    def _apply(call: CallBuilder) -> None:
        call.headers[name] = value

    return call_builder_fn(_apply)


def query_param(name: str, value: Any) -> CallArg:
    """Set query parameter ``name``. Enum members are sent by value."""
    if isinstance(value, Enum):
        value = value.value

    def _apply(call: CallBuilder) -> None:
        call.params[name] = str(value)

    return call_builder_fn(_apply)


def accept_json() -> CallArg:
    return header("Accept", "application/json")


def json_body(payload: Any) -> CallArg:
    """Serialize ``payload`` as the JSON request body.

    Pydantic models are dumped by alias with ``None`` fields left out.
    """

    def _apply(call: CallBuilder) -> None:
        call.body = to_json(payload, by_alias=True, exclude_none=True)
        call.headers["Content-Type"] = "application/json"

    return call_builder_fn(_apply)


def skip(n: int) -> CallArg:
    """Zero-based offset into the result set."""
    return query_param("skip", n)


def count(n: int) -> CallArg:
    """Maximum number of results to return."""
    return query_param("count", n)


def wait_for(state: str) -> CallArg:
    """Ask the server to hold the response until ``state`` is reached."""
    return header("X-Wait-For", state)


def idempotency_key(key: str) -> CallArg:
    return header("X-Idempotency-Key", key)


def with_timeout(seconds: float) -> CallArg:
    """Bound the whole call to ``seconds``."""

    def _apply(call: CallBuilder) -> None:
        call.timeout = seconds

    return call_builder_fn(_apply)
