"""HTTP execution: one request in, one raw response out."""

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional

import httpx

from moov.call import CallArg, Endpoint, Request, build_request
from moov.exceptions import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CallResponse:
    """Raw response envelope; status codes are left for the resolver to interpret."""

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""
    operation: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class HTTPExecutor:
    """Mixin class providing request dispatch over an ``httpx.Client``.

    No retries are performed: every call maps to exactly one network request.
    """

    _http: httpx.Client

    def call_http(
        self,
        endpoint: Endpoint,
        *args: CallArg,
        operation: Optional[str] = None,
    ) -> CallResponse:
        """Build a request from ``endpoint`` and ``args`` and send it.

        Args:
            endpoint: Method and path of the operation
            *args: Call options, applied left to right
            operation: Label used as context in raised errors

        Returns:
            The raw response, whatever its status code

        Raises:
            MalformedPath: If the endpoint path can't be resolved
            TransportError: If no response was received
        """
        return self._execute(build_request(endpoint, *args, operation=operation))

    def _execute(self, request: Request) -> CallResponse:
        http_request = self._http.build_request(
            method=request.method,
            url=request.path,
            params=dict(request.params),
            headers=dict(request.headers),
            content=request.body,
            timeout=request.timeout if request.timeout is not None else httpx.USE_CLIENT_DEFAULT,
        )

        logger.debug("%s %s", request.method, http_request.url)
        try:
            response = self._http.send(http_request)
        except httpx.TimeoutException as e:
            raise TransportError(f"request timed out: {e}", operation=request.operation) from e
        except httpx.RequestError as e:
            raise TransportError(f"request failed: {e}", operation=request.operation) from e

        logger.debug(
            "%s %s -> %d (%d bytes)",
            request.method,
            request.path,
            response.status_code,
            len(response.content),
        )
        return CallResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.content,
            operation=request.operation,
        )
