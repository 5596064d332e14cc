"""Tests for client configuration and HTTP execution."""

import base64
from unittest.mock import patch

import httpx
import pytest

from moov import (
    Amount,
    CreateTransfer,
    CreateTransferDestination,
    CreateTransferSource,
    MoovClient,
    with_timeout,
)
from moov.call import Endpoint, accept_json
from moov.config import Settings
from moov.exceptions import CredentialsNotSet, MalformedPath, TransportError


def test_missing_credentials(settings):
    """Test that a client can't be built without credentials."""
    with pytest.raises(CredentialsNotSet):
        MoovClient(settings=settings)
    with pytest.raises(CredentialsNotSet):
        MoovClient(public_key="pk_only", settings=settings)


def test_credentials_from_environment(monkeypatch, base_url):
    """Test that MOOV_* variables configure the client."""
    monkeypatch.setenv("MOOV_PUBLIC_KEY", "pk_env")
    monkeypatch.setenv("MOOV_SECRET_KEY", "sk_env")
    monkeypatch.setenv("MOOV_BASE_URL", base_url + "/")
    monkeypatch.setenv("MOOV_TIMEOUT", "5")

    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[])

    with MoovClient(transport=httpx.MockTransport(handler), settings=Settings(_env_file=None)) as client:
        assert client.base_url == base_url
        assert client.timeout == 5.0
        assert client.list_receipts() == []

    expected = base64.b64encode(b"pk_env:sk_env").decode()
    assert seen[0].headers["Authorization"] == f"Basic {expected}"


def test_access_token_uses_bearer_auth(settings, base_url):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[])

    with MoovClient(
        access_token="tok_123",
        base_url=base_url,
        transport=httpx.MockTransport(handler),
        settings=settings,
    ) as client:
        client.list_receipts()

    assert seen[0].headers["Authorization"] == "Bearer tok_123"
    assert seen[0].headers["User-Agent"].startswith("moov-python/")


def test_call_http_returns_raw_response_for_any_status(make_client):
    """Test that the executor leaves status codes uninterpreted."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(418, content=b"teapot", headers={"X-Request-Id": "req_1"})

    client = make_client(handler)
    resp = client.call_http(Endpoint("GET", "/ping"), accept_json(), operation="pinging")

    assert resp.status_code == 418
    assert resp.body == b"teapot"
    assert resp.headers["x-request-id"] == "req_1"
    assert resp.operation == "pinging"
    assert not resp.is_success


def test_one_network_call_per_invocation(make_client):
    """Test that failures are not retried."""
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.path)
        return httpx.Response(503, json={"error": "unavailable"})

    client = make_client(handler)
    client.call_http(Endpoint("GET", "/accounts"))
    assert calls == ["/accounts"]


def test_malformed_path_is_raised_before_network(make_client):
    def handler(request: httpx.Request) -> httpx.Response:
        pytest.fail(f"Unexpected network call: {request.method} {request.url!s}")

    client = make_client(handler)
    with pytest.raises(MalformedPath) as exc_info:
        client.call_http(Endpoint("GET", "/accounts/{accountID}"), operation="getting account")
    assert exc_info.value.operation == "getting account"


def test_network_failure_becomes_transport_error(make_client):
    """Test that connection errors are wrapped with operation context."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(handler)
    with pytest.raises(TransportError) as exc_info:
        client.get_sweep("acct_1", "wallet_1", "sweep_1")

    assert exc_info.value.operation == "getting sweep"
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


def test_timeout_becomes_transport_error(make_client):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    client = make_client(handler)
    with pytest.raises(TransportError) as exc_info:
        client.list_sweep_configs("acct_1")
    assert "timed out" in str(exc_info.value)



def test_undecodable_content_encoding_becomes_transport_error(make_client):
    """Test that a corrupt compressed body is wrapped with operation context."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, stream=httpx.ByteStream(b"not gzip"), headers={"Content-Encoding": "gzip"})

    client = make_client(handler)
    with pytest.raises(TransportError) as exc_info:
        client.list_sweeps("acct_1", "wallet_1")

    assert exc_info.value.operation == "listing sweeps"
    assert isinstance(exc_info.value.__cause__, httpx.DecodingError)


def test_per_call_timeout_is_passed_to_transport(make_client):
    """Test that with_timeout bounds the individual request."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.extensions["timeout"])
        return httpx.Response(200, json=[])

    client = make_client(handler)
    client.list_sweeps("acct_1", "wallet_1", with_timeout(2.5))
    client.list_sweeps("acct_1", "wallet_1")

    assert seen[0]["read"] == 2.5
    assert seen[1]["read"] == 30.0


def test_transfer_sends_idempotency_header(public_key, secret_key, settings):
    """Test that create_transfer sends a generated X-Idempotency-Key header."""
    with patch.object(httpx.Client, "send") as mock_send:
        mock_send.return_value = httpx.Response(202, json={"transferID": "tr_1", "status": "pending"})

        client = MoovClient(public_key, secret_key, base_url="http://test", settings=settings)
        client.create_transfer(
            "partner_1",
            CreateTransfer(
                source=CreateTransferSource(payment_method_id="pm_src"),
                destination=CreateTransferDestination(payment_method_id="pm_dst"),
                amount=Amount(currency="usd", value=1),
            ),
        )

        sent = mock_send.call_args[0][0]
        assert sent.method == "POST"
        assert sent.url.path == "/accounts/partner_1/transfers"
        assert sent.headers["X-Idempotency-Key"]
        assert sent.headers["Content-Type"] == "application/json"
