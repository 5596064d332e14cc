"""Test configuration and fixtures for SDK tests."""

import json
from typing import Any, Callable, Iterable, Iterator

import httpx
import pytest

from moov import MoovClient
from moov.config import Settings, get_settings

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep real MOOV_* variables out of the tests."""
    for name in ("PUBLIC_KEY", "SECRET_KEY", "ACCESS_TOKEN", "BASE_URL", "TIMEOUT"):
        monkeypatch.delenv(f"MOOV_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def public_key() -> str:
    """Return a test public key."""
    return "pk_test_4f9a1c"


@pytest.fixture
def secret_key() -> str:
    """Return a test secret key."""
    return "sk_test_7d2e80"


@pytest.fixture
def base_url() -> str:
    """Return a test base URL."""
    return "https://api.moov.test"


@pytest.fixture
def settings() -> Settings:
    """Settings that ignore any .env file in the working directory."""
    return Settings(_env_file=None)


@pytest.fixture
def make_client(
    public_key: str,
    secret_key: str,
    base_url: str,
    settings: Settings,
) -> Iterator[Callable[[Handler], MoovClient]]:
    """Build clients whose requests are answered by ``handler``."""
    clients: list[MoovClient] = []

    def _make(handler: Handler) -> MoovClient:
        client = MoovClient(
            public_key,
            secret_key,
            base_url=base_url,
            transport=httpx.MockTransport(handler),
            settings=settings,
        )
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()


class FakeMoov:
    """In-memory stand-in for the transfer and receipt endpoints.

    Transfers from a payment method in ``sync_payment_methods`` complete
    immediately when the caller waits for the rail response; everything else
    is accepted for asynchronous processing.
    """

    def __init__(self, sync_payment_methods: Iterable[str] = ()) -> None:
        self.sync_payment_methods = set(sync_payment_methods)
        self.transfers: dict[str, dict[str, Any]] = {}
        self.receipts: list[dict[str, Any]] = []
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if request.method == "POST" and path.endswith("/transfers"):
            return self._create_transfer(request)
        if path == "/receipts" and request.method == "POST":
            return self._create_receipts(request)
        if path == "/receipts" and request.method == "GET":
            transfer_id = request.url.params.get("id")
            listed = [
                dict(r, sentFor=[{"receiptID": r["receiptID"], "sentOn": "2024-03-01T00:00:05Z"}])
                for r in self.receipts
                if transfer_id is None or r["forTransferID"] == transfer_id
            ]
            return httpx.Response(200, json=listed)
        return httpx.Response(404, json={"error": f"no route for {request.method} {path}"})

    def _create_transfer(self, request: httpx.Request) -> httpx.Response:
        create = json.loads(request.content)
        if create["amount"]["value"] <= 0:
            return httpx.Response(422, json={"amount": "must be greater than zero"})

        transfer_id = f"tr_{len(self.transfers) + 1}"
        synchronous = (
            create["source"].get("paymentMethodID") in self.sync_payment_methods
            and request.headers.get("X-Wait-For") == "rail-response"
        )
        transfer = {
            "transferID": transfer_id,
            "status": "completed" if synchronous else "pending",
            "amount": create["amount"],
            "source": {"paymentMethodID": create["source"].get("paymentMethodID")},
            "destination": {"paymentMethodID": create["destination"]["paymentMethodID"]},
            "createdOn": "2024-03-01T00:00:00Z",
        }
        self.transfers[transfer_id] = transfer

        if synchronous:
            return httpx.Response(201, json=transfer)
        return httpx.Response(202, json={"transferID": transfer_id, "status": "pending"})

    def _create_receipts(self, request: httpx.Request) -> httpx.Response:
        created = []
        for create in json.loads(request.content):
            if create.get("forTransferID") not in self.transfers:
                return httpx.Response(404, json={"error": "transfer not found"})
            receipt = dict(
                create,
                receiptID=f"rcpt_{len(self.receipts) + 1}",
                createdBy="acct_partner",
                createdOn="2024-03-01T00:00:01Z",
            )
            self.receipts.append(receipt)
            created.append(receipt)
        return httpx.Response(201, json=created)


@pytest.fixture
def fake_moov() -> FakeMoov:
    return FakeMoov(sync_payment_methods={"pm_card"})
