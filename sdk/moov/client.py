"""Moov API client."""

import logging
from typing import Any, Optional

import httpx

from moov.accounts import AccountsAPI
from moov.config import Settings, get_settings
from moov.exceptions import CredentialsNotSet
from moov.payment_methods import PaymentMethodsAPI
from moov.receipts import ReceiptsAPI
from moov.sweeps import SweepsAPI
from moov.transfers import TransfersAPI

logger = logging.getLogger(__name__)

USER_AGENT = "moov-python/0.1.0"


class MoovClient(AccountsAPI, PaymentMethodsAPI, TransfersAPI, SweepsAPI, ReceiptsAPI):
    """Client for the Moov API.

    Arguments left as None are read from ``MOOV_*`` environment variables
    (see ``moov.config.Settings``). The client holds no per-call state and can
    be shared between threads.

    Args:
        public_key: Public half of the API key pair
        secret_key: Secret half of the API key pair
        access_token: OAuth access token, used instead of the key pair when set
        base_url: Base URL of the Moov API
        timeout: Default request timeout in seconds
        transport: Custom httpx transport (e.g. ``httpx.MockTransport`` in tests)
        settings: Settings to fall back on instead of the environment
    """

    def __init__(
        self,
        public_key: Optional[str] = None,
        secret_key: Optional[str] = None,
        *,
        access_token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        settings = settings or get_settings()
        public_key = public_key or settings.PUBLIC_KEY
        secret_key = secret_key or settings.SECRET_KEY
        access_token = access_token or settings.ACCESS_TOKEN

        headers = {"User-Agent": USER_AGENT}
        auth: Optional[httpx.Auth] = None
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"
        elif public_key and secret_key:
            auth = httpx.BasicAuth(public_key, secret_key)
        else:
            raise CredentialsNotSet()

        self._base_url = (base_url or settings.BASE_URL).rstrip("/")
        self._timeout = timeout if timeout is not None else settings.TIMEOUT
        self._http = httpx.Client(
            base_url=self._base_url,
            timeout=self._timeout,
            headers=headers,
            auth=auth,
            transport=transport,
        )
        logger.debug("Moov client configured for %s", self._base_url)

    def __enter__(self) -> "MoovClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    def close(self) -> None:
        """Close the HTTP client."""
        self._http.close()
