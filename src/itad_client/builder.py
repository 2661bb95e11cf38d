from __future__ import annotations

from typing import Optional

from .async_client import ItadAsyncClient
from .client import ItadClient


class ItadClientBuilder:
    """Incremental configuration for either client flavour."""

    def __init__(self) -> None:
        self._host: Optional[str] = None
        self._api_key: Optional[str] = None
        self._oauth_token: Optional[str] = None
        self._timeout: Optional[float] = None

    def host(self, host: str) -> "ItadClientBuilder":
        self._host = host
        return self

    def api_key(self, api_key: str) -> "ItadClientBuilder":
        self._api_key = api_key
        return self

    def oauth_token(self, oauth_token: str) -> "ItadClientBuilder":
        self._oauth_token = oauth_token
        return self

    def timeout(self, timeout: float) -> "ItadClientBuilder":
        self._timeout = timeout
        return self

    def build(self) -> ItadClient:
        return ItadClient(
            host=self._host,
            api_key=self._api_key,
            oauth_token=self._oauth_token,
            timeout=self._timeout,
        )

    def build_async(self) -> ItadAsyncClient:
        return ItadAsyncClient(
            host=self._host,
            api_key=self._api_key,
            oauth_token=self._oauth_token,
            timeout=self._timeout,
        )
