from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional
from urllib.parse import urljoin, urlsplit

from .api.endpoint import Endpoint
from .api.query import Query
from .auth import Auth
from .config import DEFAULT_API_HOST, DEFAULT_TIMEOUT_SEC
from .errors import ConfigError, UrlParseError


logger = logging.getLogger(__name__)


DEFAULT_HEADERS = {
    "User-Agent": "itad-client/0.1",
    "Accept": "application/json",
}


@dataclass(frozen=True)
class PreparedRequest:
    """Everything the transport needs to perform one call."""

    method: str
    url: str
    path: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None


class RestClientBase:
    """
    Request pipeline shared by the sync and async clients.

    Features:
    - Base URL resolution and endpoint path joining
    - Credential injection driven by the endpoint's flags
    - Body / Content-Type handling

    Subclasses only add the transport call.
    """

    DEFAULT_TIMEOUT = DEFAULT_TIMEOUT_SEC

    def __init__(
        self,
        host: Optional[str] = None,
        api_key: Optional[str] = None,
        oauth_token: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.host = host or DEFAULT_API_HOST
        self.rest_url = _base_url(self.host)
        self.auth = Auth(api_key=api_key, oauth_token=oauth_token)
        self.timeout = _check_timeout(
            self.DEFAULT_TIMEOUT if timeout is None else timeout
        )

    # ---------------------------------------------------
    # Pipeline steps
    # ---------------------------------------------------
    def rest_endpoint(self, path: str) -> str:
        """Join the base URL with a relative endpoint path."""
        logger.debug("REST api call %s", path)
        url = urljoin(self.rest_url, path.lstrip("/"))
        _check_url(url)
        return url

    def prepare(self, endpoint: Endpoint) -> PreparedRequest:
        """
        Turn an endpoint into a request without touching the network.

        Missing credentials fail here, before any I/O.
        """
        url = self.rest_endpoint(endpoint.path())

        query = Query.from_encoded(endpoint.query_parameters())
        if endpoint.requires_api_key():
            self.auth.append_api_key(query)
        if endpoint.requires_oauth_token():
            self.auth.append_oauth_token(query)
        if query:
            url = f"{url}?{query.encode()}"

        headers: Dict[str, str] = {}
        content: Optional[bytes] = None
        body = endpoint.body()
        if body is not None:
            content_type, content = body
            headers["Content-Type"] = content_type

        return PreparedRequest(
            method=endpoint.method().value,
            url=url,
            path=endpoint.path(),
            headers=headers,
            body=content,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rest_url={self.rest_url!r}, auth={self.auth!r})"


def _base_url(host: str) -> str:
    host = host.strip()
    url = host if "://" in host else f"https://{host}"
    if not url.endswith("/"):
        url += "/"
    _check_url(url)
    return url


def _check_url(url: str) -> None:
    try:
        parts = urlsplit(url)
        parts.port  # raises ValueError on a malformed port
    except ValueError as e:
        raise UrlParseError(url, str(e)) from e

    if parts.scheme not in ("http", "https") or not parts.hostname:
        raise UrlParseError(url)
    if any(ch.isspace() for ch in url):
        raise UrlParseError(url, "whitespace in URL")


def _check_timeout(timeout: float) -> float:
    try:
        value = float(timeout)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Timeout must be a number, got {timeout!r}.") from e
    if value <= 0:
        raise ConfigError(f"Timeout must be positive, got {value}.")
    return value
