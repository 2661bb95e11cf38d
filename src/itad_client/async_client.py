from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Type, TypeVar

import httpx

from .api.endpoint import Endpoint
from .api.response import RawResponse, decode_response
from .client_base import DEFAULT_HEADERS, RestClientBase
from .config import ClientSettings
from .errors import TransportError, TransportTimeout, UrlParseError


if TYPE_CHECKING:
    from .builder import ItadClientBuilder


logger = logging.getLogger(__name__)

T = TypeVar("T")


class ItadAsyncClient(RestClientBase):
    """
    Asynchronous client backed by one shared ``httpx.AsyncClient``.

    Request construction is synchronous; only the network call is awaited.
    """

    def __init__(
        self,
        host: Optional[str] = None,
        api_key: Optional[str] = None,
        oauth_token: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        super().__init__(
            host=host, api_key=api_key, oauth_token=oauth_token, timeout=timeout
        )
        if http_client is None:
            http_client = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))
        http_client.headers.update(DEFAULT_HEADERS)
        self.http_client = http_client

    @classmethod
    def with_api_key(cls, api_key: str, **kwargs: Any) -> "ItadAsyncClient":
        return cls(api_key=api_key, **kwargs)

    @classmethod
    def with_oauth_token(cls, oauth_token: str, **kwargs: Any) -> "ItadAsyncClient":
        return cls(oauth_token=oauth_token, **kwargs)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "ItadAsyncClient":
        settings = ClientSettings.from_env()
        return cls(
            host=settings.host,
            api_key=settings.api_key,
            oauth_token=settings.oauth_token,
            timeout=settings.timeout,
            **kwargs,
        )

    @staticmethod
    def builder() -> "ItadClientBuilder":
        from .builder import ItadClientBuilder

        return ItadClientBuilder()

    async def rest(self, endpoint: Endpoint) -> RawResponse:
        request = self.prepare(endpoint)

        try:
            response = await self.http_client.request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body,
                timeout=self.timeout,
            )
        except httpx.TimeoutException as e:
            raise TransportTimeout(
                f"Request timed out calling {request.path}"
            ) from e
        except httpx.InvalidURL as e:
            raise UrlParseError(request.path, str(e)) from e
        except httpx.HTTPError as e:
            raise TransportError(
                f"Request failed calling {request.path}"
            ) from e

        logger.debug(
            "%s %s -> HTTP %s", request.method, request.path, response.status_code
        )
        return RawResponse(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
        )

    async def query(self, endpoint: Endpoint, target: Type[T] = Any) -> T:  # type: ignore[assignment]
        return decode_response(await self.rest(endpoint), target)

    async def aclose(self) -> None:
        await self.http_client.aclose()

    async def __aenter__(self) -> "ItadAsyncClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
