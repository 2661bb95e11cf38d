from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Type, TypeVar

import requests

from .api.endpoint import Endpoint
from .api.response import RawResponse, decode_response
from .client_base import DEFAULT_HEADERS, RestClientBase
from .config import ClientSettings
from .errors import TransportError, TransportTimeout, UrlParseError


if TYPE_CHECKING:
    from .builder import ItadClientBuilder


logger = logging.getLogger(__name__)

T = TypeVar("T")


class ItadClient(RestClientBase):
    """
    Blocking client backed by a persistent ``requests.Session``.

    The session is reused for every call; connection pooling is left to it.
    No retries are attempted: failures surface immediately.
    """

    def __init__(
        self,
        host: Optional[str] = None,
        api_key: Optional[str] = None,
        oauth_token: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        super().__init__(
            host=host, api_key=api_key, oauth_token=oauth_token, timeout=timeout
        )
        self.session = session or requests.Session()
        self.session.headers.update(DEFAULT_HEADERS)

    @classmethod
    def with_api_key(cls, api_key: str, **kwargs: Any) -> "ItadClient":
        return cls(api_key=api_key, **kwargs)

    @classmethod
    def with_oauth_token(cls, oauth_token: str, **kwargs: Any) -> "ItadClient":
        return cls(oauth_token=oauth_token, **kwargs)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "ItadClient":
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

    # ---------------------------------------------------
    # Core request methods
    # ---------------------------------------------------
    def rest(self, endpoint: Endpoint) -> RawResponse:
        """Send the endpoint's request and return the undecoded response."""
        request = self.prepare(endpoint)

        try:
            response = self.session.request(
                request.method,
                request.url,
                headers=request.headers,
                data=request.body,
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            raise TransportTimeout(
                f"Request timed out calling {request.path}"
            ) from e
        except requests.exceptions.InvalidURL as e:
            raise UrlParseError(request.path, str(e)) from e
        except requests.RequestException as e:
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

    def query(self, endpoint: Endpoint, target: Type[T] = Any) -> T:  # type: ignore[assignment]
        """Send the request and decode the ``data`` envelope into ``target``."""
        return decode_response(self.rest(endpoint), target)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "ItadClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
