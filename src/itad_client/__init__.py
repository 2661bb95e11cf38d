"""
itad-client - typed client for the IsThereAnyDeal REST API

Usage:
------
    from itad_client import ItadClient
    from itad_client.api import Prices

    client = ItadClient.with_api_key("...")
    endpoint = Prices.builder().plain("witcher3").region("us").build()
    prices = client.query(endpoint)

    # Asynchronous flavour, same contract
    async with ItadClient.builder().api_key("...").build_async() as client:
        prices = await client.query(endpoint)

Configuration:
--------------
ItadClient.from_env() reads ITAD_API_KEY, ITAD_OAUTH_TOKEN, ITAD_API_HOST
and ITAD_TIMEOUT_SEC (see itad_client.config).
"""

# -----------------------------------------------------------------------------
# Clients
# -----------------------------------------------------------------------------
from .async_client import ItadAsyncClient
from .builder import ItadClientBuilder
from .client import ItadClient
from .config import ClientSettings

# -----------------------------------------------------------------------------
# Errors
# -----------------------------------------------------------------------------
from .errors import (
    ApiError,
    AuthenticationError,
    ConfigError,
    DataTypeError,
    EncodingError,
    EndpointBuildError,
    ItadClientError,
    MissingApiKey,
    MissingOauthToken,
    ResponseJsonError,
    TransportError,
    TransportTimeout,
    UnknownApiError,
    UrlParseError,
)


__version__ = "0.1.0"

__all__ = [
    # Clients
    "ItadClient",
    "ItadAsyncClient",
    "ItadClientBuilder",
    "ClientSettings",
    # Errors
    "ItadClientError",
    "ApiError",
    "AuthenticationError",
    "ConfigError",
    "DataTypeError",
    "EncodingError",
    "EndpointBuildError",
    "MissingApiKey",
    "MissingOauthToken",
    "ResponseJsonError",
    "TransportError",
    "TransportTimeout",
    "UnknownApiError",
    "UrlParseError",
]
