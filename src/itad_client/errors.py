from __future__ import annotations

from typing import Any, Optional


class ItadClientError(RuntimeError):
    """Base error for all client failures."""


class ConfigError(ItadClientError):
    """Raised when environment configuration is missing or invalid."""


class EncodingError(ItadClientError):
    """Raised when a query string or request body cannot be serialized."""


class EndpointBuildError(ItadClientError):
    """Raised by a builder when its fields violate the endpoint's rules."""

    def __init__(self, endpoint: str, reason: str) -> None:
        super().__init__(f"Cannot build {endpoint}: {reason}")
        self.endpoint = endpoint
        self.reason = reason


class TransportError(ItadClientError):
    """Raised when the underlying HTTP call fails."""


class TransportTimeout(TransportError):
    """Raised when the underlying HTTP call times out."""


class UrlParseError(ItadClientError):
    """Raised when the base host or a joined endpoint path is not a valid URL."""

    def __init__(self, url: str, reason: str = "invalid URL") -> None:
        super().__init__(f"url parse error: {reason}: '{url}'")
        self.url = url


class AuthenticationError(ItadClientError):
    """Raised when an endpoint needs a credential the client does not have."""


class MissingApiKey(AuthenticationError):
    def __init__(self) -> None:
        super().__init__("Missing API key")


class MissingOauthToken(AuthenticationError):
    def __init__(self) -> None:
        super().__init__("Missing OAuth token")


class ResponseJsonError(ItadClientError):
    """Raised when a response body is not valid JSON."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ApiError(ItadClientError):
    """The service answered with a recognized ``{"message": ...}`` error."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(f"ITAD server error: {message}")
        self.message = message
        self.status_code = status_code

    @staticmethod
    def from_payload(payload: Any, status_code: Optional[int] = None) -> ItadClientError:
        """
        Map an error-shaped JSON value onto ApiError or UnknownApiError.

        Only an object whose ``message`` is a string is recognized; anything
        else is kept verbatim on an UnknownApiError.
        """
        if isinstance(payload, dict):
            message = payload.get("message")
            if isinstance(message, str):
                return ApiError(message, status_code=status_code)
        return UnknownApiError(payload, status_code=status_code)


class UnknownApiError(ItadClientError):
    """The service answered with an error body we do not recognize."""

    def __init__(self, payload: Any, status_code: Optional[int] = None) -> None:
        super().__init__(f"Unknown ITAD server error: {payload!r}")
        self.payload = payload
        self.status_code = status_code


class DataTypeError(ItadClientError):
    """Raised when the ``data`` payload does not match the expected type."""

    def __init__(self, typename: str, detail: str) -> None:
        super().__init__(f"Parsing type {typename} from JSON: {detail}")
        self.typename = typename
        self.detail = detail
