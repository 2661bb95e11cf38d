"""
Environment configuration for the clients.

    ITAD_API_KEY        - API key for catalog/pricing/search endpoints
    ITAD_OAUTH_TOKEN    - OAuth token for collection/waitlist endpoints
    ITAD_API_HOST       - Override the default API host
    ITAD_TIMEOUT_SEC    - Transport timeout in seconds (default: 15)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigError


DEFAULT_API_HOST = "api.isthereanydeal.com"
DEFAULT_TIMEOUT_SEC = 15.0


@dataclass(frozen=True)
class ClientSettings:
    api_key: Optional[str] = None
    oauth_token: Optional[str] = None
    host: str = DEFAULT_API_HOST
    timeout: float = DEFAULT_TIMEOUT_SEC

    @classmethod
    def from_env(cls) -> "ClientSettings":
        timeout_raw = os.getenv("ITAD_TIMEOUT_SEC", str(DEFAULT_TIMEOUT_SEC)).strip()
        try:
            timeout = float(timeout_raw)
        except ValueError as e:
            raise ConfigError(
                f"ITAD_TIMEOUT_SEC must be a number, got '{timeout_raw}'."
            ) from e
        if timeout <= 0:
            raise ConfigError(f"ITAD_TIMEOUT_SEC must be positive, got {timeout}.")

        return cls(
            api_key=os.getenv("ITAD_API_KEY") or None,
            oauth_token=os.getenv("ITAD_OAUTH_TOKEN") or None,
            host=(os.getenv("ITAD_API_HOST") or DEFAULT_API_HOST).strip(),
            timeout=timeout,
        )
