from __future__ import annotations

from typing import Optional

from .api.query import Query
from .errors import MissingApiKey, MissingOauthToken


class Auth:
    """
    Credentials held by a client.

    Set once at construction and only read afterwards, so one instance can
    be shared by concurrent requests.
    """

    __slots__ = ("_api_key", "_oauth_token")

    def __init__(
        self, api_key: Optional[str] = None, oauth_token: Optional[str] = None
    ) -> None:
        self._api_key = api_key or None
        self._oauth_token = oauth_token or None

    @property
    def has_api_key(self) -> bool:
        return self._api_key is not None

    @property
    def has_oauth_token(self) -> bool:
        return self._oauth_token is not None

    def append_api_key(self, query: Query) -> None:
        if self._api_key is None:
            raise MissingApiKey()
        query.append_pair("key", self._api_key)

    def append_oauth_token(self, query: Query) -> None:
        if self._oauth_token is None:
            raise MissingOauthToken()
        query.append_pair("access_token", self._oauth_token)

    def __repr__(self) -> str:
        # Never print the credentials themselves.
        return (
            f"Auth(api_key={self.has_api_key}, oauth_token={self.has_oauth_token})"
        )
