from __future__ import annotations

from typing import ClassVar, FrozenSet, Optional

from pydantic import Field

from .endpoint import EndpointBuilder, QueryEndpoint


class FindGames(QueryEndpoint):
    """Full-text game search."""

    PATH: ClassVar[str] = "v02/search/search/"
    REQUIRES_API_KEY: ClassVar[bool] = True
    BOOL_AS_INT: ClassVar[FrozenSet[str]] = frozenset({"strict"})

    q: str = Field(min_length=1)
    limit: Optional[int] = Field(default=None, ge=0)
    strict: Optional[bool] = None

    @staticmethod
    def builder() -> "FindGamesBuilder":
        return FindGamesBuilder()


class FindGamesBuilder(EndpointBuilder):
    endpoint_cls = FindGames

    def q(self, query: str) -> "FindGamesBuilder":
        return self._set("q", query)

    def limit(self, limit: int) -> "FindGamesBuilder":
        return self._set("limit", limit)

    def strict(self, strict: bool) -> "FindGamesBuilder":
        return self._set("strict", strict)
