from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, FrozenSet, Iterable, Optional

from pydantic import Field

from .endpoint import EndpointBuilder, QueryEndpoint


class Direction(str, Enum):
    ASC = "asc"
    DESC = "desc"


class DealsSortField(str, Enum):
    TIME = "time"
    PRICE = "price"
    CUT = "cut"
    EXPIRY = "expiry"


@dataclass(frozen=True)
class DealsSorting:
    """Sort order for the deal list, sent as ``<field>:<direction>``."""

    field: DealsSortField
    direction: Direction = Direction.DESC

    def __str__(self) -> str:
        return f"{self.field.value}:{self.direction.value}"


class DealsList(QueryEndpoint):
    PATH: ClassVar[str] = "v01/deals/list/"
    REQUIRES_API_KEY: ClassVar[bool] = True

    offset: Optional[int] = Field(default=None, ge=0)
    limit: Optional[int] = Field(default=None, ge=0)
    region: Optional[str] = None
    country: Optional[str] = None
    shops: FrozenSet[str] = frozenset()
    sort: Optional[DealsSorting] = None

    @staticmethod
    def builder() -> "DealsListBuilder":
        return DealsListBuilder()


class DealsListBuilder(EndpointBuilder):
    endpoint_cls = DealsList

    def offset(self, offset: int) -> "DealsListBuilder":
        return self._set("offset", offset)

    def limit(self, limit: int) -> "DealsListBuilder":
        return self._set("limit", limit)

    def region(self, region: str) -> "DealsListBuilder":
        return self._set("region", region)

    def country(self, country: str) -> "DealsListBuilder":
        return self._set("country", country)

    def shop(self, shop: str) -> "DealsListBuilder":
        return self._add("shops", [shop])

    def shops(self, shops: Iterable[str]) -> "DealsListBuilder":
        return self._add("shops", shops)

    def sort(
        self, field: DealsSortField, direction: Direction = Direction.DESC
    ) -> "DealsListBuilder":
        return self._set("sort", DealsSorting(field, direction))
