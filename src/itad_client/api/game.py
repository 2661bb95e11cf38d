"""Game lookups: plain identifiers, prices, historical lows, bundles, info."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, FrozenSet, Iterable, Optional

from pydantic import Field, model_validator

from .endpoint import EndpointBuilder, QueryEndpoint


class IdentifierOptions(str, Enum):
    TITLE = "title"


class Identifier(QueryEndpoint):
    """Resolve a plain from a shop id, a store URL or a title."""

    PATH: ClassVar[str] = "v02/game/plain/"
    REQUIRES_API_KEY: ClassVar[bool] = True

    shop: Optional[str] = None
    game_id: Optional[str] = None
    url: Optional[str] = None
    title: Optional[str] = None
    optional: FrozenSet[IdentifierOptions] = frozenset()

    @model_validator(mode="after")
    def _shop_required_for_store_lookups(self) -> "Identifier":
        if self.game_id is not None and self.shop is None:
            raise ValueError("Shop is required to be set when looking up by ID")
        if self.url is not None and self.shop is None:
            raise ValueError("Shop is required to be set when looking up by URL")
        return self

    @staticmethod
    def builder() -> "IdentifierBuilder":
        return IdentifierBuilder()


class IdentifierBuilder(EndpointBuilder):
    endpoint_cls = Identifier

    def shop(self, shop: str) -> "IdentifierBuilder":
        return self._set("shop", shop)

    def game_id(self, game_id: str) -> "IdentifierBuilder":
        return self._set("game_id", game_id)

    def url(self, url: str) -> "IdentifierBuilder":
        return self._set("url", url)

    def title(self, title: str) -> "IdentifierBuilder":
        return self._set("title", title)

    def option(self, option: IdentifierOptions) -> "IdentifierBuilder":
        return self._add("optional", [option])

    def options(self, options: Iterable[IdentifierOptions]) -> "IdentifierBuilder":
        return self._add("optional", options)


class MultiplePlainsById(QueryEndpoint):
    PATH: ClassVar[str] = "v01/game/plain/id/"
    REQUIRES_API_KEY: ClassVar[bool] = True

    shop: str
    ids: FrozenSet[str] = frozenset()

    @staticmethod
    def builder() -> "MultiplePlainsByIdBuilder":
        return MultiplePlainsByIdBuilder()


class MultiplePlainsByIdBuilder(EndpointBuilder):
    endpoint_cls = MultiplePlainsById

    def shop(self, shop: str) -> "MultiplePlainsByIdBuilder":
        return self._set("shop", shop)

    def id(self, game_id: str) -> "MultiplePlainsByIdBuilder":
        return self._add("ids", [game_id])

    def ids(self, game_ids: Iterable[str]) -> "MultiplePlainsByIdBuilder":
        return self._add("ids", game_ids)


class AllPlains(QueryEndpoint):
    PATH: ClassVar[str] = "v01/game/plain/list/"
    REQUIRES_API_KEY: ClassVar[bool] = True

    shop: str

    @staticmethod
    def builder() -> "AllPlainsBuilder":
        return AllPlainsBuilder()


class AllPlainsBuilder(EndpointBuilder):
    endpoint_cls = AllPlains

    def shop(self, shop: str) -> "AllPlainsBuilder":
        return self._set("shop", shop)


class MapType(str, Enum):
    PLAIN_TO_ID = "plain:id"
    ID_TO_PLAIN = "id:plain"


class IdPlainMap(QueryEndpoint):
    PATH: ClassVar[str] = "v01/game/map/"
    REQUIRES_API_KEY: ClassVar[bool] = True

    shop: str
    map_type: Optional[MapType] = Field(default=None, alias="type")

    @staticmethod
    def builder() -> "IdPlainMapBuilder":
        return IdPlainMapBuilder()


class IdPlainMapBuilder(EndpointBuilder):
    endpoint_cls = IdPlainMap

    def shop(self, shop: str) -> "IdPlainMapBuilder":
        return self._set("shop", shop)

    def map_type(self, map_type: MapType) -> "IdPlainMapBuilder":
        return self._set("map_type", map_type)


# ---------------------------------------------------
# Pricing endpoints share the plains/region/shops filters
# ---------------------------------------------------
class _PriceFilterBuilder(EndpointBuilder):
    def plain(self, plain: str):
        return self._add("plains", [plain])

    def plains(self, plains: Iterable[str]):
        return self._add("plains", plains)

    def region(self, region: str):
        return self._set("region", region)

    def country(self, country: str):
        return self._set("country", country)

    def shop(self, shop: str):
        return self._add("shops", [shop])

    def shops(self, shops: Iterable[str]):
        return self._add("shops", shops)

    def exclude(self, shop: str):
        return self._add("exclude", [shop])

    def excludes(self, shops: Iterable[str]):
        return self._add("exclude", shops)


class Prices(QueryEndpoint):
    """Current prices of one or more plains."""

    PATH: ClassVar[str] = "v01/game/prices/"
    REQUIRES_API_KEY: ClassVar[bool] = True

    plains: FrozenSet[str] = Field(min_length=1)
    region: Optional[str] = None
    country: Optional[str] = None
    shops: FrozenSet[str] = frozenset()
    exclude: FrozenSet[str] = frozenset()
    added: Optional[str] = None

    @staticmethod
    def builder() -> "PricesBuilder":
        return PricesBuilder()


class PricesBuilder(_PriceFilterBuilder):
    endpoint_cls = Prices

    def added(self, added: str) -> "PricesBuilder":
        return self._set("added", added)


class HistoricalLow(QueryEndpoint):
    PATH: ClassVar[str] = "v01/game/lowest/"
    REQUIRES_API_KEY: ClassVar[bool] = True

    plains: FrozenSet[str] = Field(min_length=1)
    region: Optional[str] = None
    country: Optional[str] = None
    shops: FrozenSet[str] = frozenset()
    exclude: FrozenSet[str] = frozenset()
    since: Optional[int] = Field(default=None, ge=0)
    until: Optional[int] = Field(default=None, ge=0)
    new: Optional[bool] = None

    @staticmethod
    def builder() -> "HistoricalLowBuilder":
        return HistoricalLowBuilder()


class HistoricalLowBuilder(_PriceFilterBuilder):
    endpoint_cls = HistoricalLow

    def since(self, timestamp: int) -> "HistoricalLowBuilder":
        return self._set("since", timestamp)

    def until(self, timestamp: int) -> "HistoricalLowBuilder":
        return self._set("until", timestamp)

    def new(self, new: bool) -> "HistoricalLowBuilder":
        return self._set("new", new)


class StoreLow(QueryEndpoint):
    PATH: ClassVar[str] = "v01/game/storelow/"
    REQUIRES_API_KEY: ClassVar[bool] = True

    plains: FrozenSet[str] = Field(min_length=1)
    region: Optional[str] = None
    country: Optional[str] = None
    shops: FrozenSet[str] = frozenset()
    exclude: FrozenSet[str] = frozenset()

    @staticmethod
    def builder() -> "StoreLowBuilder":
        return StoreLowBuilder()


class StoreLowBuilder(_PriceFilterBuilder):
    endpoint_cls = StoreLow


class BundlesSorting(str, Enum):
    EXPIRY = "expiry"
    RECENT = "recent"


class Bundles(QueryEndpoint):
    PATH: ClassVar[str] = "v01/game/bundles/"
    REQUIRES_API_KEY: ClassVar[bool] = True

    plains: FrozenSet[str] = Field(min_length=1)
    limit: Optional[int] = None
    expired: Optional[bool] = None
    sort: Optional[BundlesSorting] = None
    region: Optional[str] = None

    @staticmethod
    def builder() -> "BundlesBuilder":
        return BundlesBuilder()


class BundlesBuilder(EndpointBuilder):
    endpoint_cls = Bundles

    def plain(self, plain: str) -> "BundlesBuilder":
        return self._add("plains", [plain])

    def plains(self, plains: Iterable[str]) -> "BundlesBuilder":
        return self._add("plains", plains)

    def limit(self, limit: int) -> "BundlesBuilder":
        return self._set("limit", limit)

    def expired(self, expired: bool) -> "BundlesBuilder":
        return self._set("expired", expired)

    def sort(self, sort: BundlesSorting) -> "BundlesBuilder":
        return self._set("sort", sort)

    def region(self, region: str) -> "BundlesBuilder":
        return self._set("region", region)


class InfoOptions(str, Enum):
    METACRITIC = "metacritic"


class Info(QueryEndpoint):
    PATH: ClassVar[str] = "v01/game/info/"
    REQUIRES_API_KEY: ClassVar[bool] = True

    plains: FrozenSet[str] = Field(min_length=1)
    optional: FrozenSet[InfoOptions] = frozenset()

    @staticmethod
    def builder() -> "InfoBuilder":
        return InfoBuilder()


class InfoBuilder(EndpointBuilder):
    endpoint_cls = Info

    def plain(self, plain: str) -> "InfoBuilder":
        return self._add("plains", [plain])

    def plains(self, plains: Iterable[str]) -> "InfoBuilder":
        return self._add("plains", plains)

    def option(self, option: InfoOptions) -> "InfoBuilder":
        return self._add("optional", [option])

    def options(self, options: Iterable[InfoOptions]) -> "InfoBuilder":
        return self._add("optional", options)


class OverviewOptions(str, Enum):
    VOUCHER = "voucher"
    LOCAL = "local"


class Overview(QueryEndpoint):
    """Price overview, looked up either by plains or by shop + ids."""

    PATH: ClassVar[str] = "v01/game/overview/"
    REQUIRES_API_KEY: ClassVar[bool] = True

    region: Optional[str] = None
    country: Optional[str] = None
    plains: FrozenSet[str] = frozenset()
    shop: Optional[str] = None
    ids: FrozenSet[str] = frozenset()
    allowed: FrozenSet[str] = frozenset()
    optional: FrozenSet[OverviewOptions] = frozenset()

    @staticmethod
    def builder() -> "OverviewBuilder":
        return OverviewBuilder()


class OverviewBuilder(EndpointBuilder):
    endpoint_cls = Overview

    def region(self, region: str) -> "OverviewBuilder":
        return self._set("region", region)

    def country(self, country: str) -> "OverviewBuilder":
        return self._set("country", country)

    def plain(self, plain: str) -> "OverviewBuilder":
        return self._add("plains", [plain])

    def plains(self, plains: Iterable[str]) -> "OverviewBuilder":
        return self._add("plains", plains)

    def shop(self, shop: str) -> "OverviewBuilder":
        return self._set("shop", shop)

    def id(self, game_id: str) -> "OverviewBuilder":
        return self._add("ids", [game_id])

    def ids(self, game_ids: Iterable[str]) -> "OverviewBuilder":
        return self._add("ids", game_ids)

    def allowed(self, shop: str) -> "OverviewBuilder":
        return self._add("allowed", [shop])

    def alloweds(self, shops: Iterable[str]) -> "OverviewBuilder":
        return self._add("allowed", shops)

    def option(self, option: OverviewOptions) -> "OverviewBuilder":
        return self._add("optional", [option])

    def options(self, options: Iterable[OverviewOptions]) -> "OverviewBuilder":
        return self._add("optional", options)
