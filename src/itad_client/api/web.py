"""Informational endpoints; none of them need credentials."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, FrozenSet, Iterable, Optional

from .endpoint import Endpoint, EndpointBuilder, QueryEndpoint


class RegionDisplayOptions(str, Enum):
    NAMES = "names"


class Regions(QueryEndpoint):
    PATH: ClassVar[str] = "v01/web/regions/"

    optional: FrozenSet[RegionDisplayOptions] = frozenset()

    @staticmethod
    def builder() -> "RegionsBuilder":
        return RegionsBuilder()


class RegionsBuilder(EndpointBuilder):
    endpoint_cls = Regions

    def option(self, option: RegionDisplayOptions) -> "RegionsBuilder":
        return self._add("optional", [option])

    def options(self, options: Iterable[RegionDisplayOptions]) -> "RegionsBuilder":
        return self._add("optional", options)


class StoresDisplayOptions(str, Enum):
    DEALS = "deals"
    CATALOG = "catalog"


class StoresInRegion(QueryEndpoint):
    PATH: ClassVar[str] = "v02/web/stores/"

    region: str
    country: Optional[str] = None
    optional: FrozenSet[StoresDisplayOptions] = frozenset()

    @staticmethod
    def builder() -> "StoresInRegionBuilder":
        return StoresInRegionBuilder()


class StoresInRegionBuilder(EndpointBuilder):
    endpoint_cls = StoresInRegion

    def region(self, region: str) -> "StoresInRegionBuilder":
        return self._set("region", region)

    def country(self, country: str) -> "StoresInRegionBuilder":
        return self._set("country", country)

    def option(self, option: StoresDisplayOptions) -> "StoresInRegionBuilder":
        return self._add("optional", [option])

    def options(self, options: Iterable[StoresDisplayOptions]) -> "StoresInRegionBuilder":
        return self._add("optional", options)


class CoveredStores(Endpoint):
    PATH: ClassVar[str] = "v01/web/stores/all/"
