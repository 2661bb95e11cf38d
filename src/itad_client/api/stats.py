"""
Public statistics charts.

The private "waitlist price limits" and "waitlist cut limits" endpoints need
explicit permission from the service and are not provided.
"""

from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import Field

from .endpoint import EndpointBuilder, QueryEndpoint


class _Chart(QueryEndpoint):
    REQUIRES_API_KEY: ClassVar[bool] = True

    offset: Optional[int] = Field(default=None, ge=0)
    limit: Optional[int] = Field(default=None, ge=0)


class _ChartBuilder(EndpointBuilder):
    def offset(self, offset: int):
        return self._set("offset", offset)

    def limit(self, limit: int):
        return self._set("limit", limit)


class WaitlistChart(_Chart):
    PATH: ClassVar[str] = "v01/stats/waitlist/chart/"

    @staticmethod
    def builder() -> "WaitlistChartBuilder":
        return WaitlistChartBuilder()


class WaitlistChartBuilder(_ChartBuilder):
    endpoint_cls = WaitlistChart


class CollectionChart(_Chart):
    PATH: ClassVar[str] = "v01/stats/collection/chart/"

    @staticmethod
    def builder() -> "CollectionChartBuilder":
        return CollectionChartBuilder()


class CollectionChartBuilder(_ChartBuilder):
    endpoint_cls = CollectionChart


class PopularityChart(_Chart):
    PATH: ClassVar[str] = "v01/stats/popularity/chart/"

    @staticmethod
    def builder() -> "PopularityChartBuilder":
        return PopularityChartBuilder()


class PopularityChartBuilder(_ChartBuilder):
    endpoint_cls = PopularityChart
