"""
Endpoint catalog.

Every remote operation is a frozen endpoint model built through its
builder. Endpoints describe a call; the clients perform it.
"""

# -----------------------------------------------------------------------------
# Abstraction
# -----------------------------------------------------------------------------
from .endpoint import Endpoint, EndpointBuilder, HttpMethod, QueryEndpoint
from .query import Query, join_multi_value, split_multi_value
from .response import RawResponse, decode_response, unwrap_envelope

# -----------------------------------------------------------------------------
# Catalog
# -----------------------------------------------------------------------------
from .collection import (
    Collection,
    CollectionCheck,
    CollectionCheckOptions,
    CollectionOptions,
    ImportCollection,
    ImportCollectionViaForm,
)
from .deals import DealsList, DealsSortField, DealsSorting, Direction
from .game import (
    AllPlains,
    Bundles,
    BundlesSorting,
    HistoricalLow,
    Identifier,
    IdentifierOptions,
    IdPlainMap,
    Info,
    InfoOptions,
    MapType,
    MultiplePlainsById,
    Overview,
    OverviewOptions,
    Prices,
    StoreLow,
)
from .search import FindGames
from .stats import CollectionChart, PopularityChart, WaitlistChart
from .user import UserInfo
from .waitlist import (
    ImportWaitlist,
    ImportWaitlistViaForm,
    Waitlist,
    WaitlistCheck,
    WaitlistOptions,
    WaitlistRemove,
)
from .web import (
    CoveredStores,
    RegionDisplayOptions,
    Regions,
    StoresDisplayOptions,
    StoresInRegion,
)


__all__ = [
    # Abstraction
    "Endpoint",
    "EndpointBuilder",
    "HttpMethod",
    "QueryEndpoint",
    "Query",
    "join_multi_value",
    "split_multi_value",
    "RawResponse",
    "decode_response",
    "unwrap_envelope",
    # Game
    "AllPlains",
    "Bundles",
    "BundlesSorting",
    "HistoricalLow",
    "Identifier",
    "IdentifierOptions",
    "IdPlainMap",
    "Info",
    "InfoOptions",
    "MapType",
    "MultiplePlainsById",
    "Overview",
    "OverviewOptions",
    "Prices",
    "StoreLow",
    # Collection
    "Collection",
    "CollectionCheck",
    "CollectionCheckOptions",
    "CollectionOptions",
    "ImportCollection",
    "ImportCollectionViaForm",
    # Waitlist
    "ImportWaitlist",
    "ImportWaitlistViaForm",
    "Waitlist",
    "WaitlistCheck",
    "WaitlistOptions",
    "WaitlistRemove",
    # Web
    "CoveredStores",
    "RegionDisplayOptions",
    "Regions",
    "StoresDisplayOptions",
    "StoresInRegion",
    # Deals / search / stats / user
    "DealsList",
    "DealsSortField",
    "DealsSorting",
    "Direction",
    "FindGames",
    "CollectionChart",
    "PopularityChart",
    "WaitlistChart",
    "UserInfo",
]
