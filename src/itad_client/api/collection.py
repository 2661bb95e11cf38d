"""Collection endpoints (user-scoped, OAuth token required)."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, FrozenSet, Iterable, Optional

from pydantic import model_validator

from .endpoint import Body, Endpoint, EndpointBuilder, HttpMethod, QueryEndpoint
from .endpoint import base64_form_body, json_document_body


class CollectionCheckOptions(str, Enum):
    STORES = "stores"


class CollectionCheck(QueryEndpoint):
    PATH: ClassVar[str] = "v01/user/coll/"
    REQUIRES_OAUTH_TOKEN: ClassVar[bool] = True  # coll_read

    plain: str
    optional: FrozenSet[CollectionCheckOptions] = frozenset()

    @staticmethod
    def builder() -> "CollectionCheckBuilder":
        return CollectionCheckBuilder()


class CollectionCheckBuilder(EndpointBuilder):
    endpoint_cls = CollectionCheck

    def plain(self, plain: str) -> "CollectionCheckBuilder":
        return self._set("plain", plain)

    def option(self, option: CollectionCheckOptions) -> "CollectionCheckBuilder":
        return self._add("optional", [option])

    def options(self, options: Iterable[CollectionCheckOptions]) -> "CollectionCheckBuilder":
        return self._add("optional", options)


class CollectionOptions(str, Enum):
    PLAIN = "plain"
    TITLE = "title"
    GAMEID = "gameid"
    COPY_TYPE = "copy_type"


_COLLECTION_IDENTIFIERS = frozenset(
    {CollectionOptions.PLAIN, CollectionOptions.TITLE, CollectionOptions.GAMEID}
)


class Collection(QueryEndpoint):
    """
    The whole collection of the authenticated user.

    At least one of plain / title / gameid must be requested, and asking for
    gameid needs a shop to resolve ids against.
    """

    PATH: ClassVar[str] = "v02/user/coll/all/"
    REQUIRES_OAUTH_TOKEN: ClassVar[bool] = True  # coll_read

    shop: Optional[str] = None
    short: Optional[bool] = None
    optional: FrozenSet[CollectionOptions] = frozenset()

    @model_validator(mode="after")
    def _check_requested_fields(self) -> "Collection":
        if not self.optional & _COLLECTION_IDENTIFIERS:
            raise ValueError("You must specify one of Plain, Title or Gameid")
        if CollectionOptions.GAMEID in self.optional and self.shop is None:
            raise ValueError("If you set Gameid, you must specify a shop ID")
        return self

    @staticmethod
    def builder() -> "CollectionBuilder":
        return CollectionBuilder()


class CollectionBuilder(EndpointBuilder):
    endpoint_cls = Collection

    def shop(self, shop: str) -> "CollectionBuilder":
        return self._set("shop", shop)

    def short(self, short: bool) -> "CollectionBuilder":
        return self._set("short", short)

    def option(self, option: CollectionOptions) -> "CollectionBuilder":
        return self._add("optional", [option])

    def options(self, options: Iterable[CollectionOptions]) -> "CollectionBuilder":
        return self._add("optional", options)


class ImportCollection(Endpoint):
    """Import a JSON-encoded collection document as a raw JSON body."""

    METHOD: ClassVar[HttpMethod] = HttpMethod.POST
    PATH: ClassVar[str] = "v01/collection/import/"
    REQUIRES_OAUTH_TOKEN: ClassVar[bool] = True  # coll_write

    file: str

    def body(self) -> Optional[Body]:
        return json_document_body(self.file)

    @staticmethod
    def builder() -> "ImportCollectionBuilder":
        return ImportCollectionBuilder()


class ImportCollectionBuilder(EndpointBuilder):
    endpoint_cls = ImportCollection

    def file(self, document: str) -> "ImportCollectionBuilder":
        return self._set("file", document)


class ImportCollectionViaForm(Endpoint):
    """
    Send the user to the collection import form.

    The document travels base64-encoded in a form body; the user confirms in
    the browser, so no token is attached.
    """

    METHOD: ClassVar[HttpMethod] = HttpMethod.POST
    PATH: ClassVar[str] = "collection/import/"

    body_document: str

    def body(self) -> Optional[Body]:
        return base64_form_body(self.body_document)

    @staticmethod
    def builder() -> "ImportCollectionViaFormBuilder":
        return ImportCollectionViaFormBuilder()


class ImportCollectionViaFormBuilder(EndpointBuilder):
    endpoint_cls = ImportCollectionViaForm

    def body(self, document: str) -> "ImportCollectionViaFormBuilder":
        return self._set("body_document", document)
