"""Waitlist endpoints (user-scoped, OAuth token required)."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, FrozenSet, Iterable, Optional

from .endpoint import Body, Endpoint, EndpointBuilder, HttpMethod, QueryEndpoint
from .endpoint import base64_form_body, json_document_body


class WaitlistCheck(QueryEndpoint):
    PATH: ClassVar[str] = "v01/user/wait/"
    REQUIRES_OAUTH_TOKEN: ClassVar[bool] = True  # wait_read

    plain: str

    @staticmethod
    def builder() -> "WaitlistCheckBuilder":
        return WaitlistCheckBuilder()


class WaitlistCheckBuilder(EndpointBuilder):
    endpoint_cls = WaitlistCheck

    def plain(self, plain: str) -> "WaitlistCheckBuilder":
        return self._set("plain", plain)


class WaitlistOptions(str, Enum):
    TITLE = "title"
    GAMEID = "gameid"


class Waitlist(QueryEndpoint):
    PATH: ClassVar[str] = "v01/user/wait/all/"
    REQUIRES_OAUTH_TOKEN: ClassVar[bool] = True  # wait_read

    shop: Optional[str] = None
    optional: Optional[WaitlistOptions] = None

    @staticmethod
    def builder() -> "WaitlistBuilder":
        return WaitlistBuilder()


class WaitlistBuilder(EndpointBuilder):
    endpoint_cls = Waitlist

    def shop(self, shop: str) -> "WaitlistBuilder":
        return self._set("shop", shop)

    def optional(self, option: WaitlistOptions) -> "WaitlistBuilder":
        return self._set("optional", option)


class ImportWaitlist(Endpoint):
    METHOD: ClassVar[HttpMethod] = HttpMethod.POST
    PATH: ClassVar[str] = "v01/waitlist/import/"
    REQUIRES_OAUTH_TOKEN: ClassVar[bool] = True  # wait_write

    file: str

    def body(self) -> Optional[Body]:
        return json_document_body(self.file)

    @staticmethod
    def builder() -> "ImportWaitlistBuilder":
        return ImportWaitlistBuilder()


class ImportWaitlistBuilder(EndpointBuilder):
    endpoint_cls = ImportWaitlist

    def file(self, document: str) -> "ImportWaitlistBuilder":
        return self._set("file", document)


class ImportWaitlistViaForm(Endpoint):
    METHOD: ClassVar[HttpMethod] = HttpMethod.POST
    PATH: ClassVar[str] = "waitlist/import/"

    body_document: str

    def body(self) -> Optional[Body]:
        return base64_form_body(self.body_document)

    @staticmethod
    def builder() -> "ImportWaitlistViaFormBuilder":
        return ImportWaitlistViaFormBuilder()


class ImportWaitlistViaFormBuilder(EndpointBuilder):
    endpoint_cls = ImportWaitlistViaForm

    def body(self, document: str) -> "ImportWaitlistViaFormBuilder":
        return self._set("body_document", document)


class WaitlistRemove(QueryEndpoint):
    """Remove games from the waitlist, by plain or by shop + ids."""

    METHOD: ClassVar[HttpMethod] = HttpMethod.DELETE
    PATH: ClassVar[str] = "v02/user/wait/remove/"
    REQUIRES_OAUTH_TOKEN: ClassVar[bool] = True  # wait_write

    plains: FrozenSet[str] = frozenset()
    shop: Optional[str] = None
    ids: FrozenSet[str] = frozenset()

    @staticmethod
    def builder() -> "WaitlistRemoveBuilder":
        return WaitlistRemoveBuilder()


class WaitlistRemoveBuilder(EndpointBuilder):
    endpoint_cls = WaitlistRemove

    def plain(self, plain: str) -> "WaitlistRemoveBuilder":
        return self._add("plains", [plain])

    def plains(self, plains: Iterable[str]) -> "WaitlistRemoveBuilder":
        return self._add("plains", plains)

    def shop(self, shop: str) -> "WaitlistRemoveBuilder":
        return self._set("shop", shop)

    def id(self, game_id: str) -> "WaitlistRemoveBuilder":
        return self._add("ids", [game_id])

    def ids(self, game_ids: Iterable[str]) -> "WaitlistRemoveBuilder":
        return self._add("ids", game_ids)
