"""
Endpoint abstraction shared by every remote operation.

An endpoint is an immutable description of one call: HTTP method, relative
path, query parameters, optional body and which credentials it needs. It
never performs I/O; the clients turn it into a request.

Endpoints are built through a per-endpoint builder whose ``build()`` is the
only place validation happens:

    endpoint = Prices.builder().plain("witcher3").region("us").build()
"""

from __future__ import annotations

import base64
import json
import logging
from enum import Enum
from typing import Any, ClassVar, Dict, FrozenSet, Iterable, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, ValidationError

from ..errors import EncodingError, EndpointBuildError
from .query import Query, encode_pairs, encode_value


logger = logging.getLogger(__name__)

Body = Tuple[str, bytes]

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


class Endpoint(BaseModel):
    """
    Base class for all endpoints.

    Subclasses set the class-level METHOD / PATH / REQUIRES_* constants and
    declare their parameters as pydantic fields.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    METHOD: ClassVar[HttpMethod] = HttpMethod.GET
    PATH: ClassVar[str] = ""
    REQUIRES_API_KEY: ClassVar[bool] = False
    REQUIRES_OAUTH_TOKEN: ClassVar[bool] = False

    def method(self) -> HttpMethod:
        return self.METHOD

    def path(self) -> str:
        return self.PATH

    def query_parameters(self) -> str:
        return ""

    def body(self) -> Optional[Body]:
        return None

    def requires_api_key(self) -> bool:
        return self.REQUIRES_API_KEY

    def requires_oauth_token(self) -> bool:
        return self.REQUIRES_OAUTH_TOKEN


class QueryEndpoint(Endpoint):
    """Endpoint whose fields map 1:1 onto query parameters."""

    # Boolean fields the service expects as 1/0 instead of true/false.
    BOOL_AS_INT: ClassVar[FrozenSet[str]] = frozenset()

    def to_query(self) -> Query:
        query = Query()
        for name, field in type(self).model_fields.items():
            try:
                value = encode_value(
                    getattr(self, name), bool_as_int=name in self.BOOL_AS_INT
                )
            except (TypeError, ValueError) as e:
                raise EncodingError(
                    f"Cannot encode field '{name}' of {type(self).__name__}"
                ) from e
            if value is not None:
                query.append_pair(field.alias or name, value)
        return query

    def query_parameters(self) -> str:
        return self.to_query().encode()


def json_document_body(document: str) -> Body:
    """Raw JSON body; the document must already be valid JSON."""
    _check_json(document)
    return JSON_CONTENT_TYPE, document.encode("utf-8")


def base64_form_body(document: str) -> Body:
    """
    Form body used by the browser-redirect import flow: the JSON document is
    base64-encoded into the ``file`` field next to an empty ``upload`` field.
    """
    _check_json(document)
    encoded = base64.b64encode(document.encode("utf-8")).decode("ascii")
    form = encode_pairs([("file", encoded), ("upload", "")])
    return FORM_CONTENT_TYPE, form.encode("ascii")


def _check_json(document: str) -> None:
    try:
        json.loads(document)
    except ValueError as e:
        raise EncodingError("Import document is not valid JSON") from e


class EndpointBuilder:
    """
    Mutable staging area for one endpoint.

    Setters only record values; rules are checked once, in ``build()``.
    """

    endpoint_cls: ClassVar[Type[Endpoint]]

    def __init__(self) -> None:
        self._fields: Dict[str, Any] = {}

    def _set(self, name: str, value: Any) -> "EndpointBuilder":
        self._fields[name] = value
        return self

    def _add(self, name: str, values: Iterable[Any]) -> "EndpointBuilder":
        # A lone string is one value, not an iterable of characters.
        if isinstance(values, (str, bytes)):
            values = [values]
        self._fields.setdefault(name, set()).update(values)
        return self

    def build(self) -> Any:
        name = self.endpoint_cls.__name__
        try:
            endpoint = self.endpoint_cls(**self._fields)
        except ValidationError as e:
            reasons = "; ".join(_describe(err) for err in e.errors())
            raise EndpointBuildError(name, reasons) from e
        logger.debug("Built endpoint %s", name)
        return endpoint

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fields={sorted(self._fields)})"


def _describe(error: Dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    message = str(error.get("msg", "invalid value"))
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    return f"{location}: {message}" if location else message
