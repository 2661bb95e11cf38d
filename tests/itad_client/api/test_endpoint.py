import base64
from typing import ClassVar, FrozenSet, Optional
from urllib.parse import parse_qs

import pytest
from pydantic import ValidationError

from itad_client.api.endpoint import (
    Endpoint,
    EndpointBuilder,
    HttpMethod,
    QueryEndpoint,
    base64_form_body,
    json_document_body,
)
from itad_client.api import Prices
from itad_client.errors import EncodingError, EndpointBuildError


class Plain(Endpoint):
    PATH: ClassVar[str] = "v01/plain/"


class Search(QueryEndpoint):
    PATH: ClassVar[str] = "v01/search/"
    REQUIRES_API_KEY: ClassVar[bool] = True
    BOOL_AS_INT: ClassVar[FrozenSet[str]] = frozenset({"strict"})

    q: str
    limit: Optional[int] = None
    strict: Optional[bool] = None
    tags: FrozenSet[str] = frozenset()


class SearchBuilder(EndpointBuilder):
    endpoint_cls = Search

    def q(self, q):
        return self._set("q", q)

    def tag(self, tag):
        return self._add("tags", [tag])

    def tags(self, tags):
        return self._add("tags", tags)


class TestEndpointDefaults:
    """Defaults every endpoint inherits."""

    @pytest.mark.unit
    def test_defaults(self):
        endpoint = Plain()
        assert endpoint.method() is HttpMethod.GET
        assert endpoint.path() == "v01/plain/"
        assert endpoint.query_parameters() == ""
        assert endpoint.body() is None
        assert endpoint.requires_api_key() is False
        assert endpoint.requires_oauth_token() is False

    @pytest.mark.unit
    def test_endpoints_are_immutable(self):
        endpoint = Search(q="witcher")
        with pytest.raises(ValidationError):
            endpoint.q = "portal"

    @pytest.mark.unit
    def test_unknown_fields_are_rejected(self):
        with pytest.raises(ValidationError):
            Search(q="witcher", region="us")


class TestQueryEndpoint:
    @pytest.mark.unit
    def test_fields_in_declaration_order(self):
        endpoint = Search(q="witcher", limit=5, strict=True, tags={"rpg", "action"})
        assert endpoint.query_parameters() == "q=witcher&limit=5&strict=1&tags=action,rpg"

    @pytest.mark.unit
    def test_absent_fields_are_omitted(self):
        assert Search(q="witcher").query_parameters() == "q=witcher"

    @pytest.mark.unit
    def test_query_is_deterministic(self):
        first = Search(q="x", tags=["b", "c", "a"]).query_parameters()
        second = Search(q="x", tags=["c", "a", "b"]).query_parameters()
        assert first == second


class TestEndpointBuilder:
    @pytest.mark.unit
    def test_build_success(self):
        endpoint = SearchBuilder().q("witcher").tag("rpg").tag("rpg").build()
        assert endpoint == Search(q="witcher", tags={"rpg"})

    @pytest.mark.unit
    def test_missing_required_field_fails_at_build(self):
        builder = SearchBuilder().tag("rpg")
        with pytest.raises(EndpointBuildError) as e:
            builder.build()
        assert e.value.endpoint == "Search"
        assert "q" in e.value.reason

    @pytest.mark.unit
    def test_builder_can_be_reused(self):
        builder = SearchBuilder().q("a")
        first = builder.build()
        second = builder.tag("x").build()
        assert first.tags == frozenset()
        assert second.tags == frozenset({"x"})

    @pytest.mark.unit
    def test_plural_setter_keeps_lone_string_whole(self):
        endpoint = SearchBuilder().q("a").tags("action").build()
        assert endpoint.tags == frozenset({"action"})
        assert endpoint.query_parameters() == "q=a&tags=action"

    @pytest.mark.unit
    def test_catalog_plural_setter_with_lone_string(self):
        endpoint = Prices.builder().plains("witcher3").region("us").build()
        assert endpoint.query_parameters() == "plains=witcher3&region=us"


class TestBodies:
    @pytest.mark.unit
    def test_json_document_body(self):
        content_type, body = json_document_body('{"data": []}')
        assert content_type == "application/json"
        assert body == b'{"data": []}'

    @pytest.mark.unit
    def test_form_body_is_base64_encoded(self):
        document = '{"version": "02", "data": [{"title": "Portal"}]}'
        content_type, body = base64_form_body(document)

        expected = base64.b64encode(document.encode("utf-8")).decode("ascii")
        assert content_type == "application/x-www-form-urlencoded"
        assert body.startswith(b"file=")
        assert body.endswith(b"&upload=")

        parsed = parse_qs(body.decode("ascii"), keep_blank_values=True)
        assert parsed["file"] == [expected]
        assert parsed["upload"] == [""]

    @pytest.mark.unit
    @pytest.mark.parametrize("encoder", [json_document_body, base64_form_body])
    def test_invalid_json_document_raises(self, encoder):
        with pytest.raises(EncodingError):
            encoder("not json {")
