import httpx
import pytest

from itad_client import ItadAsyncClient
from itad_client.api import ImportWaitlist, Prices, WaitlistRemove
from itad_client.errors import (
    ApiError,
    MissingOauthToken,
    TransportError,
    TransportTimeout,
)


PRICES = Prices.builder().plain("witcher3").region("us").build()


def make_client(handler, **kwargs):
    """Async client whose transport is served by ``handler``."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ItadAsyncClient(http_client=http_client, **kwargs)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_query_builds_url_and_unwraps_data():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"data": {"witcher3": {"list": []}}})

    async with make_client(handler, api_key="abc") as client:
        data = await client.query(PRICES)

    assert data == {"witcher3": {"list": []}}
    request = seen[0]
    assert request.method == "GET"
    assert request.url.host == "api.isthereanydeal.com"
    assert request.url.path == "/v01/game/prices/"
    assert dict(request.url.params) == {"plains": "witcher3", "region": "us", "key": "abc"}
    assert request.headers["accept"] == "application/json"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_delete_with_oauth_token():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"data": True})

    endpoint = WaitlistRemove.builder().plains(["portal", "portal2"]).build()
    async with make_client(handler, oauth_token="tok") as client:
        await client.rest(endpoint)

    assert seen[0].method == "DELETE"
    assert seen[0].url.params["plains"] == "portal,portal2"
    assert seen[0].url.params["access_token"] == "tok"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_post_body():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"data": True})

    endpoint = ImportWaitlist.builder().file('{"data": []}').build()
    async with make_client(handler, oauth_token="tok") as client:
        await client.rest(endpoint)

    assert seen[0].method == "POST"
    assert seen[0].headers["content-type"] == "application/json"
    assert seen[0].content == b'{"data": []}'


@pytest.mark.unit
@pytest.mark.asyncio
async def test_missing_token_fails_before_transport():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={"data": True})

    endpoint = WaitlistRemove.builder().plain("portal").build()
    async with make_client(handler, api_key="abc") as client:
        with pytest.raises(MissingOauthToken):
            await client.rest(endpoint)

    assert calls == []


@pytest.mark.unit
@pytest.mark.asyncio
async def test_api_error_envelope():
    def handler(request):
        return httpx.Response(403, json={"message": "invalid key"})

    async with make_client(handler, api_key="bad") as client:
        with pytest.raises(ApiError) as e:
            await client.query(PRICES)

    assert e.value.message == "invalid key"
    assert e.value.status_code == 403


@pytest.mark.unit
@pytest.mark.asyncio
async def test_timeout_maps_to_transport_timeout():
    def handler(request):
        raise httpx.ReadTimeout("too slow", request=request)

    async with make_client(handler, api_key="abc") as client:
        with pytest.raises(TransportTimeout):
            await client.rest(PRICES)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_connection_error_maps_to_transport_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    async with make_client(handler, api_key="abc") as client:
        with pytest.raises(TransportError) as e:
            await client.rest(PRICES)

    assert not isinstance(e.value, TransportTimeout)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_timeout_applies_to_supplied_http_client():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"data": []})

    async with make_client(handler, api_key="abc", timeout=4) as client:
        await client.rest(PRICES)

    assert seen[0].extensions["timeout"]["read"] == 4
