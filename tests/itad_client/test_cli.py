import json
from unittest.mock import patch

import pytest

from itad_client import cli
from itad_client.api import FindGames, Prices, Regions, StoresInRegion, UserInfo
from itad_client.client import ItadClient


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("ITAD_API_KEY", "ITAD_OAUTH_TOKEN", "ITAD_API_HOST", "ITAD_TIMEOUT_SEC"):
        monkeypatch.delenv(name, raising=False)


def parse(argv):
    return cli.build_parser().parse_args(argv)


@pytest.mark.unit
def test_endpoint_for_each_command():
    assert isinstance(cli.endpoint_from_args(parse(["regions"])), Regions)
    assert isinstance(cli.endpoint_from_args(parse(["user-info"])), UserInfo)

    stores = cli.endpoint_from_args(parse(["stores", "eu1", "--country", "DE"]))
    assert isinstance(stores, StoresInRegion)
    assert stores.query_parameters() == "region=eu1&country=DE"

    search = cli.endpoint_from_args(parse(["search", "portal", "--limit", "3", "--strict"]))
    assert isinstance(search, FindGames)
    assert search.query_parameters() == "q=portal&limit=3&strict=1"


@pytest.mark.unit
def test_prices_command_collects_shops():
    args = parse(["prices", "portal", "portal2", "--region", "us", "--shop", "steam", "--shop", "gog"])
    endpoint = cli.endpoint_from_args(args)
    assert isinstance(endpoint, Prices)
    assert endpoint.query_parameters() == "plains=portal,portal2&region=us&shops=gog,steam"


@pytest.mark.unit
def test_main_prints_data_as_json(capsys):
    with patch.object(ItadClient, "query", return_value=[{"region": "us"}]) as mock_query:
        code = cli.main(["--log-level", "ERROR", "regions"])

    assert code == 0
    mock_query.assert_called_once()
    assert json.loads(capsys.readouterr().out) == [{"region": "us"}]


@pytest.mark.unit
def test_main_reports_missing_credentials(capsys):
    code = cli.main(["--log-level", "CRITICAL", "search", "portal"])
    assert code == 1
    assert capsys.readouterr().out == ""
