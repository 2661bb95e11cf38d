import pytest

from itad_client.api.query import Query
from itad_client.auth import Auth
from itad_client.errors import AuthenticationError, MissingApiKey, MissingOauthToken


@pytest.mark.unit
def test_append_api_key():
    query = Query([("plains", "portal")])
    Auth(api_key="secret").append_api_key(query)
    assert query.encode() == "plains=portal&key=secret"


@pytest.mark.unit
def test_append_oauth_token():
    query = Query()
    Auth(oauth_token="tok").append_oauth_token(query)
    assert query.encode() == "access_token=tok"


@pytest.mark.unit
def test_missing_api_key_raises():
    with pytest.raises(MissingApiKey):
        Auth(oauth_token="tok").append_api_key(Query())


@pytest.mark.unit
def test_missing_oauth_token_raises():
    with pytest.raises(MissingOauthToken) as e:
        Auth(api_key="secret").append_oauth_token(Query())
    assert isinstance(e.value, AuthenticationError)


@pytest.mark.unit
def test_empty_strings_count_as_missing():
    auth = Auth(api_key="", oauth_token="")
    assert not auth.has_api_key
    assert not auth.has_oauth_token


@pytest.mark.unit
def test_repr_never_shows_credentials():
    text = repr(Auth(api_key="secret", oauth_token="bearer-xyz"))
    assert "secret" not in text
    assert "bearer-xyz" not in text
    assert "api_key=True" in text
