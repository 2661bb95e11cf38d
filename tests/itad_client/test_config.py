import pytest

from itad_client.config import DEFAULT_API_HOST, ClientSettings
from itad_client.errors import ConfigError


ENV_VARS = ("ITAD_API_KEY", "ITAD_OAUTH_TOKEN", "ITAD_API_HOST", "ITAD_TIMEOUT_SEC")


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.mark.unit
def test_defaults_when_env_is_empty(clean_env):
    settings = ClientSettings.from_env()
    assert settings.api_key is None
    assert settings.oauth_token is None
    assert settings.host == DEFAULT_API_HOST
    assert settings.timeout == 15.0


@pytest.mark.unit
def test_reads_credentials(clean_env):
    clean_env.setenv("ITAD_API_KEY", "key")
    clean_env.setenv("ITAD_OAUTH_TOKEN", "token")

    settings = ClientSettings.from_env()

    assert settings.api_key == "key"
    assert settings.oauth_token == "token"


@pytest.mark.unit
def test_blank_credentials_are_treated_as_missing(clean_env):
    clean_env.setenv("ITAD_API_KEY", "")
    assert ClientSettings.from_env().api_key is None


@pytest.mark.unit
@pytest.mark.parametrize("value", ["not-a-number", "0", "-3"])
def test_invalid_timeout_raises(clean_env, value):
    clean_env.setenv("ITAD_TIMEOUT_SEC", value)
    with pytest.raises(ConfigError):
        ClientSettings.from_env()
