import pytest

from snapchat_ads import DEFAULT_HOST, DEFAULT_VERSION, SnapchatAdsClient
from snapchat_ads.config import SnapchatAdsSettings


@pytest.mark.unit
def test_defaults_without_environment():
    settings = SnapchatAdsSettings()
    assert settings.host is None
    assert settings.api_version is None
    assert settings.access_token is None
    assert settings.request_timeout == 60.0


@pytest.mark.unit
def test_reads_snapchat_variables(monkeypatch):
    monkeypatch.setenv("SNAPCHAT_ADS_HOST", "https://sandbox.example.test/")
    monkeypatch.setenv("SNAPCHAT_ADS_API_VERSION", "v2")
    monkeypatch.setenv("SNAPCHAT_ADS_ACCESS_TOKEN", "env-token")
    monkeypatch.setenv("SNAPCHAT_ADS_REQUEST_TIMEOUT", "5")

    settings = SnapchatAdsSettings()
    assert settings.host == "https://sandbox.example.test"
    assert settings.api_version == "v2"
    assert settings.access_token == "env-token"
    assert settings.request_timeout == 5.0


@pytest.mark.unit
def test_legacy_variable_names(monkeypatch):
    monkeypatch.setenv("TWITTER_ADS_HOST", "https://legacy.example.test")
    monkeypatch.setenv("TWITTER_ADS_API_VERSION", "v0")

    settings = SnapchatAdsSettings()
    assert settings.host == "https://legacy.example.test"
    assert settings.api_version == "v0"


@pytest.mark.unit
def test_snapchat_name_takes_precedence_over_legacy(monkeypatch):
    monkeypatch.setenv("TWITTER_ADS_HOST", "https://legacy.example.test")
    monkeypatch.setenv("SNAPCHAT_ADS_HOST", "https://new.example.test")

    assert SnapchatAdsSettings().host == "https://new.example.test"


@pytest.mark.unit
def test_blank_values_are_unset(monkeypatch):
    monkeypatch.setenv("SNAPCHAT_ADS_HOST", "   ")
    monkeypatch.setenv("SNAPCHAT_ADS_API_VERSION", "")

    settings = SnapchatAdsSettings()
    assert settings.host is None
    assert settings.api_version is None


@pytest.mark.unit
def test_dotenv_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("SNAPCHAT_ADS_API_VERSION=v9\n")
    assert SnapchatAdsSettings().api_version == "v9"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_client_from_env(monkeypatch):
    monkeypatch.setenv("SNAPCHAT_ADS_HOST", "https://sandbox.example.test")
    monkeypatch.setenv("SNAPCHAT_ADS_API_VERSION", "v2")
    monkeypatch.setenv("SNAPCHAT_ADS_ACCESS_TOKEN", "env-token")

    async with SnapchatAdsClient.from_env() as client:
        assert client.config.host == "https://sandbox.example.test"
        assert client.config.version == "v2"
        assert client.config.custom_version
        assert client.config.access_token == "env-token"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_client_from_env_keeps_defaults_and_overrides(monkeypatch):
    monkeypatch.setenv("SNAPCHAT_ADS_ACCESS_TOKEN", "env-token")

    async with SnapchatAdsClient.from_env(access_token="explicit") as client:
        assert client.config.host == DEFAULT_HOST
        assert client.config.version == DEFAULT_VERSION
        assert not client.config.custom_version
        assert client.config.access_token == "explicit"
