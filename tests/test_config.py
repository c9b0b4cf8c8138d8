"""配置测试。"""

from __future__ import annotations

from pydantic import ValidationError
import pytest

from topsdk import ClientConfig, ConfigurationError, TopClient, TopSettings
from topsdk.constants import DEFAULT_URL


def test_client_config_defaults():
    config = ClientConfig(app_key="k", app_secret="s")
    assert config.url == DEFAULT_URL
    assert config.target_app_key == ""
    assert config.timeout == 30.0


def test_client_config_is_frozen():
    config = ClientConfig(app_key="k", app_secret="s")
    with pytest.raises(ValidationError):
        config.app_key = "other"


def test_client_config_repr_hides_secret():
    config = ClientConfig(app_key="k", app_secret="very-secret")
    assert "very-secret" not in repr(config)


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("TOP_APP_KEY", "env-key")
    monkeypatch.setenv("TOP_APP_SECRET", "env-secret")
    monkeypatch.setenv("TOP_TARGET_APP_KEY", "target")
    monkeypatch.setenv("TOP_URL", "https://eco.taobao.com/router/rest")

    config = TopSettings().to_client_config()

    assert config.app_key == "env-key"
    assert config.app_secret == "env-secret"
    assert config.target_app_key == "target"
    assert config.url == "https://eco.taobao.com/router/rest"


def test_client_from_settings(monkeypatch):
    monkeypatch.setenv("TOP_APP_KEY", "env-key")
    monkeypatch.setenv("TOP_APP_SECRET", "env-secret")

    client = TopClient.from_settings()

    assert client.app_key == "env-key"
    assert client.url == DEFAULT_URL


@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"app_key": "k"},
        {"app_secret": "s"},
        {"app_key": "", "app_secret": "s"},
        {"app_key": "k", "app_secret": ""},
    ],
)
def test_client_requires_key_and_secret(kwargs):
    with pytest.raises(ConfigurationError):
        TopClient(**kwargs)


def test_client_defaults():
    client = TopClient(app_key="k", app_secret="s")
    assert client.url == DEFAULT_URL
    assert client.target_app_key == ""


def test_client_empty_url_falls_back_to_default():
    client = TopClient(app_key="k", app_secret="s", url="")
    assert client.url == DEFAULT_URL


def test_keyword_arguments_override_config():
    config = ClientConfig(app_key="k", app_secret="s", url="http://a/router/rest")
    client = TopClient(config, target_app_key="t", url="http://b/router/rest")
    assert client.target_app_key == "t"
    assert client.url == "http://b/router/rest"
    assert config.url == "http://a/router/rest"
