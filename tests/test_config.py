import pytest
from pydantic import ValidationError

from matomo_client.config import ClientOptions


def test_url_trailing_slash_is_stripped():
    options = ClientOptions(url="https://analytics.example.org///")
    assert options.url == "https://analytics.example.org"
    assert options.endpoint == "https://analytics.example.org/index.php"


def test_defaults():
    options = ClientOptions(url="https://analytics.example.org")
    assert options.format == "json"
    assert options.timeout == 30.0
    assert options.security_mode is True
    assert options.token_auth is None
    assert options.id_site is None


@pytest.mark.parametrize("url", ["", "/", "   "])
def test_empty_url_is_rejected(url):
    with pytest.raises(ValidationError):
        ClientOptions(url=url)


def test_non_positive_timeout_is_rejected():
    with pytest.raises(ValidationError):
        ClientOptions(url="https://analytics.example.org", timeout=0)


def test_unknown_format_is_rejected():
    with pytest.raises(ValidationError):
        ClientOptions(url="https://analytics.example.org", format="yaml")


def test_options_are_frozen():
    options = ClientOptions(url="https://analytics.example.org")
    with pytest.raises(ValidationError):
        options.url = "https://other.example.org"


def test_from_env(monkeypatch):
    monkeypatch.setenv("MATOMO_DEFAULT_SITE_ID", "3")
    monkeypatch.setenv("MATOMO_LANGUAGE", "fr")
    monkeypatch.setenv("MATOMO_TIMEOUT", "12.5")
    monkeypatch.setenv("MATOMO_SECURITY_MODE", "false")
    options = ClientOptions.from_env()
    assert options.url == "https://analytics.example.org"
    assert options.token_auth == "test-token"
    assert str(options.id_site) == "3"
    assert options.language == "fr"
    assert options.timeout == 12.5
    assert options.security_mode is False


def test_from_env_overrides_take_precedence():
    options = ClientOptions.from_env(token_auth="explicit", format="xml")
    assert options.token_auth == "explicit"
    assert options.format == "xml"


def test_from_env_without_url(monkeypatch):
    monkeypatch.delenv("MATOMO_URL")
    with pytest.raises(ValueError, match="MATOMO_URL"):
        ClientOptions.from_env()
