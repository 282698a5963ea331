import httpx
import pytest

from matomo_client import BatchRequest, ClientOptions, ReportingClient
from tests.mocks.matomo import FakeMatomoAPI


def test_client_from_keyword_arguments():
    client = ReportingClient(url="https://analytics.example.org/", token_auth="abc", id_site=2)

    assert client.options.url == "https://analytics.example.org"
    assert client.options.id_site == 2
    assert client.core.base_url == "https://analytics.example.org"


def test_client_from_options(options: ClientOptions):
    client = ReportingClient(options)
    assert client.options is options


def test_client_from_env(monkeypatch):
    monkeypatch.setenv("MATOMO_DEFAULT_SITE_ID", "7")
    client = ReportingClient.from_env(language="fr")

    assert client.options.url == "https://analytics.example.org"
    assert client.options.token_auth == "test-token"
    assert client.options.language == "fr"


def test_prepare_requests_returns_fresh_batches():
    client = ReportingClient(url="https://analytics.example.org")
    first = client.prepare_requests()
    second = client.prepare_requests()

    assert isinstance(first, BatchRequest)
    assert first is not second
    assert first.get_core_client() is client.core
    assert client.core.prepare_requests().get_core_client() is client.core


@pytest.mark.asyncio
async def test_immediate_module_call(
    options: ClientOptions, fake_api: FakeMatomoAPI, matomo_transport: httpx.MockTransport
):
    client = ReportingClient(options, transport=matomo_transport)

    assert await client.visits_summary.get(period="day", date="today") == {
        "nb_visits": 12,
        "nb_actions": 40,
    }
    assert await client.api.is_plugin_activated(plugin_name="Goals") is True
    assert [call["method"] for call in fake_api.calls] == [
        "VisitsSummary.get",
        "API.isPluginActivated",
    ]
    assert fake_api.calls[0]["idSite"] == "1"
