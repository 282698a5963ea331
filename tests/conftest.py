import httpx
import pytest

from matomo_client.config import ClientOptions
from tests.mocks.matomo import FakeMatomoAPI

MATOMO_URL = "https://analytics.example.org/"


@pytest.fixture(autouse=True)
def test_set_env(monkeypatch):
    monkeypatch.setenv("MATOMO_URL", MATOMO_URL)
    monkeypatch.setenv("MATOMO_AUTH_TOKEN", "test-token")
    for name in (
        "MATOMO_DEFAULT_SITE_ID",
        "MATOMO_FORMAT",
        "MATOMO_LANGUAGE",
        "MATOMO_TIMEOUT",
        "MATOMO_SECURITY_MODE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def options() -> ClientOptions:
    """
    Client options pointing at the fake Matomo instance.

    Returns
    -------
    ClientOptions
        Options with a token and a default site.
    """
    return ClientOptions(url=MATOMO_URL, token_auth="test-token", id_site=1)


@pytest.fixture
def fake_api() -> FakeMatomoAPI:
    return FakeMatomoAPI(
        responses={
            "API.getMatomoVersion": {"value": "5.1.0"},
            "API.isPluginActivated": {"value": True},
            "SitesManager.getAllSites": [{"idsite": "1", "name": "Example"}],
            "VisitsSummary.get": {"nb_visits": 12, "nb_actions": 40},
            "Goals.getGoals": [],
        }
    )


@pytest.fixture
def matomo_transport(fake_api: FakeMatomoAPI) -> httpx.MockTransport:
    """
    Mock transport routing requests to the fake Matomo API.

    Returns
    -------
    httpx.MockTransport
        Transport bound to ``fake_api``.
    """
    return httpx.MockTransport(handler=fake_api.handler)
