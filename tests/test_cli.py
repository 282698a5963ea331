from types import SimpleNamespace

import httpx
import respx
from typer.testing import CliRunner

from matomo_client.cli.callbacks import params_callback
from matomo_client.cli.main import app

runner = CliRunner()

ENDPOINT = "https://analytics.example.org/index.php"


def test_version():
    with respx.mock:
        route = respx.post(ENDPOINT).mock(
            return_value=httpx.Response(200, json={"value": "5.1.0"})
        )
        result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "5.1.0" in result.output
    assert route.called


def test_call_with_params():
    with respx.mock:
        route = respx.post(ENDPOINT).mock(
            return_value=httpx.Response(200, json={"nb_visits": 12})
        )
        result = runner.invoke(
            app,
            ["call", "VisitsSummary.get", "-p", "idSite=1", "-p", "period=day", "-p", "date=today"],
        )

    assert result.exit_code == 0
    assert '"nb_visits": 12' in result.output
    body = route.calls.last.request.read().decode("utf-8")
    assert "method=VisitsSummary.get" in body
    assert "period=day" in body


def test_call_rejects_malformed_param():
    result = runner.invoke(app, ["call", "VisitsSummary.get", "-p", "period"])
    assert result.exit_code != 0


def test_call_api_error_exits():
    with respx.mock:
        respx.post(ENDPOINT).mock(
            return_value=httpx.Response(200, json={"result": "error", "message": "no access"})
        )
        result = runner.invoke(app, ["call", "SitesManager.getAllSites"])

    assert result.exit_code == 1
    assert "no access" in result.output


def test_batch():
    with respx.mock:
        respx.post(ENDPOINT).mock(
            return_value=httpx.Response(200, json=[{"value": "5.1.0"}, [{"idsite": 1}]])
        )
        result = runner.invoke(app, ["batch", "API.getMatomoVersion", "SitesManager.getAllSites"])

    assert result.exit_code == 0
    assert "API.getMatomoVersion" in result.output
    assert "SitesManager.getAllSites" in result.output


def test_missing_url_exits(monkeypatch):
    monkeypatch.delenv("MATOMO_URL")
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 1


def test_params_callback_returns_mapping():
    ctx = SimpleNamespace(resilient_parsing=False)
    assert params_callback(ctx, ["idSite=1", "segment=country==fr"]) == {
        "idSite": "1",
        "segment": "country==fr",
    }
    assert params_callback(ctx, None) == {}
