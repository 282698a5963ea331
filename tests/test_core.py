"""
Tests for the CoreReportingClient transport in matomo_client.core.
"""

from urllib.parse import parse_qsl

import httpx
import pytest

from matomo_client.batch import PendingCall
from matomo_client.config import ClientOptions
from matomo_client.core import BULK_METHOD, CoreReportingClient
from matomo_client.exceptions import (
    ApiError,
    BatchResultMismatchError,
    TransportError,
)
from tests.mocks.matomo import FakeMatomoAPI, make_matomo_transport


@pytest.fixture
def core(options: ClientOptions, matomo_transport: httpx.MockTransport) -> CoreReportingClient:
    """
    Create a transport bound to the fake Matomo API.

    Returns
    -------
    CoreReportingClient
        Client whose HTTP calls are answered by ``fake_api``.
    """
    client = CoreReportingClient(options)
    client._client_factory = lambda: httpx.AsyncClient(transport=matomo_transport)
    return client


def make_core(*, handler, **kwargs) -> CoreReportingClient:
    return CoreReportingClient(
        url="https://analytics.example.org",
        transport=httpx.MockTransport(handler=handler),
        **kwargs,
    )


def test_build_request_params_injects_defaults(options: ClientOptions):
    core = CoreReportingClient(options)
    assert core.build_request_params("VisitsSummary.get", {"period": "day"}) == {
        "module": "API",
        "method": "VisitsSummary.get",
        "format": "json",
        "token_auth": "test-token",
        "idSite": "1",
        "period": "day",
    }


def test_build_request_params_caller_site_wins(options: ClientOptions):
    core = CoreReportingClient(options)
    assert core.build_request_params("Goals.getGoals", {"idSite": 9})["idSite"] == "9"


def test_build_request_params_language():
    core = CoreReportingClient(url="https://analytics.example.org", language="fr")
    assert core.build_request_params("API.getReportMetadata")["language"] == "fr"
    params = core.build_request_params("API.getReportMetadata", {"language": "de"})
    assert params["language"] == "de"


def test_build_request_params_without_token_or_site():
    core = CoreReportingClient(url="https://analytics.example.org")
    params = core.build_request_params("API.getMatomoVersion")
    assert "token_auth" not in params
    assert "idSite" not in params


def test_base_url_is_normalised():
    core = CoreReportingClient(url="https://analytics.example.org/matomo/")
    assert core.base_url == "https://analytics.example.org/matomo"


@pytest.mark.asyncio
async def test_request_posts_form_body(core: CoreReportingClient, fake_api: FakeMatomoAPI):
    result = await core.request("VisitsSummary.get", {"period": "day", "date": "today"})

    assert result == {"nb_visits": 12, "nb_actions": 40}
    request = fake_api.requests[0]
    assert request.method == "POST"
    assert request.url.path == "/index.php"
    assert "token_auth" not in request.url.params
    assert fake_api.calls[0] == {
        "module": "API",
        "method": "VisitsSummary.get",
        "format": "json",
        "token_auth": "test-token",
        "idSite": "1",
        "period": "day",
        "date": "today",
    }


@pytest.mark.asyncio
async def test_request_uses_query_string_without_security_mode(
    fake_api: FakeMatomoAPI, matomo_transport: httpx.MockTransport
):
    core = CoreReportingClient(
        url="https://analytics.example.org",
        token_auth="test-token",
        security_mode=False,
        transport=matomo_transport,
    )
    result = await core.request("API.getMatomoVersion")

    assert result == {"value": "5.1.0"}
    request = fake_api.requests[0]
    assert request.method == "GET"
    assert request.url.params["method"] == "API.getMatomoVersion"
    assert request.url.params["token_auth"] == "test-token"


@pytest.mark.asyncio
async def test_request_flattens_array_parameters(core: CoreReportingClient, fake_api: FakeMatomoAPI):
    fake_api.responses["Annotations.getAll"] = []
    await core.request("Annotations.getAll", {"idSite": [1, 2], "lastN": 5, "starred": True})

    assert fake_api.calls[0]["idSite"] == "1,2"
    assert fake_api.calls[0]["lastN"] == "5"
    assert fake_api.calls[0]["starred"] == "1"


@pytest.mark.asyncio
async def test_dispatch_calls_request(core: CoreReportingClient, fake_api: FakeMatomoAPI):
    assert await core.dispatch("SitesManager.getAllSites", {}) == [
        {"idsite": "1", "name": "Example"}
    ]
    assert fake_api.calls[0]["method"] == "SitesManager.getAllSites"


@pytest.mark.asyncio
async def test_error_envelope_raises_api_error(core: CoreReportingClient):
    with pytest.raises(ApiError) as exc_info:
        await core.request("Unknown.method")

    assert exc_info.value.message == "The method 'Unknown.method' does not exist"
    assert exc_info.value.method == "Unknown.method"
    assert str(exc_info.value) == "Matomo API error: The method 'Unknown.method' does not exist"


@pytest.mark.asyncio
async def test_http_error_with_envelope_raises_api_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code=401, json={"result": "error", "message": "token invalid"})

    core = make_core(handler=handler)
    with pytest.raises(ApiError, match="token invalid"):
        await core.request("API.getMatomoVersion")


@pytest.mark.asyncio
async def test_http_error_without_envelope_raises_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code=502, text="Bad Gateway")

    core = make_core(handler=handler)
    with pytest.raises(TransportError) as exc_info:
        await core.request("API.getMatomoVersion")

    assert exc_info.value.status_code == 502
    assert not isinstance(exc_info.value, ApiError)


@pytest.mark.asyncio
async def test_network_failure_raises_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    core = make_core(handler=handler)
    with pytest.raises(TransportError) as exc_info:
        await core.request("API.getMatomoVersion")

    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_timeout_raises_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    core = make_core(handler=handler, timeout=0.5)
    with pytest.raises(TransportError):
        await core.request("API.getMatomoVersion")


@pytest.mark.asyncio
async def test_invalid_json_raises_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code=200, text="<html>maintenance</html>")

    core = make_core(handler=handler)
    with pytest.raises(TransportError, match="Could not decode"):
        await core.request("API.getMatomoVersion")


@pytest.mark.asyncio
async def test_textual_formats_return_text():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code=200, text="<result>5.1.0</result>")

    core = make_core(handler=handler, format="xml")
    assert await core.request("API.getMatomoVersion") == "<result>5.1.0</result>"


@pytest.mark.asyncio
async def test_original_format_returns_response():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code=200, text="raw")

    core = make_core(handler=handler)
    response = await core.request("API.getMatomoVersion", response_format="original")
    assert isinstance(response, httpx.Response)
    assert response.text == "raw"


@pytest.mark.asyncio
async def test_batch_request_encodes_sub_requests(core: CoreReportingClient, fake_api: FakeMatomoAPI):
    results = await core.batch_request(
        [
            PendingCall(method="API.getMatomoVersion"),
            PendingCall(
                method="VisitsSummary.get",
                params={"period": "day", "date": "today", "idSite": 4},
            ),
        ]
    )

    assert results == [{"value": "5.1.0"}, {"nb_visits": 12, "nb_actions": 40}]
    outer = fake_api.calls[0]
    assert outer["method"] == BULK_METHOD
    assert outer["format"] == "json"
    assert outer["urls[0]"] == "method=API.getMatomoVersion&idSite=1"
    assert parse_qsl(qs=outer["urls[1]"]) == [
        ("method", "VisitsSummary.get"),
        ("period", "day"),
        ("date", "today"),
        ("idSite", "4"),
    ]


@pytest.mark.asyncio
async def test_batch_request_uses_json_for_outer_call(fake_api: FakeMatomoAPI):
    transport = httpx.MockTransport(handler=fake_api.handler)
    core = CoreReportingClient(url="https://analytics.example.org", format="xml", transport=transport)

    assert await core.batch_request([PendingCall(method="API.getMatomoVersion")]) == [
        {"value": "5.1.0"}
    ]
    assert fake_api.calls[0]["format"] == "json"


@pytest.mark.asyncio
async def test_batch_request_injects_language(fake_api: FakeMatomoAPI):
    transport = httpx.MockTransport(handler=fake_api.handler)
    core = CoreReportingClient(url="https://analytics.example.org", language="fr", transport=transport)

    await core.batch_request(
        [
            PendingCall(method="API.getMatomoVersion"),
            PendingCall(method="API.getMatomoVersion", params={"language": "de"}),
        ]
    )

    assert fake_api.sub_requests == [
        [("method", "API.getMatomoVersion"), ("language", "fr")],
        [("method", "API.getMatomoVersion"), ("language", "de")],
    ]


@pytest.mark.asyncio
async def test_batch_request_rejects_empty_batch(core: CoreReportingClient):
    with pytest.raises(ValueError, match="empty"):
        await core.batch_request([])


@pytest.mark.asyncio
async def test_batch_request_result_count_mismatch(core: CoreReportingClient, fake_api: FakeMatomoAPI):
    fake_api.bulk_override = [{"value": "5.1.0"}]

    with pytest.raises(BatchResultMismatchError) as exc_info:
        await core.batch_request(
            [PendingCall(method="API.getMatomoVersion"), PendingCall(method="Goals.getGoals")]
        )

    assert exc_info.value.expected == 2
    assert exc_info.value.received == 1
    assert isinstance(exc_info.value, TransportError)


@pytest.mark.asyncio
async def test_batch_request_non_list_payload(core: CoreReportingClient, fake_api: FakeMatomoAPI):
    fake_api.bulk_override = {"value": "unexpected"}

    with pytest.raises(BatchResultMismatchError) as exc_info:
        await core.batch_request([PendingCall(method="API.getMatomoVersion")])

    assert exc_info.value.received is None


@pytest.mark.asyncio
async def test_batch_request_keeps_sub_request_errors(core: CoreReportingClient):
    results = await core.batch_request(
        [PendingCall(method="Missing.method"), PendingCall(method="API.getMatomoVersion")]
    )

    assert results[0]["result"] == "error"
    assert results[1] == {"value": "5.1.0"}


@pytest.mark.asyncio
async def test_batch_request_outer_error_raises(fake_api: FakeMatomoAPI, core: CoreReportingClient):
    fake_api.bulk_override = {"result": "error", "message": "You must be logged in"}

    with pytest.raises(ApiError, match="logged in"):
        await core.batch_request([PendingCall(method="API.getMatomoVersion")])


@pytest.mark.asyncio
async def test_bulk_request_maps_results_by_method(core: CoreReportingClient):
    results = await core.bulk_request(
        {
            "SitesManager.getAllSites": None,
            "API.getMatomoVersion": {},
        }
    )

    assert results == {
        "SitesManager.getAllSites": [{"idsite": "1", "name": "Example"}],
        "API.getMatomoVersion": {"value": "5.1.0"},
    }


@pytest.mark.asyncio
async def test_bulk_request_empty(core: CoreReportingClient, fake_api: FakeMatomoAPI):
    assert await core.bulk_request({}) == {}
    assert fake_api.requests == []


@pytest.mark.asyncio
async def test_bulk_request_with_custom_responses():
    fake_api, transport = make_matomo_transport(
        responses={"Live.getCounters": lambda params: [{"visits": int(params["lastMinutes"])}]}
    )
    core = CoreReportingClient(url="https://analytics.example.org", transport=transport)

    results = await core.bulk_request({"Live.getCounters": {"idSite": 1, "lastMinutes": 30}})

    assert results == {"Live.getCounters": [{"visits": 30}]}
