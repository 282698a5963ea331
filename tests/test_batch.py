"""
Tests for BatchRequest in matomo_client.batch.
"""

from unittest.mock import AsyncMock

import httpx
import pytest

from matomo_client.batch import BatchRequest, BatchSlot, PendingCall
from matomo_client.client import ReportingClient
from matomo_client.core import CoreReportingClient
from matomo_client.exceptions import BatchStateError, TransportError
from tests.mocks.matomo import FakeMatomoAPI


@pytest.fixture
def core() -> AsyncMock:
    """
    Transport double recording bulk calls.

    Returns
    -------
    AsyncMock
        Mock standing in for ``CoreReportingClient``.
    """
    core = AsyncMock(spec=CoreReportingClient)
    core.batch_request.side_effect = lambda calls: [f"result-{call.method}" for call in calls]
    return core


@pytest.fixture
def batch(core: AsyncMock) -> BatchRequest:
    return BatchRequest(client=core)


@pytest.mark.asyncio
async def test_empty_send_skips_network(batch: BatchRequest, core: AsyncMock):
    assert await batch.send() == []
    core.batch_request.assert_not_awaited()
    assert batch.is_sent


def test_add_request_queues_call_with_empty_params(batch: BatchRequest):
    batch.add_request("SitesManager.getAllSites")

    assert batch.requests == (PendingCall(method="SitesManager.getAllSites", params={}),)
    assert dict(batch.requests[0].params) == {}


def test_add_request_chains(batch: BatchRequest):
    result = batch.add_request("API.getMatomoVersion").add_request(
        "VisitsSummary.get", {"period": "day", "date": "today"}
    )

    assert result is batch
    assert len(batch) == 2
    assert [call.method for call in batch.requests] == ["API.getMatomoVersion", "VisitsSummary.get"]


@pytest.mark.asyncio
async def test_module_call_is_queued_not_sent(batch: BatchRequest, core: AsyncMock):
    slot = await batch.api.get_matomo_version(idSite=5)

    assert isinstance(slot, BatchSlot)
    assert slot.index == 0
    assert slot.call == PendingCall(method="API.getMatomoVersion", params={"idSite": 5})
    assert batch.requests == (slot.call,)
    core.batch_request.assert_not_awaited()
    core.dispatch.assert_not_awaited()


@pytest.mark.asyncio
async def test_send_preserves_call_order(batch: BatchRequest, core: AsyncMock):
    first = await batch.sites_manager.get_all_sites()
    batch.add_request("API.getMatomoVersion")
    third = await batch.goals.get_goals(id_site=2)

    results = await batch.send()

    core.batch_request.assert_awaited_once_with(
        [
            PendingCall(method="SitesManager.getAllSites"),
            PendingCall(method="API.getMatomoVersion"),
            PendingCall(method="Goals.getGoals", params={"idSite": 2}),
        ]
    )
    assert results == [
        "result-SitesManager.getAllSites",
        "result-API.getMatomoVersion",
        "result-Goals.getGoals",
    ]
    assert first.result == results[0]
    assert third.result == results[2]


@pytest.mark.asyncio
async def test_flush_is_send(batch: BatchRequest):
    batch.add_request("API.getMatomoVersion")
    assert await batch.flush() == ["result-API.getMatomoVersion"]


@pytest.mark.asyncio
async def test_slot_result_before_send(batch: BatchRequest):
    slot = await batch.api.get_php_version()
    with pytest.raises(BatchStateError, match="not been sent"):
        slot.result


@pytest.mark.asyncio
async def test_send_twice_raises(batch: BatchRequest, core: AsyncMock):
    batch.add_request("API.getMatomoVersion")
    await batch.send()

    with pytest.raises(BatchStateError):
        await batch.send()
    core.batch_request.assert_awaited_once()


@pytest.mark.asyncio
async def test_queueing_after_send_raises(batch: BatchRequest):
    await batch.send()

    with pytest.raises(BatchStateError):
        batch.add_request("API.getMatomoVersion")
    with pytest.raises(BatchStateError):
        await batch.visits_summary.get(period="day", date="today")
    assert len(batch) == 0


@pytest.mark.asyncio
async def test_failed_send_consumes_batch(batch: BatchRequest, core: AsyncMock):
    core.batch_request.side_effect = TransportError("connection refused")
    batch.add_request("API.getMatomoVersion")

    slot = await batch.api.get_php_version()

    with pytest.raises(TransportError):
        await batch.send()
    with pytest.raises(BatchStateError):
        await batch.send()
    with pytest.raises(BatchStateError, match="failed; no results available"):
        slot.result


def test_pending_call_params_are_immutable(batch: BatchRequest):
    params = {"idSite": 1}
    batch.add_request("Goals.getGoals", params)
    params["idSite"] = 2

    call = batch.requests[0]
    assert call.params["idSite"] == 1
    with pytest.raises(TypeError):
        call.params["idSite"] = 3


def test_pending_call_params_copy_nested_values(batch: BatchRequest):
    ids = [1, 2]
    parameters = {"customHtml": "<p/>"}
    batch.add_request("SitesManager.getSitesFromIds", {"idSites": ids, "parameters": parameters})
    ids.append(99)
    parameters["customHtml"] = "<script/>"

    call = batch.requests[0]
    assert call.params["idSites"] == [1, 2]
    assert call.params["parameters"] == {"customHtml": "<p/>"}


def test_get_core_client(batch: BatchRequest, core: AsyncMock):
    assert batch.get_core_client() is core


def test_batch_exposes_same_modules_as_client():
    client = ReportingClient(url="https://analytics.example.org")
    batch = client.prepare_requests()

    for name in ("api", "goals", "sites_manager", "tag_manager", "visits_summary"):
        assert type(getattr(batch, name)) is type(getattr(client, name))
        assert getattr(batch, name).client is batch
        assert getattr(client, name).client is client.core


@pytest.mark.asyncio
async def test_batch_round_trip(fake_api: FakeMatomoAPI, matomo_transport: httpx.MockTransport):
    client = ReportingClient(url="https://analytics.example.org", id_site=1, transport=matomo_transport)
    batch = client.prepare_requests()

    version = await batch.api.get_matomo_version()
    summary = await batch.visits_summary.get(period="day", date="today", id_site=3)
    sites = await batch.sites_manager.get_all_sites()
    results = await batch.send()

    assert len(fake_api.requests) == 1
    assert results == [
        {"value": "5.1.0"},
        {"nb_visits": 12, "nb_actions": 40},
        [{"idsite": "1", "name": "Example"}],
    ]
    assert version.result == {"value": "5.1.0"}
    assert summary.result["nb_visits"] == 12
    assert sites.result[0]["name"] == "Example"
    assert fake_api.sub_requests[1] == [
        ("method", "VisitsSummary.get"),
        ("idSite", "3"),
        ("period", "day"),
        ("date", "today"),
    ]
    assert fake_api.sub_requests[2] == [("method", "SitesManager.getAllSites"), ("idSite", "1")]
