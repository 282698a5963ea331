"""
Batch request builder.

A ``BatchRequest`` exposes the same domain modules as ``ReportingClient`` but
queues every call instead of sending it. ``send()`` then submits the whole
queue as one ``API.getBulkRequest`` round trip and returns the results in
call order.
"""

from __future__ import annotations

import copy
import types
import typing as t
from collections.abc import Mapping
from dataclasses import dataclass, field

import structlog

from matomo_client.exceptions import BatchStateError
from matomo_client.modules import DomainModules
from matomo_client.params import Params
from matomo_client.utils.logging import logging_context

if t.TYPE_CHECKING:
    from matomo_client.core import CoreReportingClient

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PendingCall:
    """A queued API call waiting for the bulk request."""

    method: str
    params: Mapping[str, t.Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        params = copy.deepcopy(dict(self.params))
        object.__setattr__(self, "params", types.MappingProxyType(params))


@dataclass(frozen=True)
class BatchSlot:
    """
    Position of a queued call in the batch results.

    Attributes
    ----------
    index : int
        Position of the call in the queue and in the result list.
    call : PendingCall
        The queued call.
    """

    index: int
    call: PendingCall
    batch: BatchRequest = field(repr=False, compare=False)

    @property
    def result(self) -> t.Any:
        """Result of the call, available once the batch has been sent."""
        return self.batch.result_at(index=self.index)


class BatchRequest(DomainModules):
    """
    Collect calls across domain modules and send them in one request.

    Parameters
    ----------
    client : CoreReportingClient
        Transport used to send the bulk request.

    Notes
    -----
    A batch is single use: after ``send()`` (successful or not) it refuses new
    calls and a second ``send()``. Use ``client.prepare_requests()`` again for
    the next batch. The queue is not meant to be filled from several tasks at
    once.
    """

    def __init__(self, client: CoreReportingClient) -> None:
        self._client = client
        self._requests: list[PendingCall] = []
        self._results: list[t.Any] | None = None
        self._sent = False
        self._init_modules(backend=self)

    @property
    def requests(self) -> tuple[PendingCall, ...]:
        """Queued calls in call order."""
        return tuple(self._requests)

    @property
    def is_sent(self) -> bool:
        return self._sent

    def __len__(self) -> int:
        return len(self._requests)

    def get_core_client(self) -> CoreReportingClient:
        return self._client

    def _enqueue(self, *, method: str, params: Params | None) -> PendingCall:
        if self._sent:
            raise BatchStateError(
                "Cannot add requests to a batch that was already sent; "
                "create a new one with prepare_requests()"
            )
        call = PendingCall(method=method, params=params or {})
        self._requests.append(call)
        log.debug(
            event="Queued request for batch",
            method=method,
            position=len(self._requests) - 1,
        )
        return call

    def add_request(self, method: str, params: Params | None = None) -> BatchRequest:
        """
        Queue a call by method name.

        Parameters
        ----------
        method : str
            API method name.
        params : Params | None, optional
            Call parameters, ``{}`` when omitted.

        Returns
        -------
        BatchRequest
            This batch, for chaining.
        """
        self._enqueue(method=method, params=params)
        return self

    async def dispatch(self, method: str, params: Params | None = None) -> BatchSlot:
        """Queue a call on behalf of a domain module. Satisfies ``RequestSink``."""
        call = self._enqueue(method=method, params=params)
        return BatchSlot(index=len(self._requests) - 1, call=call, batch=self)

    async def send(self) -> list[t.Any]:
        """
        Send every queued call in one bulk request.

        Returns
        -------
        list[typing.Any]
            One result per queued call, in call order. Empty when nothing was
            queued, in which case no request is made.

        Raises
        ------
        BatchStateError
            When the batch was already sent.
        """
        if self._sent:
            raise BatchStateError("Batch request was already sent")
        self._sent = True

        if not self._requests:
            log.debug(event="Empty batch, skipping bulk request")
            self._results = []
            return []

        with logging_context(batch_size=len(self._requests)):
            results = await self._client.batch_request(list(self._requests))
        self._results = results
        return results

    flush = send

    def result_at(self, *, index: int) -> t.Any:
        if self._results is None:
            if self._sent:
                raise BatchStateError("Batch request failed; no results available")
            raise BatchStateError("Batch request has not been sent yet")
        return self._results[index]
