"""
High level Matomo client.
"""

from __future__ import annotations

import typing as t

import httpx
import structlog

from matomo_client.batch import BatchRequest
from matomo_client.config import ClientOptions
from matomo_client.core import CoreReportingClient
from matomo_client.modules import DomainModules

log = structlog.get_logger(__name__)


class ReportingClient(DomainModules):
    """
    Entry point exposing every domain module over one transport.

    Parameters
    ----------
    options : ClientOptions | None, optional
        Connection settings. When omitted, ``**kwargs`` are validated into
        ``ClientOptions``.
    transport : httpx.AsyncBaseTransport | None, optional
        Custom httpx transport, mostly useful for testing.
    **kwargs : typing.Any
        ``ClientOptions`` fields used when ``options`` is omitted.

    Examples
    --------
    >>> client = ReportingClient(url="https://example.org/matomo", token_auth="...")
    >>> visits = await client.visits_summary.get(id_site=1, period="day", date="today")
    >>> batch = client.prepare_requests()
    >>> await batch.api.get_matomo_version()
    >>> await batch.sites_manager.get_all_sites()
    >>> version, sites = await batch.send()
    """

    def __init__(
        self,
        options: ClientOptions | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        **kwargs: t.Any,
    ) -> None:
        self.core = CoreReportingClient(options, transport=transport, **kwargs)
        self._init_modules(backend=self.core)

    @classmethod
    def from_env(
        cls,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        **overrides: t.Any,
    ) -> ReportingClient:
        """Build a client from ``MATOMO_*`` environment variables."""
        return cls(ClientOptions.from_env(**overrides), transport=transport)

    @property
    def options(self) -> ClientOptions:
        return self.core.options

    def prepare_requests(self) -> BatchRequest:
        """
        Start a batch of calls sent later as one bulk request.

        Returns
        -------
        BatchRequest
            Fresh batch exposing the same modules as this client.
        """
        log.debug(event="Preparing batch request", url=self.core.base_url)
        return BatchRequest(client=self.core)
