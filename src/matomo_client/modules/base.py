from __future__ import annotations

import typing as t

from matomo_client.params import Params, compact

SiteId = int | str
SiteIds = SiteId | t.Sequence[SiteId]


class RequestSink(t.Protocol):
    """
    Backend a domain module routes its calls to.

    ``CoreReportingClient`` calls the API immediately and returns the decoded
    payload. ``BatchRequest`` queues the call and returns a ``BatchSlot``.
    """

    async def dispatch(self, method: str, params: Params | None = None) -> t.Any: ...


class BaseModule:
    """
    Typed adapter for one remote API namespace.

    Parameters
    ----------
    client : RequestSink
        Transport or batch request the module is bound to.
    """

    def __init__(self, client: RequestSink) -> None:
        self._client = client

    @property
    def client(self) -> RequestSink:
        return self._client

    async def _send(self, method: str, params: Params | None = None, **extra: t.Any) -> t.Any:
        """
        Forward a call to the bound backend.

        Parameters
        ----------
        method : str
            Fully qualified API method, e.g. ``"Goals.getGoals"``.
        params : Params | None, optional
            Parameter bag built by the module method.
        **extra : typing.Any
            Additional wire parameters passed through verbatim.

        Returns
        -------
        typing.Any
            Whatever the backend returns for the call.
        """
        return await self._client.dispatch(method, compact(params={**(params or {}), **extra}))

    async def _report(
        self,
        method: str,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        """Send a standard ``idSite``/``period``/``date``/``segment`` report call."""
        return await self._send(
            method,
            {"idSite": id_site, "period": period, "date": date, "segment": segment},
            **extra,
        )
