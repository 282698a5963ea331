"""
Live module: real time counters, visit logs and visitor profiles.
"""

from __future__ import annotations

import typing as t

from matomo_client.modules.base import BaseModule, SiteId
from matomo_client.params import join_list


class LiveModule(BaseModule):
    async def get_counters(
        self,
        *,
        id_site: SiteId,
        last_minutes: int,
        segment: str | None = None,
        show_columns: t.Sequence[str] | str | None = None,
        hide_columns: t.Sequence[str] | str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "Live.getCounters",
            {
                "idSite": id_site,
                "lastMinutes": last_minutes,
                "segment": segment,
                "showColumns": join_list(value=show_columns),
                "hideColumns": join_list(value=hide_columns),
            },
            **extra,
        )

    async def is_visitor_profile_enabled(self, *, id_site: SiteId, **extra: t.Any) -> t.Any:
        return await self._send("Live.isVisitorProfileEnabled", {"idSite": id_site}, **extra)

    async def get_last_visits_details(
        self,
        *,
        id_site: SiteId,
        period: str | None = None,
        date: str | None = None,
        segment: str | None = None,
        count_visitors_to_fetch: int | None = None,
        min_timestamp: int | None = None,
        flat: bool | None = None,
        do_not_fetch_actions: bool | None = None,
        enhanced: bool | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "Live.getLastVisitsDetails",
            {
                "idSite": id_site,
                "period": period,
                "date": date,
                "segment": segment,
                "countVisitorsToFetch": count_visitors_to_fetch,
                "minTimestamp": min_timestamp,
                "flat": flat,
                "doNotFetchActions": do_not_fetch_actions,
                "enhanced": enhanced,
            },
            **extra,
        )

    async def get_visitor_profile(
        self,
        *,
        id_site: SiteId,
        visitor_id: str | None = None,
        segment: str | None = None,
        limit_visits: int | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "Live.getVisitorProfile",
            {
                "idSite": id_site,
                "visitorId": visitor_id,
                "segment": segment,
                "limitVisits": limit_visits,
            },
            **extra,
        )

    async def get_most_recent_visitor_id(
        self,
        *,
        id_site: SiteId,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "Live.getMostRecentVisitorId",
            {"idSite": id_site, "segment": segment},
            **extra,
        )

    async def get_most_recent_visits_date_time(
        self,
        *,
        id_site: SiteId,
        period: str | None = None,
        date: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "Live.getMostRecentVisitsDateTime",
            {"idSite": id_site, "period": period, "date": date},
            **extra,
        )
