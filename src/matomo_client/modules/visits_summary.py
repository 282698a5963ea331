"""
VisitsSummary module: core visit metrics (visits, unique visitors, bounces, actions).
"""

from __future__ import annotations

import typing as t

from matomo_client.modules.base import BaseModule, SiteId
from matomo_client.params import join_list


class VisitsSummaryModule(BaseModule):
    async def get(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        columns: t.Sequence[str] | str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "VisitsSummary.get",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            columns=join_list(value=columns),
            **extra,
        )

    async def get_visits(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "VisitsSummary.getVisits",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            **extra,
        )

    async def get_unique_visitors(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "VisitsSummary.getUniqueVisitors",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            **extra,
        )

    async def get_users(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "VisitsSummary.getUsers",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            **extra,
        )

    async def get_actions(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "VisitsSummary.getActions",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            **extra,
        )

    async def get_max_actions(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "VisitsSummary.getMaxActions",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            **extra,
        )

    async def get_bounce_count(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "VisitsSummary.getBounceCount",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            **extra,
        )

    async def get_visits_converted(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "VisitsSummary.getVisitsConverted",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            **extra,
        )

    async def get_sum_visits_length(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "VisitsSummary.getSumVisitsLength",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            **extra,
        )

    async def get_sum_visits_length_pretty(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "VisitsSummary.getSumVisitsLengthPretty",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            **extra,
        )
