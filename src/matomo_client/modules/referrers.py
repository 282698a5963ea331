"""
Referrers module: channel types, search engines, keywords, websites, socials
and campaigns.
"""

from __future__ import annotations

import typing as t

from matomo_client.modules.base import BaseModule, SiteId
from matomo_client.params import join_list


class ReferrersModule(BaseModule):
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
            "Referrers.get",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            columns=join_list(value=columns),
            **extra,
        )

    async def get_referrer_type(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        type_referrer: str | None = None,
        id_subtable: int | str | None = None,
        expanded: bool | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "Referrers.getReferrerType",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            typeReferrer=type_referrer,
            idSubtable=id_subtable,
            expanded=expanded,
            **extra,
        )

    async def get_all(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "Referrers.getAll",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            **extra,
        )

    async def get_search_engines(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        expanded: bool | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "Referrers.getSearchEngines",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            expanded=expanded,
            **extra,
        )

    async def get_keywords_from_search_engine_id(
        self,
        *,
        id_subtable: int | str,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "Referrers.getKeywordsFromSearchEngineId",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            idSubtable=id_subtable,
            **extra,
        )

    async def get_websites(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        expanded: bool | None = None,
        flat: bool | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "Referrers.getWebsites",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            expanded=expanded,
            flat=flat,
            **extra,
        )

    async def get_urls_from_website_id(
        self,
        *,
        id_subtable: int | str,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "Referrers.getUrlsFromWebsiteId",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            idSubtable=id_subtable,
            **extra,
        )

    async def get_socials(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        expanded: bool | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "Referrers.getSocials",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            expanded=expanded,
            **extra,
        )

    async def get_campaigns(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        expanded: bool | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "Referrers.getCampaigns",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            expanded=expanded,
            **extra,
        )

    async def get_keywords_from_campaign_id(
        self,
        *,
        id_subtable: int | str,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "Referrers.getKeywordsFromCampaignId",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            idSubtable=id_subtable,
            **extra,
        )

    async def get_number_of_distinct_search_engines(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "Referrers.getNumberOfDistinctSearchEngines",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            **extra,
        )
