"""
Actions module: page URLs, page titles, downloads, outlinks and site search.
"""

from __future__ import annotations

import typing as t

from matomo_client.modules.base import BaseModule, SiteId
from matomo_client.params import join_list


class ActionsModule(BaseModule):
    """Reports about tracked actions (page views, downloads, outlinks, site search)."""

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
        return await self._send(
            "Actions.get",
            {
                "idSite": id_site,
                "period": period,
                "date": date,
                "segment": segment,
                "columns": join_list(value=columns),
            },
            **extra,
        )

    async def _get_tree_report(
        self,
        method: str,
        *,
        period: str,
        date: str,
        id_site: SiteId | None,
        segment: str | None,
        expanded: bool | None,
        id_subtable: int | str | None,
        depth: int | None,
        flat: bool | None,
        extra: dict[str, t.Any],
    ) -> t.Any:
        return await self._send(
            method,
            {
                "idSite": id_site,
                "period": period,
                "date": date,
                "segment": segment,
                "expanded": expanded,
                "idSubtable": id_subtable,
                "depth": depth,
                "flat": flat,
            },
            **extra,
        )

    async def get_page_urls(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        expanded: bool | None = None,
        id_subtable: int | str | None = None,
        depth: int | None = None,
        flat: bool | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._get_tree_report(
            "Actions.getPageUrls",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            expanded=expanded,
            id_subtable=id_subtable,
            depth=depth,
            flat=flat,
            extra=extra,
        )

    async def get_page_titles(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        expanded: bool | None = None,
        id_subtable: int | str | None = None,
        depth: int | None = None,
        flat: bool | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._get_tree_report(
            "Actions.getPageTitles",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            expanded=expanded,
            id_subtable=id_subtable,
            depth=depth,
            flat=flat,
            extra=extra,
        )

    async def get_entry_page_urls(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "Actions.getEntryPageUrls",
            {"idSite": id_site, "period": period, "date": date, "segment": segment},
            **extra,
        )

    async def get_exit_page_urls(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "Actions.getExitPageUrls",
            {"idSite": id_site, "period": period, "date": date, "segment": segment},
            **extra,
        )

    async def get_page_url(
        self,
        *,
        page_url: str,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "Actions.getPageUrl",
            {"pageUrl": page_url, "idSite": id_site, "period": period, "date": date, "segment": segment},
            **extra,
        )

    async def get_downloads(
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
        return await self._send(
            "Actions.getDownloads",
            {
                "idSite": id_site,
                "period": period,
                "date": date,
                "segment": segment,
                "expanded": expanded,
                "flat": flat,
            },
            **extra,
        )

    async def get_outlinks(
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
        return await self._send(
            "Actions.getOutlinks",
            {
                "idSite": id_site,
                "period": period,
                "date": date,
                "segment": segment,
                "expanded": expanded,
                "flat": flat,
            },
            **extra,
        )

    async def get_site_search_keywords(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "Actions.getSiteSearchKeywords",
            {"idSite": id_site, "period": period, "date": date, "segment": segment},
            **extra,
        )

    async def get_site_search_categories(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "Actions.getSiteSearchCategories",
            {"idSite": id_site, "period": period, "date": date, "segment": segment},
            **extra,
        )
