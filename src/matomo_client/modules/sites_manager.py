"""
SitesManager module: website management.
"""

from __future__ import annotations

import typing as t

from matomo_client.modules.base import BaseModule, SiteId
from matomo_client.params import join_list

StrList = t.Sequence[str] | str


class SitesManagerModule(BaseModule):
    """
    Create, update and list websites.

    ``urls`` keeps its list structure (``urls[]`` in bulk requests, comma
    joined at the top level). Exclusion lists and search parameters are comma
    joined, which is the format Matomo stores them in.
    """

    async def get_site_from_id(self, *, id_site: SiteId, **extra: t.Any) -> t.Any:
        return await self._send("SitesManager.getSiteFromId", {"idSite": id_site}, **extra)

    async def get_site_urls_from_id(self, *, id_site: SiteId, **extra: t.Any) -> t.Any:
        return await self._send("SitesManager.getSiteUrlsFromId", {"idSite": id_site}, **extra)

    async def get_all_sites(self, **extra: t.Any) -> t.Any:
        return await self._send("SitesManager.getAllSites", **extra)

    async def get_all_sites_id(self, **extra: t.Any) -> t.Any:
        return await self._send("SitesManager.getAllSitesId", **extra)

    async def get_sites_with_admin_access(
        self,
        *,
        fetch_alias_urls: bool | None = None,
        pattern: str | None = None,
        limit: int | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "SitesManager.getSitesWithAdminAccess",
            {"fetchAliasUrls": fetch_alias_urls, "pattern": pattern, "limit": limit},
            **extra,
        )

    async def get_sites_with_view_access(self, **extra: t.Any) -> t.Any:
        return await self._send("SitesManager.getSitesWithViewAccess", **extra)

    async def get_sites_with_at_least_view_access(
        self,
        *,
        limit: int | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "SitesManager.getSitesWithAtLeastViewAccess",
            {"limit": limit},
            **extra,
        )

    async def get_sites_id_from_site_url(self, *, url: str, **extra: t.Any) -> t.Any:
        return await self._send("SitesManager.getSitesIdFromSiteUrl", {"url": url}, **extra)

    async def get_pattern_match_sites(
        self,
        *,
        pattern: str,
        limit: int | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "SitesManager.getPatternMatchSites",
            {"pattern": pattern, "limit": limit},
            **extra,
        )

    async def get_currency_list(self, **extra: t.Any) -> t.Any:
        return await self._send("SitesManager.getCurrencyList", **extra)

    async def get_timezones_list(self, **extra: t.Any) -> t.Any:
        return await self._send("SitesManager.getTimezonesList", **extra)

    def _site_params(
        self,
        *,
        site_name: str | None,
        urls: StrList | None,
        ecommerce: bool | None,
        site_search: bool | None,
        search_keyword_parameters: StrList | None,
        search_category_parameters: StrList | None,
        excluded_ips: StrList | None,
        excluded_query_parameters: StrList | None,
        timezone: str | None,
        currency: str | None,
        group: str | None,
        start_date: str | None,
        excluded_user_agents: StrList | None,
        keep_url_fragments: int | None,
        site_type: str | None,
    ) -> dict[str, t.Any]:
        return {
            "siteName": site_name,
            "urls": [urls] if isinstance(urls, str) else urls,
            "ecommerce": ecommerce,
            "siteSearch": site_search,
            "searchKeywordParameters": join_list(value=search_keyword_parameters),
            "searchCategoryParameters": join_list(value=search_category_parameters),
            "excludedIps": join_list(value=excluded_ips),
            "excludedQueryParameters": join_list(value=excluded_query_parameters),
            "timezone": timezone,
            "currency": currency,
            "group": group,
            "startDate": start_date,
            "excludedUserAgents": join_list(value=excluded_user_agents),
            "keepURLFragments": keep_url_fragments,
            "type": site_type,
        }

    async def add_site(
        self,
        *,
        site_name: str,
        urls: StrList | None = None,
        ecommerce: bool | None = None,
        site_search: bool | None = None,
        search_keyword_parameters: StrList | None = None,
        search_category_parameters: StrList | None = None,
        excluded_ips: StrList | None = None,
        excluded_query_parameters: StrList | None = None,
        timezone: str | None = None,
        currency: str | None = None,
        group: str | None = None,
        start_date: str | None = None,
        excluded_user_agents: StrList | None = None,
        keep_url_fragments: int | None = None,
        site_type: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        params = self._site_params(
            site_name=site_name,
            urls=urls,
            ecommerce=ecommerce,
            site_search=site_search,
            search_keyword_parameters=search_keyword_parameters,
            search_category_parameters=search_category_parameters,
            excluded_ips=excluded_ips,
            excluded_query_parameters=excluded_query_parameters,
            timezone=timezone,
            currency=currency,
            group=group,
            start_date=start_date,
            excluded_user_agents=excluded_user_agents,
            keep_url_fragments=keep_url_fragments,
            site_type=site_type,
        )
        return await self._send("SitesManager.addSite", params, **extra)

    async def update_site(
        self,
        *,
        id_site: SiteId,
        site_name: str | None = None,
        urls: StrList | None = None,
        ecommerce: bool | None = None,
        site_search: bool | None = None,
        search_keyword_parameters: StrList | None = None,
        search_category_parameters: StrList | None = None,
        excluded_ips: StrList | None = None,
        excluded_query_parameters: StrList | None = None,
        timezone: str | None = None,
        currency: str | None = None,
        group: str | None = None,
        start_date: str | None = None,
        excluded_user_agents: StrList | None = None,
        keep_url_fragments: int | None = None,
        site_type: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        params = self._site_params(
            site_name=site_name,
            urls=urls,
            ecommerce=ecommerce,
            site_search=site_search,
            search_keyword_parameters=search_keyword_parameters,
            search_category_parameters=search_category_parameters,
            excluded_ips=excluded_ips,
            excluded_query_parameters=excluded_query_parameters,
            timezone=timezone,
            currency=currency,
            group=group,
            start_date=start_date,
            excluded_user_agents=excluded_user_agents,
            keep_url_fragments=keep_url_fragments,
            site_type=site_type,
        )
        return await self._send("SitesManager.updateSite", {"idSite": id_site, **params}, **extra)

    async def delete_site(self, *, id_site: SiteId, **extra: t.Any) -> t.Any:
        return await self._send("SitesManager.deleteSite", {"idSite": id_site}, **extra)

    async def add_site_alias_urls(
        self,
        *,
        id_site: SiteId,
        urls: StrList,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "SitesManager.addSiteAliasUrls",
            {"idSite": id_site, "urls": [urls] if isinstance(urls, str) else urls},
            **extra,
        )

    async def get_excluded_ips_global(self, **extra: t.Any) -> t.Any:
        return await self._send("SitesManager.getExcludedIpsGlobal", **extra)
