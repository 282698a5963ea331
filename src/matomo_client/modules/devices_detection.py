"""
DevicesDetection module: device types, brands, models, operating systems and browsers.
"""

from __future__ import annotations

import typing as t

from matomo_client.modules.base import BaseModule, SiteId


class DevicesDetectionModule(BaseModule):
    async def get_type(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "DevicesDetection.getType",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            **extra,
        )

    async def get_brand(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "DevicesDetection.getBrand",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            **extra,
        )

    async def get_model(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "DevicesDetection.getModel",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            **extra,
        )

    async def get_os_families(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "DevicesDetection.getOsFamilies",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            **extra,
        )

    async def get_os_versions(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "DevicesDetection.getOsVersions",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            **extra,
        )

    async def get_browsers(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "DevicesDetection.getBrowsers",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            **extra,
        )

    async def get_browser_versions(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "DevicesDetection.getBrowserVersions",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            **extra,
        )

    async def get_browser_engines(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "DevicesDetection.getBrowserEngines",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            **extra,
        )
