"""
UserCountry module: visitor geolocation reports and location providers.
"""

from __future__ import annotations

import typing as t

from matomo_client.modules.base import BaseModule, SiteId


class UserCountryModule(BaseModule):
    async def get_country(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "UserCountry.getCountry",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            **extra,
        )

    async def get_continent(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "UserCountry.getContinent",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            **extra,
        )

    async def get_region(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "UserCountry.getRegion",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            **extra,
        )

    async def get_city(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "UserCountry.getCity",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            **extra,
        )

    async def get_country_code_mapping(self, **extra: t.Any) -> t.Any:
        return await self._send("UserCountry.getCountryCodeMapping", **extra)

    async def get_location_from_ip(
        self,
        *,
        ip: str,
        provider: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "UserCountry.getLocationFromIP",
            {"ip": ip, "provider": provider},
            **extra,
        )

    async def set_location_provider(self, *, provider_id: str, **extra: t.Any) -> t.Any:
        return await self._send(
            "UserCountry.setLocationProvider",
            {"providerId": provider_id},
            **extra,
        )

    async def get_number_of_distinct_countries(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "UserCountry.getNumberOfDistinctCountries",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            **extra,
        )
