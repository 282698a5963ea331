"""
Events module: event categories, actions and names, and their subtables.
"""

from __future__ import annotations

import typing as t

from matomo_client.modules.base import BaseModule, SiteId


class EventsModule(BaseModule):
    async def get_category(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        secondary_dimension: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "Events.getCategory",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            secondaryDimension=secondary_dimension,
            **extra,
        )

    async def get_action(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        secondary_dimension: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "Events.getAction",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            secondaryDimension=secondary_dimension,
            **extra,
        )

    async def get_name(
        self,
        *,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        secondary_dimension: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "Events.getName",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            secondaryDimension=secondary_dimension,
            **extra,
        )

    async def _subtable(
        self,
        method: str,
        *,
        id_subtable: int | str,
        period: str,
        date: str,
        id_site: SiteId | None,
        segment: str | None,
        extra: dict[str, t.Any],
    ) -> t.Any:
        return await self._send(
            method,
            {
                "idSite": id_site,
                "period": period,
                "date": date,
                "idSubtable": id_subtable,
                "segment": segment,
            },
            **extra,
        )

    async def get_action_from_category_id(
        self,
        *,
        id_subtable: int | str,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._subtable(
            "Events.getActionFromCategoryId",
            id_subtable=id_subtable,
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            extra=extra,
        )

    async def get_name_from_category_id(
        self,
        *,
        id_subtable: int | str,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._subtable(
            "Events.getNameFromCategoryId",
            id_subtable=id_subtable,
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            extra=extra,
        )

    async def get_category_from_action_id(
        self,
        *,
        id_subtable: int | str,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._subtable(
            "Events.getCategoryFromActionId",
            id_subtable=id_subtable,
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            extra=extra,
        )

    async def get_name_from_action_id(
        self,
        *,
        id_subtable: int | str,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._subtable(
            "Events.getNameFromActionId",
            id_subtable=id_subtable,
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            extra=extra,
        )

    async def get_action_from_name_id(
        self,
        *,
        id_subtable: int | str,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._subtable(
            "Events.getActionFromNameId",
            id_subtable=id_subtable,
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            extra=extra,
        )

    async def get_category_from_name_id(
        self,
        *,
        id_subtable: int | str,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._subtable(
            "Events.getCategoryFromNameId",
            id_subtable=id_subtable,
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            extra=extra,
        )
