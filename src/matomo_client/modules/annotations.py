"""
Annotations module: notes attached to dates in the evolution graphs.
"""

from __future__ import annotations

import typing as t

from matomo_client.modules.base import BaseModule, SiteId


class AnnotationsModule(BaseModule):
    async def add(
        self,
        *,
        id_site: SiteId,
        date: str,
        note: str,
        starred: bool = False,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "Annotations.add",
            {"idSite": id_site, "date": date, "note": note, "starred": starred},
            **extra,
        )

    async def save(
        self,
        *,
        id_site: SiteId,
        id_note: int | str,
        date: str | None = None,
        note: str | None = None,
        starred: bool | None = None,
        **extra: t.Any,
    ) -> t.Any:
        """Update an annotation. Only the fields that are given are changed."""
        return await self._send(
            "Annotations.save",
            {"idSite": id_site, "idNote": id_note, "date": date, "note": note, "starred": starred},
            **extra,
        )

    async def delete(self, *, id_site: SiteId, id_note: int | str, **extra: t.Any) -> t.Any:
        return await self._send("Annotations.delete", {"idSite": id_site, "idNote": id_note}, **extra)

    async def delete_all(self, *, id_site: SiteId, **extra: t.Any) -> t.Any:
        return await self._send("Annotations.deleteAll", {"idSite": id_site}, **extra)

    async def get(self, *, id_site: SiteId, id_note: int | str, **extra: t.Any) -> t.Any:
        return await self._send("Annotations.get", {"idSite": id_site, "idNote": id_note}, **extra)

    async def get_all(
        self,
        *,
        id_site: SiteId,
        period: str = "day",
        date: str | None = None,
        last_n: int | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "Annotations.getAll",
            {"idSite": id_site, "period": period, "date": date, "lastN": last_n},
            **extra,
        )

    async def get_annotation_count_for_dates(
        self,
        *,
        id_site: SiteId,
        date: str,
        period: str,
        last_n: int | None = None,
        get_annotation_text: bool = False,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "Annotations.getAnnotationCountForDates",
            {
                "idSite": id_site,
                "date": date,
                "period": period,
                "getAnnotationText": get_annotation_text,
                "lastN": last_n,
            },
            **extra,
        )
