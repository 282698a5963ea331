"""
SegmentEditor module: stored segment definitions.
"""

from __future__ import annotations

import typing as t

from matomo_client.modules.base import BaseModule, SiteId


class SegmentEditorModule(BaseModule):
    async def is_user_can_add_new_segment(self, *, id_site: SiteId, **extra: t.Any) -> t.Any:
        return await self._send("SegmentEditor.isUserCanAddNewSegment", {"idSite": id_site}, **extra)

    async def get_all(self, *, id_site: SiteId | None = None, **extra: t.Any) -> t.Any:
        return await self._send("SegmentEditor.getAll", {"idSite": id_site}, **extra)

    async def get(self, *, id_segment: int | str, **extra: t.Any) -> t.Any:
        return await self._send("SegmentEditor.get", {"idSegment": id_segment}, **extra)

    async def add(
        self,
        *,
        name: str,
        definition: str,
        id_site: SiteId | None = None,
        auto_archive: bool | None = None,
        enabled_all_users: bool | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "SegmentEditor.add",
            {
                "name": name,
                "definition": definition,
                "idSite": id_site,
                "autoArchive": auto_archive,
                "enabledAllUsers": enabled_all_users,
            },
            **extra,
        )

    async def update(
        self,
        *,
        id_segment: int | str,
        name: str,
        definition: str,
        id_site: SiteId | None = None,
        auto_archive: bool | None = None,
        enabled_all_users: bool | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "SegmentEditor.update",
            {
                "idSegment": id_segment,
                "name": name,
                "definition": definition,
                "idSite": id_site,
                "autoArchive": auto_archive,
                "enabledAllUsers": enabled_all_users,
            },
            **extra,
        )

    async def delete(self, *, id_segment: int | str, **extra: t.Any) -> t.Any:
        return await self._send("SegmentEditor.delete", {"idSegment": id_segment}, **extra)
