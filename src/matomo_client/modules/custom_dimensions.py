"""
CustomDimensions module: configure visit and action scoped custom dimensions.
"""

from __future__ import annotations

import typing as t

from matomo_client.modules.base import BaseModule, SiteId


class CustomDimensionsModule(BaseModule):
    async def get_custom_dimension(
        self,
        *,
        id_dimension: int | str,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        expanded: bool | None = None,
        flat: bool | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "CustomDimensions.getCustomDimension",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            idDimension=id_dimension,
            expanded=expanded,
            flat=flat,
            **extra,
        )

    async def configure_new_custom_dimension(
        self,
        *,
        id_site: SiteId,
        name: str,
        scope: t.Literal["visit", "action"],
        active: bool,
        extractions: t.Sequence[t.Mapping[str, str]] | None = None,
        case_sensitive: bool | None = None,
        **extra: t.Any,
    ) -> t.Any:
        """
        Create a custom dimension.

        ``extractions`` is a list of ``{"dimension": ..., "pattern": ...}``
        mappings and is sent with indexed bracket keys.
        """
        return await self._send(
            "CustomDimensions.configureNewCustomDimension",
            {
                "idSite": id_site,
                "name": name,
                "scope": scope,
                "active": active,
                "extractions": list(extractions) if extractions is not None else None,
                "caseSensitive": case_sensitive,
            },
            **extra,
        )

    async def configure_existing_custom_dimension(
        self,
        *,
        id_dimension: int | str,
        id_site: SiteId,
        name: str,
        active: bool,
        extractions: t.Sequence[t.Mapping[str, str]] | None = None,
        case_sensitive: bool | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "CustomDimensions.configureExistingCustomDimension",
            {
                "idDimension": id_dimension,
                "idSite": id_site,
                "name": name,
                "active": active,
                "extractions": list(extractions) if extractions is not None else None,
                "caseSensitive": case_sensitive,
            },
            **extra,
        )

    async def get_configured_custom_dimensions(self, *, id_site: SiteId, **extra: t.Any) -> t.Any:
        return await self._send(
            "CustomDimensions.getConfiguredCustomDimensions",
            {"idSite": id_site},
            **extra,
        )

    async def get_configured_custom_dimensions_having_scope(
        self,
        *,
        id_site: SiteId,
        scope: t.Literal["visit", "action"],
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "CustomDimensions.getConfiguredCustomDimensionsHavingScope",
            {"idSite": id_site, "scope": scope},
            **extra,
        )

    async def get_available_scopes(self, *, id_site: SiteId, **extra: t.Any) -> t.Any:
        return await self._send("CustomDimensions.getAvailableScopes", {"idSite": id_site}, **extra)

    async def get_available_extraction_dimensions(self, **extra: t.Any) -> t.Any:
        return await self._send("CustomDimensions.getAvailableExtractionDimensions", **extra)
