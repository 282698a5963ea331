"""
API module: instance metadata, report metadata and generic report access.
"""

from __future__ import annotations

import typing as t

from matomo_client.modules.base import BaseModule, SiteId
from matomo_client.params import join_list


class ApiModule(BaseModule):
    async def get_matomo_version(self, **extra: t.Any) -> t.Any:
        return await self._send("API.getMatomoVersion", **extra)

    async def get_php_version(self, **extra: t.Any) -> t.Any:
        return await self._send("API.getPhpVersion", **extra)

    async def get_ip_from_header(self, **extra: t.Any) -> t.Any:
        return await self._send("API.getIpFromHeader", **extra)

    async def get_settings(self, **extra: t.Any) -> t.Any:
        return await self._send("API.getSettings", **extra)

    async def get_segments_metadata(
        self,
        *,
        id_sites: t.Sequence[SiteId] | SiteId | None = None,
        id_site: SiteId | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "API.getSegmentsMetadata",
            {"idSites": join_list(value=id_sites), "idSite": id_site},
            **extra,
        )

    async def get_report_metadata(
        self,
        *,
        id_site: SiteId | None = None,
        period: str | None = None,
        date: str | None = None,
        hide_metrics_doc: bool | None = None,
        show_subtable_reports: bool | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "API.getReportMetadata",
            {
                "idSite": id_site,
                "period": period,
                "date": date,
                "hideMetricsDoc": hide_metrics_doc,
                "showSubtableReports": show_subtable_reports,
            },
            **extra,
        )

    async def get_processed_report(
        self,
        *,
        api_module: str,
        api_action: str,
        period: str,
        date: str,
        id_site: SiteId | None = None,
        segment: str | None = None,
        id_goal: int | str | None = None,
        show_timer: bool | None = None,
        **extra: t.Any,
    ) -> t.Any:
        """Fetch a report together with its metadata and formatted values."""
        return await self._send(
            "API.getProcessedReport",
            {
                "idSite": id_site,
                "period": period,
                "date": date,
                "apiModule": api_module,
                "apiAction": api_action,
                "segment": segment,
                "idGoal": id_goal,
                "showTimer": show_timer,
            },
            **extra,
        )

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
            "API.get",
            {
                "idSite": id_site,
                "period": period,
                "date": date,
                "segment": segment,
                "columns": join_list(value=columns),
            },
            **extra,
        )

    async def get_row_evolution(
        self,
        *,
        period: str,
        date: str,
        api_module: str,
        api_action: str,
        id_site: SiteId | None = None,
        label: str | None = None,
        segment: str | None = None,
        column: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "API.getRowEvolution",
            {
                "idSite": id_site,
                "period": period,
                "date": date,
                "apiModule": api_module,
                "apiAction": api_action,
                "label": label,
                "segment": segment,
                "column": column,
            },
            **extra,
        )

    async def get_bulk_request(self, *, urls: t.Sequence[str]) -> t.Any:
        """
        Call ``API.getBulkRequest`` with pre-encoded sub-request URLs.

        Prefer ``ReportingClient.prepare_requests()``, which builds the URLs
        from typed module calls.
        """
        return await self._send(
            "API.getBulkRequest",
            {f"urls[{index}]": url for index, url in enumerate(urls)},
        )

    async def is_plugin_activated(self, *, plugin_name: str) -> t.Any:
        """
        Check whether a plugin is active.

        Returns the boolean directly when called on a client, and the queued
        slot when called on a batch (the slot resolves to the raw
        ``{"value": bool}`` payload).
        """
        result = await self._send("API.isPluginActivated", {"pluginName": plugin_name})
        if isinstance(result, dict) and "value" in result:
            return result["value"]
        return result

    async def get_suggested_values_for_segment(
        self,
        *,
        segment_name: str,
        id_site: SiteId | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "API.getSuggestedValuesForSegment",
            {"segmentName": segment_name, "idSite": id_site},
            **extra,
        )

    async def get_glossary_reports(self, *, id_site: SiteId | None = None, **extra: t.Any) -> t.Any:
        return await self._send("API.getGlossaryReports", {"idSite": id_site}, **extra)

    async def get_glossary_metrics(self, *, id_site: SiteId | None = None, **extra: t.Any) -> t.Any:
        return await self._send("API.getGlossaryMetrics", {"idSite": id_site}, **extra)
