"""
ScheduledReports module: email reports sent on a schedule.
"""

from __future__ import annotations

import typing as t

from matomo_client.modules.base import BaseModule, SiteId
from matomo_client.params import dump_json


class ScheduledReportsModule(BaseModule):
    """
    Manage scheduled email reports.

    ``reports`` and ``parameters`` are JSON-encoded on the wire. Plain
    strings are passed through unchanged, so pre-encoded values work too.
    """

    def _report_params(
        self,
        *,
        id_site: SiteId,
        description: str,
        period: str,
        hour: int,
        report_type: str,
        report_format: str,
        reports: t.Sequence[str] | str,
        parameters: t.Mapping[str, t.Any] | str,
        id_segment: int | str | None,
        evolution_period_for: str | None,
        evolution_period_n: int | None,
        period_param: str | None,
    ) -> dict[str, t.Any]:
        return {
            "idSite": id_site,
            "description": description,
            "period": period,
            "hour": hour,
            "reportType": report_type,
            "reportFormat": report_format,
            "reports": dump_json(value=list(reports) if isinstance(reports, tuple) else reports),
            "parameters": dump_json(value=parameters),
            "idSegment": id_segment,
            "evolutionPeriodFor": evolution_period_for,
            "evolutionPeriodN": evolution_period_n,
            "periodParam": period_param,
        }

    async def add_report(
        self,
        *,
        id_site: SiteId,
        description: str,
        period: str,
        hour: int,
        report_type: str,
        report_format: str,
        reports: t.Sequence[str] | str,
        parameters: t.Mapping[str, t.Any] | str,
        id_segment: int | str | None = None,
        evolution_period_for: str | None = None,
        evolution_period_n: int | None = None,
        period_param: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        """
        Create a scheduled report.

        Parameters
        ----------
        id_site : SiteId
            Site the report belongs to.
        description : str
            Report description, also used as the email subject.
        period : str
            Schedule period: ``day``, ``week``, ``month`` or ``never``.
        hour : int
            Hour of the day the report is sent.
        report_type : str
            Delivery channel, usually ``email``.
        report_format : str
            ``pdf``, ``html``, ``csv`` or ``tsv``.
        reports : typing.Sequence[str] | str
            Unique ids of the reports to include.
        parameters : typing.Mapping[str, typing.Any] | str
            Delivery parameters, e.g. ``{"displayFormat": 1, "emailMe": True}``.
        id_segment : int | str | None, optional
            Segment applied to every report.
        evolution_period_for : str | None, optional
            ``prev`` or ``each``.
        evolution_period_n : int | None, optional
            Number of periods shown in evolution graphs.
        period_param : str | None, optional
            Period of the data included in the report.

        Returns
        -------
        typing.Any
            Identifier of the new report, or a ``BatchSlot`` in a batch.
        """
        params = self._report_params(
            id_site=id_site,
            description=description,
            period=period,
            hour=hour,
            report_type=report_type,
            report_format=report_format,
            reports=reports,
            parameters=parameters,
            id_segment=id_segment,
            evolution_period_for=evolution_period_for,
            evolution_period_n=evolution_period_n,
            period_param=period_param,
        )
        return await self._send("ScheduledReports.addReport", params, **extra)

    async def update_report(
        self,
        *,
        id_report: int | str,
        id_site: SiteId,
        description: str,
        period: str,
        hour: int,
        report_type: str,
        report_format: str,
        reports: t.Sequence[str] | str,
        parameters: t.Mapping[str, t.Any] | str,
        id_segment: int | str | None = None,
        evolution_period_for: str | None = None,
        evolution_period_n: int | None = None,
        period_param: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        params = self._report_params(
            id_site=id_site,
            description=description,
            period=period,
            hour=hour,
            report_type=report_type,
            report_format=report_format,
            reports=reports,
            parameters=parameters,
            id_segment=id_segment,
            evolution_period_for=evolution_period_for,
            evolution_period_n=evolution_period_n,
            period_param=period_param,
        )
        return await self._send(
            "ScheduledReports.updateReport",
            {"idReport": id_report, **params},
            **extra,
        )

    async def delete_report(self, *, id_report: int | str, **extra: t.Any) -> t.Any:
        return await self._send("ScheduledReports.deleteReport", {"idReport": id_report}, **extra)

    async def get_reports(
        self,
        *,
        id_site: SiteId | None = None,
        period: str | None = None,
        id_report: int | str | None = None,
        if_super_user_return_only_super_user_reports: bool | None = None,
        id_segment: int | str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "ScheduledReports.getReports",
            {
                "idSite": id_site,
                "period": period,
                "idReport": id_report,
                "ifSuperUserReturnOnlySuperUserReports": if_super_user_return_only_super_user_reports,
                "idSegment": id_segment,
            },
            **extra,
        )

    async def generate_report(
        self,
        *,
        id_report: int | str,
        date: str,
        language: str | None = None,
        output_type: int | None = None,
        period: str | None = None,
        report_format: str | None = None,
        parameters: t.Mapping[str, t.Any] | str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "ScheduledReports.generateReport",
            {
                "idReport": id_report,
                "date": date,
                "language": language,
                "outputType": output_type,
                "period": period,
                "reportFormat": report_format,
                "parameters": dump_json(value=parameters),
            },
            **extra,
        )

    async def send_report(
        self,
        *,
        id_report: int | str,
        period: str | None = None,
        date: str | None = None,
        force: bool | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "ScheduledReports.sendReport",
            {"idReport": id_report, "period": period, "date": date, "force": force},
            **extra,
        )
