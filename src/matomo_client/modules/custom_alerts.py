"""
CustomAlerts module: metric alerts sent by email or text message.
"""

from __future__ import annotations

import typing as t

from matomo_client.modules.base import BaseModule, SiteIds
from matomo_client.params import join_list


class CustomAlertsModule(BaseModule):
    """
    Manage custom alerts.

    ``idSites``, ``additionalEmails`` and ``phoneNumbers`` accept a list or an
    already comma separated string. Lists are joined before the call is
    dispatched, so batched calls carry the same strings.
    """

    async def get_values_for_alert_in_past(
        self,
        *,
        id_alert: int | str,
        subtract_period_n: int | str,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "CustomAlerts.getValuesForAlertInPast",
            {"idAlert": id_alert, "subtractPeriodN": subtract_period_n},
            **extra,
        )

    async def get_alert(self, *, id_alert: int | str, **extra: t.Any) -> t.Any:
        return await self._send("CustomAlerts.getAlert", {"idAlert": id_alert}, **extra)

    async def get_alerts(
        self,
        *,
        id_sites: SiteIds,
        if_super_user_return_all_alerts: bool | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "CustomAlerts.getAlerts",
            {
                "idSites": join_list(value=id_sites),
                "ifSuperUserReturnAllAlerts": if_super_user_return_all_alerts,
            },
            **extra,
        )

    def _alert_params(
        self,
        *,
        name: str,
        id_sites: SiteIds,
        period: str,
        email_me: bool,
        additional_emails: t.Sequence[str] | str,
        phone_numbers: t.Sequence[str] | str,
        metric: str,
        metric_condition: str,
        metric_value: float | str,
        compared_to: int | str,
        report_unique_id: str,
        report_condition: str | None,
        report_value: str | None,
    ) -> dict[str, t.Any]:
        return {
            "name": name,
            "idSites": join_list(value=id_sites),
            "period": period,
            "emailMe": email_me,
            "additionalEmails": join_list(value=additional_emails),
            "phoneNumbers": join_list(value=phone_numbers),
            "metric": metric,
            "metricCondition": metric_condition,
            "metricValue": metric_value,
            "comparedTo": compared_to,
            "reportUniqueId": report_unique_id,
            "reportCondition": report_condition or None,
            "reportValue": report_value or None,
        }

    async def add_alert(
        self,
        *,
        name: str,
        id_sites: SiteIds,
        period: str,
        email_me: bool,
        additional_emails: t.Sequence[str] | str,
        phone_numbers: t.Sequence[str] | str,
        metric: str,
        metric_condition: str,
        metric_value: float | str,
        compared_to: int | str,
        report_unique_id: str,
        report_condition: str | None = None,
        report_value: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        params = self._alert_params(
            name=name,
            id_sites=id_sites,
            period=period,
            email_me=email_me,
            additional_emails=additional_emails,
            phone_numbers=phone_numbers,
            metric=metric,
            metric_condition=metric_condition,
            metric_value=metric_value,
            compared_to=compared_to,
            report_unique_id=report_unique_id,
            report_condition=report_condition,
            report_value=report_value,
        )
        return await self._send("CustomAlerts.addAlert", params, **extra)

    async def edit_alert(
        self,
        *,
        id_alert: int | str,
        name: str,
        id_sites: SiteIds,
        period: str,
        email_me: bool,
        additional_emails: t.Sequence[str] | str,
        phone_numbers: t.Sequence[str] | str,
        metric: str,
        metric_condition: str,
        metric_value: float | str,
        compared_to: int | str,
        report_unique_id: str,
        report_condition: str | None = None,
        report_value: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        params = self._alert_params(
            name=name,
            id_sites=id_sites,
            period=period,
            email_me=email_me,
            additional_emails=additional_emails,
            phone_numbers=phone_numbers,
            metric=metric,
            metric_condition=metric_condition,
            metric_value=metric_value,
            compared_to=compared_to,
            report_unique_id=report_unique_id,
            report_condition=report_condition,
            report_value=report_value,
        )
        return await self._send("CustomAlerts.editAlert", {"idAlert": id_alert, **params}, **extra)

    async def delete_alert(self, *, id_alert: int | str, **extra: t.Any) -> t.Any:
        return await self._send("CustomAlerts.deleteAlert", {"idAlert": id_alert}, **extra)

    async def get_triggered_alerts(self, *, id_sites: SiteIds, **extra: t.Any) -> t.Any:
        return await self._send(
            "CustomAlerts.getTriggeredAlerts",
            {"idSites": join_list(value=id_sites)},
            **extra,
        )
