"""
Goals module: goal management and conversion / ecommerce reports.
"""

from __future__ import annotations

import typing as t

from matomo_client.modules.base import BaseModule, SiteId
from matomo_client.params import join_list


class GoalsModule(BaseModule):
    """Manage goals and read goal conversion metrics, including ecommerce."""

    async def get_goal(self, *, id_site: SiteId, id_goal: int | str, **extra: t.Any) -> t.Any:
        return await self._send("Goals.getGoal", {"idSite": id_site, "idGoal": id_goal}, **extra)

    async def get_goals(
        self,
        *,
        id_site: SiteId,
        order_by_name: bool | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "Goals.getGoals",
            {"idSite": id_site, "orderByName": order_by_name},
            **extra,
        )

    async def add_goal(
        self,
        *,
        id_site: SiteId,
        name: str,
        match_attribute: str,
        pattern: str,
        pattern_type: str,
        case_sensitive: bool | None = None,
        revenue: float | str | None = None,
        allow_multiple_conversions_per_visit: bool | None = None,
        description: str | None = None,
        use_event_value_as_revenue: bool | None = None,
        **extra: t.Any,
    ) -> t.Any:
        """
        Create a goal.

        Parameters
        ----------
        id_site : SiteId
            Site the goal belongs to.
        name : str
            Goal name.
        match_attribute : str
            What to match: ``manually``, ``url``, ``title``, ``file``,
            ``external_website``, ``event_category`` ...
        pattern : str
            Pattern matched against the attribute.
        pattern_type : str
            ``contains``, ``exact`` or ``regex``.
        """
        return await self._send(
            "Goals.addGoal",
            {
                "idSite": id_site,
                "name": name,
                "matchAttribute": match_attribute,
                "pattern": pattern,
                "patternType": pattern_type,
                "caseSensitive": case_sensitive,
                "revenue": revenue,
                "allowMultipleConversionsPerVisit": allow_multiple_conversions_per_visit,
                "description": description,
                "useEventValueAsRevenue": use_event_value_as_revenue,
            },
            **extra,
        )

    async def update_goal(
        self,
        *,
        id_site: SiteId,
        id_goal: int | str,
        name: str,
        match_attribute: str,
        pattern: str,
        pattern_type: str,
        case_sensitive: bool | None = None,
        revenue: float | str | None = None,
        allow_multiple_conversions_per_visit: bool | None = None,
        description: str | None = None,
        use_event_value_as_revenue: bool | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "Goals.updateGoal",
            {
                "idSite": id_site,
                "idGoal": id_goal,
                "name": name,
                "matchAttribute": match_attribute,
                "pattern": pattern,
                "patternType": pattern_type,
                "caseSensitive": case_sensitive,
                "revenue": revenue,
                "allowMultipleConversionsPerVisit": allow_multiple_conversions_per_visit,
                "description": description,
                "useEventValueAsRevenue": use_event_value_as_revenue,
            },
            **extra,
        )

    async def delete_goal(self, *, id_site: SiteId, id_goal: int | str, **extra: t.Any) -> t.Any:
        return await self._send("Goals.deleteGoal", {"idSite": id_site, "idGoal": id_goal}, **extra)

    async def get_items_sku(
        self,
        *,
        id_site: SiteId,
        period: str,
        date: str,
        abandoned_carts: bool | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "Goals.getItemsSku",
            {
                "idSite": id_site,
                "period": period,
                "date": date,
                "abandonedCarts": abandoned_carts,
                "segment": segment,
            },
            **extra,
        )

    async def get_items_name(
        self,
        *,
        id_site: SiteId,
        period: str,
        date: str,
        abandoned_carts: bool | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "Goals.getItemsName",
            {
                "idSite": id_site,
                "period": period,
                "date": date,
                "abandonedCarts": abandoned_carts,
                "segment": segment,
            },
            **extra,
        )

    async def get_items_category(
        self,
        *,
        id_site: SiteId,
        period: str,
        date: str,
        abandoned_carts: bool | None = None,
        segment: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "Goals.getItemsCategory",
            {
                "idSite": id_site,
                "period": period,
                "date": date,
                "abandonedCarts": abandoned_carts,
                "segment": segment,
            },
            **extra,
        )

    async def get(
        self,
        *,
        id_site: SiteId,
        period: str,
        date: str,
        segment: str | None = None,
        id_goal: int | str | None = None,
        columns: t.Sequence[str] | str | None = None,
        show_all_goal_specific_metrics: bool | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "Goals.get",
            {
                "idSite": id_site,
                "period": period,
                "date": date,
                "segment": segment,
                "idGoal": id_goal,
                "columns": join_list(value=columns),
                "showAllGoalSpecificMetrics": show_all_goal_specific_metrics,
            },
            **extra,
        )

    async def get_days_to_conversion(
        self,
        *,
        id_site: SiteId,
        period: str,
        date: str,
        segment: str | None = None,
        id_goal: int | str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "Goals.getDaysToConversion",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            idGoal=id_goal,
            **extra,
        )

    async def get_visits_until_conversion(
        self,
        *,
        id_site: SiteId,
        period: str,
        date: str,
        segment: str | None = None,
        id_goal: int | str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._report(
            "Goals.getVisitsUntilConversion",
            period=period,
            date=date,
            id_site=id_site,
            segment=segment,
            idGoal=id_goal,
            **extra,
        )
