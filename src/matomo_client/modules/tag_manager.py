"""
TagManager module: containers, tags, triggers, variables and versions.
"""

from __future__ import annotations

import typing as t

from matomo_client.modules.base import BaseModule, SiteId

ContainerVersionId = int | str


class TagManagerModule(BaseModule):
    """
    Manage Tag Manager containers.

    ``parameters`` mappings and ``conditions``/``lookup_table`` lists keep
    their structure and are sent with PHP bracket keys. Trigger id lists
    (``fire_trigger_ids``, ``block_trigger_ids``) are sent as arrays.
    """

    async def get_available_contexts(self, **extra: t.Any) -> t.Any:
        return await self._send("TagManager.getAvailableContexts", **extra)

    async def get_available_environments(self, **extra: t.Any) -> t.Any:
        return await self._send("TagManager.getAvailableEnvironments", **extra)

    async def get_available_tag_fire_limits(self, **extra: t.Any) -> t.Any:
        return await self._send("TagManager.getAvailableTagFireLimits", **extra)

    async def get_available_comparisons(self, **extra: t.Any) -> t.Any:
        return await self._send("TagManager.getAvailableComparisons", **extra)

    async def get_available_tag_types_in_context(self, *, id_context: str, **extra: t.Any) -> t.Any:
        return await self._send(
            "TagManager.getAvailableTagTypesInContext",
            {"idContext": id_context},
            **extra,
        )

    async def get_available_trigger_types_in_context(
        self,
        *,
        id_context: str,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "TagManager.getAvailableTriggerTypesInContext",
            {"idContext": id_context},
            **extra,
        )

    async def get_available_variable_types_in_context(
        self,
        *,
        id_context: str,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "TagManager.getAvailableVariableTypesInContext",
            {"idContext": id_context},
            **extra,
        )

    # Containers

    async def get_containers(self, *, id_site: SiteId, **extra: t.Any) -> t.Any:
        return await self._send("TagManager.getContainers", {"idSite": id_site}, **extra)

    async def get_container(self, *, id_site: SiteId, id_container: str, **extra: t.Any) -> t.Any:
        return await self._send(
            "TagManager.getContainer",
            {"idSite": id_site, "idContainer": id_container},
            **extra,
        )

    async def add_container(
        self,
        *,
        id_site: SiteId,
        context: str,
        name: str,
        description: str | None = None,
        ignore_gtm_data_layer: bool | None = None,
        is_tag_fire_limit_allowed_in_preview_mode: bool | None = None,
        actively_sync_gtm_data_layer: bool | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "TagManager.addContainer",
            {
                "idSite": id_site,
                "context": context,
                "name": name,
                "description": description,
                "ignoreGtmDataLayer": ignore_gtm_data_layer,
                "isTagFireLimitAllowedInPreviewMode": is_tag_fire_limit_allowed_in_preview_mode,
                "activelySyncGtmDataLayer": actively_sync_gtm_data_layer,
            },
            **extra,
        )

    async def update_container(
        self,
        *,
        id_site: SiteId,
        id_container: str,
        name: str,
        description: str | None = None,
        ignore_gtm_data_layer: bool | None = None,
        is_tag_fire_limit_allowed_in_preview_mode: bool | None = None,
        actively_sync_gtm_data_layer: bool | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "TagManager.updateContainer",
            {
                "idSite": id_site,
                "idContainer": id_container,
                "name": name,
                "description": description,
                "ignoreGtmDataLayer": ignore_gtm_data_layer,
                "isTagFireLimitAllowedInPreviewMode": is_tag_fire_limit_allowed_in_preview_mode,
                "activelySyncGtmDataLayer": actively_sync_gtm_data_layer,
            },
            **extra,
        )

    async def delete_container(self, *, id_site: SiteId, id_container: str, **extra: t.Any) -> t.Any:
        return await self._send(
            "TagManager.deleteContainer",
            {"idSite": id_site, "idContainer": id_container},
            **extra,
        )

    async def get_container_embed_code(
        self,
        *,
        id_site: SiteId,
        id_container: str,
        environment: str,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "TagManager.getContainerEmbedCode",
            {"idSite": id_site, "idContainer": id_container, "environment": environment},
            **extra,
        )

    async def create_default_container_for_site(self, *, id_site: SiteId, **extra: t.Any) -> t.Any:
        return await self._send(
            "TagManager.createDefaultContainerForSite",
            {"idSite": id_site},
            **extra,
        )

    # Tags

    async def get_container_tags(
        self,
        *,
        id_site: SiteId,
        id_container: str,
        id_container_version: ContainerVersionId,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "TagManager.getContainerTags",
            {
                "idSite": id_site,
                "idContainer": id_container,
                "idContainerVersion": id_container_version,
            },
            **extra,
        )

    async def get_container_tag(
        self,
        *,
        id_site: SiteId,
        id_container: str,
        id_container_version: ContainerVersionId,
        id_tag: int | str,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "TagManager.getContainerTag",
            {
                "idSite": id_site,
                "idContainer": id_container,
                "idContainerVersion": id_container_version,
                "idTag": id_tag,
            },
            **extra,
        )

    async def add_container_tag(
        self,
        *,
        id_site: SiteId,
        id_container: str,
        id_container_version: ContainerVersionId,
        type: str,
        name: str,
        parameters: t.Mapping[str, t.Any] | None = None,
        fire_trigger_ids: t.Sequence[int | str] | None = None,
        block_trigger_ids: t.Sequence[int | str] | None = None,
        fire_limit: str | None = None,
        fire_delay: int | None = None,
        priority: int | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
        description: str | None = None,
        status: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        """
        Add a tag to a container version.

        Parameters
        ----------
        id_site : SiteId
            Site owning the container.
        id_container : str
            Container identifier.
        id_container_version : ContainerVersionId
            Draft version the tag is added to.
        type : str
            Tag type, e.g. ``Matomo`` or ``CustomHtml``.
        name : str
            Tag name.
        parameters : typing.Mapping[str, typing.Any] | None, optional
            Type specific tag parameters.
        fire_trigger_ids : typing.Sequence[int | str] | None, optional
            Triggers firing the tag.
        block_trigger_ids : typing.Sequence[int | str] | None, optional
            Triggers blocking the tag.

        Returns
        -------
        typing.Any
            Identifier of the new tag, or a ``BatchSlot`` in a batch.
        """
        return await self._send(
            "TagManager.addContainerTag",
            {
                "idSite": id_site,
                "idContainer": id_container,
                "idContainerVersion": id_container_version,
                "type": type,
                "name": name,
                "parameters": parameters,
                "fireTriggerIds": list(fire_trigger_ids) if fire_trigger_ids is not None else None,
                "blockTriggerIds": list(block_trigger_ids) if block_trigger_ids is not None else None,
                "fireLimit": fire_limit,
                "fireDelay": fire_delay,
                "priority": priority,
                "startDate": start_date,
                "endDate": end_date,
                "description": description,
                "status": status,
            },
            **extra,
        )

    async def update_container_tag(
        self,
        *,
        id_site: SiteId,
        id_container: str,
        id_container_version: ContainerVersionId,
        id_tag: int | str,
        name: str,
        parameters: t.Mapping[str, t.Any] | None = None,
        fire_trigger_ids: t.Sequence[int | str] | None = None,
        block_trigger_ids: t.Sequence[int | str] | None = None,
        fire_limit: str | None = None,
        fire_delay: int | None = None,
        priority: int | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
        description: str | None = None,
        status: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "TagManager.updateContainerTag",
            {
                "idSite": id_site,
                "idContainer": id_container,
                "idContainerVersion": id_container_version,
                "idTag": id_tag,
                "name": name,
                "parameters": parameters,
                "fireTriggerIds": list(fire_trigger_ids) if fire_trigger_ids is not None else None,
                "blockTriggerIds": list(block_trigger_ids) if block_trigger_ids is not None else None,
                "fireLimit": fire_limit,
                "fireDelay": fire_delay,
                "priority": priority,
                "startDate": start_date,
                "endDate": end_date,
                "description": description,
                "status": status,
            },
            **extra,
        )

    async def _tag_action(
        self,
        method: str,
        *,
        id_site: SiteId,
        id_container: str,
        id_container_version: ContainerVersionId,
        id_tag: int | str,
        extra: dict[str, t.Any],
    ) -> t.Any:
        return await self._send(
            method,
            {
                "idSite": id_site,
                "idContainer": id_container,
                "idContainerVersion": id_container_version,
                "idTag": id_tag,
            },
            **extra,
        )

    async def delete_container_tag(
        self,
        *,
        id_site: SiteId,
        id_container: str,
        id_container_version: ContainerVersionId,
        id_tag: int | str,
        **extra: t.Any,
    ) -> t.Any:
        return await self._tag_action(
            "TagManager.deleteContainerTag",
            id_site=id_site,
            id_container=id_container,
            id_container_version=id_container_version,
            id_tag=id_tag,
            extra=extra,
        )

    async def pause_container_tag(
        self,
        *,
        id_site: SiteId,
        id_container: str,
        id_container_version: ContainerVersionId,
        id_tag: int | str,
        **extra: t.Any,
    ) -> t.Any:
        return await self._tag_action(
            "TagManager.pauseContainerTag",
            id_site=id_site,
            id_container=id_container,
            id_container_version=id_container_version,
            id_tag=id_tag,
            extra=extra,
        )

    async def resume_container_tag(
        self,
        *,
        id_site: SiteId,
        id_container: str,
        id_container_version: ContainerVersionId,
        id_tag: int | str,
        **extra: t.Any,
    ) -> t.Any:
        return await self._tag_action(
            "TagManager.resumeContainerTag",
            id_site=id_site,
            id_container=id_container,
            id_container_version=id_container_version,
            id_tag=id_tag,
            extra=extra,
        )

    # Triggers

    async def get_container_triggers(
        self,
        *,
        id_site: SiteId,
        id_container: str,
        id_container_version: ContainerVersionId,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "TagManager.getContainerTriggers",
            {
                "idSite": id_site,
                "idContainer": id_container,
                "idContainerVersion": id_container_version,
            },
            **extra,
        )

    async def add_container_trigger(
        self,
        *,
        id_site: SiteId,
        id_container: str,
        id_container_version: ContainerVersionId,
        type: str,
        name: str,
        parameters: t.Mapping[str, t.Any] | None = None,
        conditions: t.Sequence[t.Mapping[str, t.Any]] | None = None,
        description: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "TagManager.addContainerTrigger",
            {
                "idSite": id_site,
                "idContainer": id_container,
                "idContainerVersion": id_container_version,
                "type": type,
                "name": name,
                "parameters": parameters,
                "conditions": list(conditions) if conditions is not None else None,
                "description": description,
            },
            **extra,
        )

    async def delete_container_trigger(
        self,
        *,
        id_site: SiteId,
        id_container: str,
        id_container_version: ContainerVersionId,
        id_trigger: int | str,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "TagManager.deleteContainerTrigger",
            {
                "idSite": id_site,
                "idContainer": id_container,
                "idContainerVersion": id_container_version,
                "idTrigger": id_trigger,
            },
            **extra,
        )

    # Variables

    async def get_container_variables(
        self,
        *,
        id_site: SiteId,
        id_container: str,
        id_container_version: ContainerVersionId,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "TagManager.getContainerVariables",
            {
                "idSite": id_site,
                "idContainer": id_container,
                "idContainerVersion": id_container_version,
            },
            **extra,
        )

    async def add_container_variable(
        self,
        *,
        id_site: SiteId,
        id_container: str,
        id_container_version: ContainerVersionId,
        type: str,
        name: str,
        parameters: t.Mapping[str, t.Any] | None = None,
        default_value: str | None = None,
        lookup_table: t.Sequence[t.Mapping[str, t.Any]] | None = None,
        description: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "TagManager.addContainerVariable",
            {
                "idSite": id_site,
                "idContainer": id_container,
                "idContainerVersion": id_container_version,
                "type": type,
                "name": name,
                "parameters": parameters,
                "defaultValue": default_value,
                "lookupTable": list(lookup_table) if lookup_table is not None else None,
                "description": description,
            },
            **extra,
        )

    async def delete_container_variable(
        self,
        *,
        id_site: SiteId,
        id_container: str,
        id_container_version: ContainerVersionId,
        id_variable: int | str,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "TagManager.deleteContainerVariable",
            {
                "idSite": id_site,
                "idContainer": id_container,
                "idContainerVersion": id_container_version,
                "idVariable": id_variable,
            },
            **extra,
        )

    # Versions

    async def get_container_versions(
        self,
        *,
        id_site: SiteId,
        id_container: str,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "TagManager.getContainerVersions",
            {"idSite": id_site, "idContainer": id_container},
            **extra,
        )

    async def create_container_version(
        self,
        *,
        id_site: SiteId,
        id_container: str,
        name: str,
        description: str | None = None,
        id_container_version: ContainerVersionId | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "TagManager.createContainerVersion",
            {
                "idSite": id_site,
                "idContainer": id_container,
                "name": name,
                "description": description,
                "idContainerVersion": id_container_version,
            },
            **extra,
        )

    async def publish_container_version(
        self,
        *,
        id_site: SiteId,
        id_container: str,
        id_container_version: ContainerVersionId,
        environment: str,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "TagManager.publishContainerVersion",
            {
                "idSite": id_site,
                "idContainer": id_container,
                "idContainerVersion": id_container_version,
                "environment": environment,
            },
            **extra,
        )

    async def export_container_version(
        self,
        *,
        id_site: SiteId,
        id_container: str,
        id_container_version: ContainerVersionId | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "TagManager.exportContainerVersion",
            {
                "idSite": id_site,
                "idContainer": id_container,
                "idContainerVersion": id_container_version,
            },
            **extra,
        )
