"""
UsersManager module: users, access levels and capabilities.
"""

from __future__ import annotations

import typing as t

from matomo_client.modules.base import BaseModule, SiteId, SiteIds
from matomo_client.params import join_list


class UsersManagerModule(BaseModule):
    """
    Manage users and their access.

    Calls that change credentials or access require the current user's
    password as ``password_confirmation``.
    """

    async def get_users(
        self,
        *,
        user_logins: t.Sequence[str] | str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "UsersManager.getUsers",
            {"userLogins": join_list(value=user_logins)},
            **extra,
        )

    async def get_users_login(self, **extra: t.Any) -> t.Any:
        return await self._send("UsersManager.getUsersLogin", **extra)

    async def get_user(self, *, user_login: str, **extra: t.Any) -> t.Any:
        return await self._send("UsersManager.getUser", {"userLogin": user_login}, **extra)

    async def get_user_by_email(self, *, user_email: str, **extra: t.Any) -> t.Any:
        return await self._send("UsersManager.getUserByEmail", {"userEmail": user_email}, **extra)

    async def user_exists(self, *, user_login: str, **extra: t.Any) -> t.Any:
        return await self._send("UsersManager.userExists", {"userLogin": user_login}, **extra)

    async def user_email_exists(self, *, user_email: str, **extra: t.Any) -> t.Any:
        return await self._send("UsersManager.userEmailExists", {"userEmail": user_email}, **extra)

    async def add_user(
        self,
        *,
        user_login: str,
        password: str,
        email: str,
        initial_id_site: SiteId | None = None,
        password_confirmation: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "UsersManager.addUser",
            {
                "userLogin": user_login,
                "password": password,
                "email": email,
                "initialIdSite": initial_id_site,
                "passwordConfirmation": password_confirmation,
            },
            **extra,
        )

    async def update_user(
        self,
        *,
        user_login: str,
        password_confirmation: str,
        password: str | None = None,
        email: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "UsersManager.updateUser",
            {
                "userLogin": user_login,
                "password": password,
                "email": email,
                "passwordConfirmation": password_confirmation,
            },
            **extra,
        )

    async def delete_user(self, *, user_login: str, **extra: t.Any) -> t.Any:
        return await self._send("UsersManager.deleteUser", {"userLogin": user_login}, **extra)

    async def has_super_user_access(self, **extra: t.Any) -> t.Any:
        return await self._send("UsersManager.hasSuperUserAccess", **extra)

    async def get_available_roles(self, **extra: t.Any) -> t.Any:
        return await self._send("UsersManager.getAvailableRoles", **extra)

    async def get_available_capabilities(self, **extra: t.Any) -> t.Any:
        return await self._send("UsersManager.getAvailableCapabilities", **extra)

    async def get_sites_access_from_user(self, *, user_login: str, **extra: t.Any) -> t.Any:
        return await self._send(
            "UsersManager.getSitesAccessFromUser",
            {"userLogin": user_login},
            **extra,
        )

    async def get_users_access_from_site(self, *, id_site: SiteId, **extra: t.Any) -> t.Any:
        return await self._send("UsersManager.getUsersAccessFromSite", {"idSite": id_site}, **extra)

    async def set_user_access(
        self,
        *,
        user_login: str,
        access: str,
        id_sites: SiteIds,
        password_confirmation: str | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "UsersManager.setUserAccess",
            {
                "userLogin": user_login,
                "access": access,
                "idSites": join_list(value=id_sites),
                "passwordConfirmation": password_confirmation,
            },
            **extra,
        )

    async def add_capabilities(
        self,
        *,
        user_login: str,
        capabilities: t.Sequence[str] | str,
        id_sites: SiteIds,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "UsersManager.addCapabilities",
            {
                "userLogin": user_login,
                "capabilities": join_list(value=capabilities),
                "idSites": join_list(value=id_sites),
            },
            **extra,
        )

    async def remove_capabilities(
        self,
        *,
        user_login: str,
        capabilities: t.Sequence[str] | str,
        id_sites: SiteIds,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "UsersManager.removeCapabilities",
            {
                "userLogin": user_login,
                "capabilities": join_list(value=capabilities),
                "idSites": join_list(value=id_sites),
            },
            **extra,
        )

    async def set_super_user_access(
        self,
        *,
        user_login: str,
        has_super_user_access: bool,
        password_confirmation: str,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "UsersManager.setSuperUserAccess",
            {
                "userLogin": user_login,
                "hasSuperUserAccess": has_super_user_access,
                "passwordConfirmation": password_confirmation,
            },
            **extra,
        )

    async def create_app_specific_token_auth(
        self,
        *,
        user_login: str,
        password_confirmation: str,
        description: str,
        expire_date: str | None = None,
        expire_hours: int | None = None,
        **extra: t.Any,
    ) -> t.Any:
        return await self._send(
            "UsersManager.createAppSpecificTokenAuth",
            {
                "userLogin": user_login,
                "passwordConfirmation": password_confirmation,
                "description": description,
                "expireDate": expire_date,
                "expireHours": expire_hours,
            },
            **extra,
        )
