"""Realms: /admin/realms"""

from typing import Any

from ..constants import ADMIN_REALMS_PATH
from ..models.connection import RequestConfig
from ..models.representations import (
    AdminEventRepresentation,
    CreatedResource,
    EventRepresentation,
    GlobalRequestResult,
    GroupRepresentation,
    ManagementPermissionReference,
    PartialImportRepresentation,
    PartialImportResult,
    RealmEventsConfigRepresentation,
    RealmRepresentation,
)
from .base import Resource, as_model, camel_query


class Realms(Resource):
    """
    Realm management.

    Unlike the other accessors, the realm is a required argument here
    because it is the resource being managed.
    """

    base_path = ADMIN_REALMS_PATH

    async def find(
        self,
        *,
        request_config: RequestConfig | None = None,
        **query: Any,
    ) -> list[RealmRepresentation]:
        """List the realms the caller may view."""
        return await self._request(
            "GET",
            "",
            params=camel_query(query),
            response_model=RealmRepresentation,
            request_config=request_config,
        )

    async def create(
        self,
        realm: RealmRepresentation | dict[str, Any],
        *,
        request_config: RequestConfig | None = None,
    ) -> CreatedResource:
        """Create a realm; the returned id is the realm name."""
        return await self._request(
            "POST",
            "",
            payload=as_model(realm, RealmRepresentation),
            return_id_from_location=True,
            request_config=request_config,
        )

    async def find_one(
        self, realm: str, *, request_config: RequestConfig | None = None
    ) -> RealmRepresentation | None:
        return await self._request(
            "GET",
            "/{realm}",
            realm=realm,
            response_model=RealmRepresentation,
            catch_not_found=True,
            request_config=request_config,
        )

    async def update(
        self,
        realm: str,
        representation: RealmRepresentation | dict[str, Any],
        *,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "PUT",
            "/{realm}",
            realm=realm,
            payload=as_model(representation, RealmRepresentation),
            request_config=request_config,
        )

    async def delete(
        self, realm: str, *, request_config: RequestConfig | None = None
    ) -> None:
        await self._request(
            "DELETE", "/{realm}", realm=realm, request_config=request_config
        )

    async def partial_import(
        self,
        realm: str,
        representation: PartialImportRepresentation | dict[str, Any],
        *,
        request_config: RequestConfig | None = None,
    ) -> PartialImportResult:
        return await self._request(
            "POST",
            "/{realm}/partialImport",
            realm=realm,
            payload=as_model(representation, PartialImportRepresentation),
            response_model=PartialImportResult,
            request_config=request_config,
        )

    async def export(
        self,
        realm: str,
        *,
        export_clients: bool | None = None,
        export_groups_and_roles: bool | None = None,
        request_config: RequestConfig | None = None,
    ) -> RealmRepresentation:
        return await self._request(
            "POST",
            "/{realm}/partial-export",
            realm=realm,
            params={
                "exportClients": export_clients,
                "exportGroupsAndRoles": export_groups_and_roles,
            },
            response_model=RealmRepresentation,
            request_config=request_config,
        )

    # Default groups

    async def get_default_groups(
        self, realm: str, *, request_config: RequestConfig | None = None
    ) -> list[GroupRepresentation]:
        return await self._request(
            "GET",
            "/{realm}/default-groups",
            realm=realm,
            response_model=GroupRepresentation,
            request_config=request_config,
        )

    async def add_default_group(
        self, realm: str, id: str, *, request_config: RequestConfig | None = None
    ) -> None:
        await self._request(
            "PUT",
            "/{realm}/default-groups/{id}",
            realm=realm,
            path_params={"id": id},
            request_config=request_config,
        )

    async def remove_default_group(
        self, realm: str, id: str, *, request_config: RequestConfig | None = None
    ) -> None:
        await self._request(
            "DELETE",
            "/{realm}/default-groups/{id}",
            realm=realm,
            path_params={"id": id},
            request_config=request_config,
        )

    # Events

    async def find_events(
        self,
        realm: str,
        *,
        request_config: RequestConfig | None = None,
        **query: Any,
    ) -> list[EventRepresentation]:
        return await self._request(
            "GET",
            "/{realm}/events",
            realm=realm,
            params=camel_query(query),
            response_model=EventRepresentation,
            request_config=request_config,
        )

    async def get_config_events(
        self, realm: str, *, request_config: RequestConfig | None = None
    ) -> RealmEventsConfigRepresentation:
        return await self._request(
            "GET",
            "/{realm}/events/config",
            realm=realm,
            response_model=RealmEventsConfigRepresentation,
            request_config=request_config,
        )

    async def update_config_events(
        self,
        realm: str,
        config: RealmEventsConfigRepresentation | dict[str, Any],
        *,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "PUT",
            "/{realm}/events/config",
            realm=realm,
            payload=as_model(config, RealmEventsConfigRepresentation),
            request_config=request_config,
        )

    async def clear_events(
        self, realm: str, *, request_config: RequestConfig | None = None
    ) -> None:
        await self._request(
            "DELETE", "/{realm}/events", realm=realm, request_config=request_config
        )

    async def find_admin_events(
        self,
        realm: str,
        *,
        request_config: RequestConfig | None = None,
        **query: Any,
    ) -> list[AdminEventRepresentation]:
        return await self._request(
            "GET",
            "/{realm}/admin-events",
            realm=realm,
            params=camel_query(query),
            response_model=AdminEventRepresentation,
            request_config=request_config,
        )

    async def clear_admin_events(
        self, realm: str, *, request_config: RequestConfig | None = None
    ) -> None:
        await self._request(
            "DELETE",
            "/{realm}/admin-events",
            realm=realm,
            request_config=request_config,
        )

    # Sessions

    async def get_client_session_stats(
        self, realm: str, *, request_config: RequestConfig | None = None
    ) -> list[dict[str, str]]:
        return await self._request(
            "GET",
            "/{realm}/client-session-stats",
            realm=realm,
            request_config=request_config,
        )

    async def logout_all(
        self, realm: str, *, request_config: RequestConfig | None = None
    ) -> GlobalRequestResult:
        """Remove all user sessions in the realm."""
        return await self._request(
            "POST",
            "/{realm}/logout-all",
            realm=realm,
            response_model=GlobalRequestResult,
            request_config=request_config,
        )

    async def delete_session(
        self, realm: str, session: str, *, request_config: RequestConfig | None = None
    ) -> None:
        await self._request(
            "DELETE",
            "/{realm}/sessions/{session}",
            realm=realm,
            path_params={"session": session},
            request_config=request_config,
        )

    async def push_revocation(
        self, realm: str, *, request_config: RequestConfig | None = None
    ) -> GlobalRequestResult:
        return await self._request(
            "POST",
            "/{realm}/push-revocation",
            realm=realm,
            response_model=GlobalRequestResult,
            request_config=request_config,
        )

    # Fine-grained permissions

    async def get_users_management_permissions(
        self, realm: str, *, request_config: RequestConfig | None = None
    ) -> ManagementPermissionReference:
        return await self._request(
            "GET",
            "/{realm}/users-management-permissions",
            realm=realm,
            response_model=ManagementPermissionReference,
            request_config=request_config,
        )

    async def update_users_management_permissions(
        self,
        realm: str,
        enabled: bool,
        *,
        request_config: RequestConfig | None = None,
    ) -> ManagementPermissionReference:
        return await self._request(
            "PUT",
            "/{realm}/users-management-permissions",
            realm=realm,
            payload={"enabled": enabled},
            response_model=ManagementPermissionReference,
            request_config=request_config,
        )
