"""Groups: /admin/realms/{realm}/groups"""

from typing import Any

from ..models.connection import RequestConfig
from ..models.representations import (
    CreatedResource,
    GroupRepresentation,
    MappingsRepresentation,
    RoleRepresentation,
    UserRepresentation,
)
from .base import Resource, as_model, camel_query


class Groups(Resource):
    """Group hierarchy, membership and role mappings."""

    async def find(
        self,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
        **query: Any,
    ) -> list[GroupRepresentation]:
        return await self._request(
            "GET",
            "/groups",
            realm=realm,
            params=camel_query(query),
            response_model=GroupRepresentation,
            request_config=request_config,
        )

    async def create(
        self,
        group: GroupRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> CreatedResource:
        return await self._request(
            "POST",
            "/groups",
            realm=realm,
            payload=as_model(group, GroupRepresentation),
            return_id_from_location=True,
            request_config=request_config,
        )

    async def find_one(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> GroupRepresentation | None:
        return await self._request(
            "GET",
            "/groups/{id}",
            realm=realm,
            path_params={"id": id},
            response_model=GroupRepresentation,
            catch_not_found=True,
            request_config=request_config,
        )

    async def update(
        self,
        id: str,
        group: GroupRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "PUT",
            "/groups/{id}",
            realm=realm,
            path_params={"id": id},
            payload=as_model(group, GroupRepresentation),
            request_config=request_config,
        )

    async def delete(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "DELETE",
            "/groups/{id}",
            realm=realm,
            path_params={"id": id},
            request_config=request_config,
        )

    async def count(
        self,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
        **query: Any,
    ) -> dict[str, int]:
        return await self._request(
            "GET",
            "/groups/count",
            realm=realm,
            params=camel_query(query),
            request_config=request_config,
        )

    async def set_or_create_child(
        self,
        id: str,
        child: GroupRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> CreatedResource | None:
        """
        Create a subgroup, or move an existing group (identified by its id)
        under this one.
        """
        return await self._request(
            "POST",
            "/groups/{id}/children",
            realm=realm,
            path_params={"id": id},
            payload=as_model(child, GroupRepresentation),
            return_id_from_location=True,
            request_config=request_config,
        )

    async def list_sub_groups(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
        **query: Any,
    ) -> list[GroupRepresentation]:
        return await self._request(
            "GET",
            "/groups/{id}/children",
            realm=realm,
            path_params={"id": id},
            params=camel_query(query),
            response_model=GroupRepresentation,
            request_config=request_config,
        )

    async def list_members(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
        **query: Any,
    ) -> list[UserRepresentation]:
        return await self._request(
            "GET",
            "/groups/{id}/members",
            realm=realm,
            path_params={"id": id},
            params=camel_query(query),
            response_model=UserRepresentation,
            request_config=request_config,
        )

    # Role mappings

    async def list_role_mappings(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> MappingsRepresentation:
        return await self._request(
            "GET",
            "/groups/{id}/role-mappings",
            realm=realm,
            path_params={"id": id},
            response_model=MappingsRepresentation,
            request_config=request_config,
        )

    async def add_realm_role_mappings(
        self,
        id: str,
        roles: list[RoleRepresentation | dict[str, Any]],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "POST",
            "/groups/{id}/role-mappings/realm",
            realm=realm,
            path_params={"id": id},
            payload=[as_model(role, RoleRepresentation) for role in roles],
            request_config=request_config,
        )

    async def list_realm_role_mappings(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[RoleRepresentation]:
        return await self._request(
            "GET",
            "/groups/{id}/role-mappings/realm",
            realm=realm,
            path_params={"id": id},
            response_model=RoleRepresentation,
            request_config=request_config,
        )

    async def del_realm_role_mappings(
        self,
        id: str,
        roles: list[RoleRepresentation | dict[str, Any]],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "DELETE",
            "/groups/{id}/role-mappings/realm",
            realm=realm,
            path_params={"id": id},
            payload=[as_model(role, RoleRepresentation) for role in roles],
            request_config=request_config,
        )

    async def list_available_realm_role_mappings(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[RoleRepresentation]:
        return await self._request(
            "GET",
            "/groups/{id}/role-mappings/realm/available",
            realm=realm,
            path_params={"id": id},
            response_model=RoleRepresentation,
            request_config=request_config,
        )

    async def list_composite_realm_role_mappings(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[RoleRepresentation]:
        return await self._request(
            "GET",
            "/groups/{id}/role-mappings/realm/composite",
            realm=realm,
            path_params={"id": id},
            response_model=RoleRepresentation,
            request_config=request_config,
        )

    async def list_client_role_mappings(
        self,
        id: str,
        client_unique_id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[RoleRepresentation]:
        return await self._request(
            "GET",
            "/groups/{id}/role-mappings/clients/{client_unique_id}",
            realm=realm,
            path_params={"id": id, "client_unique_id": client_unique_id},
            response_model=RoleRepresentation,
            request_config=request_config,
        )

    async def add_client_role_mappings(
        self,
        id: str,
        client_unique_id: str,
        roles: list[RoleRepresentation | dict[str, Any]],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "POST",
            "/groups/{id}/role-mappings/clients/{client_unique_id}",
            realm=realm,
            path_params={"id": id, "client_unique_id": client_unique_id},
            payload=[as_model(role, RoleRepresentation) for role in roles],
            request_config=request_config,
        )

    async def del_client_role_mappings(
        self,
        id: str,
        client_unique_id: str,
        roles: list[RoleRepresentation | dict[str, Any]],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "DELETE",
            "/groups/{id}/role-mappings/clients/{client_unique_id}",
            realm=realm,
            path_params={"id": id, "client_unique_id": client_unique_id},
            payload=[as_model(role, RoleRepresentation) for role in roles],
            request_config=request_config,
        )

    async def list_available_client_role_mappings(
        self,
        id: str,
        client_unique_id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[RoleRepresentation]:
        return await self._request(
            "GET",
            "/groups/{id}/role-mappings/clients/{client_unique_id}/available",
            realm=realm,
            path_params={"id": id, "client_unique_id": client_unique_id},
            response_model=RoleRepresentation,
            request_config=request_config,
        )

    async def list_composite_client_role_mappings(
        self,
        id: str,
        client_unique_id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[RoleRepresentation]:
        return await self._request(
            "GET",
            "/groups/{id}/role-mappings/clients/{client_unique_id}/composite",
            realm=realm,
            path_params={"id": id, "client_unique_id": client_unique_id},
            response_model=RoleRepresentation,
            request_config=request_config,
        )
