"""Realm roles: /admin/realms/{realm}/roles and /admin/realms/{realm}/roles-by-id"""

from typing import Any

from ..models.connection import RequestConfig
from ..models.representations import (
    CreatedResource,
    RoleRepresentation,
    UserRepresentation,
)
from .base import Resource, as_model, camel_query


class Roles(Resource):
    """Realm roles, addressed by name or by id, and their composites."""

    async def find(
        self,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
        **query: Any,
    ) -> list[RoleRepresentation]:
        return await self._request(
            "GET",
            "/roles",
            realm=realm,
            params=camel_query(query),
            response_model=RoleRepresentation,
            request_config=request_config,
        )

    async def create(
        self,
        role: RoleRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> CreatedResource:
        """Create a realm role; the returned id is the role name."""
        return await self._request(
            "POST",
            "/roles",
            realm=realm,
            payload=as_model(role, RoleRepresentation),
            return_id_from_location=True,
            request_config=request_config,
        )

    async def find_one_by_name(
        self,
        name: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> RoleRepresentation | None:
        return await self._request(
            "GET",
            "/roles/{name}",
            realm=realm,
            path_params={"name": name},
            response_model=RoleRepresentation,
            catch_not_found=True,
            request_config=request_config,
        )

    async def update_by_name(
        self,
        name: str,
        role: RoleRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "PUT",
            "/roles/{name}",
            realm=realm,
            path_params={"name": name},
            payload=as_model(role, RoleRepresentation),
            request_config=request_config,
        )

    async def del_by_name(
        self,
        name: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "DELETE",
            "/roles/{name}",
            realm=realm,
            path_params={"name": name},
            request_config=request_config,
        )

    async def find_users_with_role(
        self,
        name: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
        **query: Any,
    ) -> list[UserRepresentation]:
        return await self._request(
            "GET",
            "/roles/{name}/users",
            realm=realm,
            path_params={"name": name},
            params=camel_query(query),
            response_model=UserRepresentation,
            request_config=request_config,
        )

    async def find_one_by_id(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> RoleRepresentation | None:
        return await self._request(
            "GET",
            "/roles-by-id/{id}",
            realm=realm,
            path_params={"id": id},
            response_model=RoleRepresentation,
            catch_not_found=True,
            request_config=request_config,
        )

    async def update_by_id(
        self,
        id: str,
        role: RoleRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "PUT",
            "/roles-by-id/{id}",
            realm=realm,
            path_params={"id": id},
            payload=as_model(role, RoleRepresentation),
            request_config=request_config,
        )

    async def del_by_id(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "DELETE",
            "/roles-by-id/{id}",
            realm=realm,
            path_params={"id": id},
            request_config=request_config,
        )

    # Composites

    async def create_composite(
        self,
        role_id: str,
        roles: list[RoleRepresentation | dict[str, Any]],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        """Make the given roles children of role_id."""
        await self._request(
            "POST",
            "/roles-by-id/{role_id}/composites",
            realm=realm,
            path_params={"role_id": role_id},
            payload=[as_model(role, RoleRepresentation) for role in roles],
            request_config=request_config,
        )

    async def get_composite_roles(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[RoleRepresentation]:
        return await self._request(
            "GET",
            "/roles-by-id/{id}/composites",
            realm=realm,
            path_params={"id": id},
            response_model=RoleRepresentation,
            request_config=request_config,
        )

    async def get_composite_roles_for_realm(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[RoleRepresentation]:
        return await self._request(
            "GET",
            "/roles-by-id/{id}/composites/realm",
            realm=realm,
            path_params={"id": id},
            response_model=RoleRepresentation,
            request_config=request_config,
        )

    async def get_composite_roles_for_client(
        self,
        id: str,
        client_id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[RoleRepresentation]:
        return await self._request(
            "GET",
            "/roles-by-id/{id}/composites/clients/{client_id}",
            realm=realm,
            path_params={"id": id, "client_id": client_id},
            response_model=RoleRepresentation,
            request_config=request_config,
        )

    async def del_composite_roles(
        self,
        id: str,
        roles: list[RoleRepresentation | dict[str, Any]],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "DELETE",
            "/roles-by-id/{id}/composites",
            realm=realm,
            path_params={"id": id},
            payload=[as_model(role, RoleRepresentation) for role in roles],
            request_config=request_config,
        )
