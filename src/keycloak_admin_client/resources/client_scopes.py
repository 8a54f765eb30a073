"""Client scopes: /admin/realms/{realm}/client-scopes"""

from typing import Any

from ..models.connection import RequestConfig
from ..models.representations import (
    ClientScopeRepresentation,
    CreatedResource,
    MappingsRepresentation,
    ProtocolMapperRepresentation,
    RoleRepresentation,
)
from .base import Resource, as_model


class ClientScopes(Resource):
    """Client scopes, realm default scopes, protocol mappers and scope mappings."""

    async def find(
        self,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[ClientScopeRepresentation]:
        return await self._request(
            "GET",
            "/client-scopes",
            realm=realm,
            response_model=ClientScopeRepresentation,
            request_config=request_config,
        )

    async def create(
        self,
        scope: ClientScopeRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> CreatedResource:
        return await self._request(
            "POST",
            "/client-scopes",
            realm=realm,
            payload=as_model(scope, ClientScopeRepresentation),
            return_id_from_location=True,
            request_config=request_config,
        )

    async def find_one(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> ClientScopeRepresentation | None:
        return await self._request(
            "GET",
            "/client-scopes/{id}",
            realm=realm,
            path_params={"id": id},
            response_model=ClientScopeRepresentation,
            catch_not_found=True,
            request_config=request_config,
        )

    async def update(
        self,
        id: str,
        scope: ClientScopeRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "PUT",
            "/client-scopes/{id}",
            realm=realm,
            path_params={"id": id},
            payload=as_model(scope, ClientScopeRepresentation),
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
            "/client-scopes/{id}",
            realm=realm,
            path_params={"id": id},
            request_config=request_config,
        )

    async def find_one_by_name(
        self,
        name: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> ClientScopeRepresentation | None:
        """The Admin API has no lookup by name; this filters the full list."""
        scopes = await self.find(realm=realm, request_config=request_config)
        for scope in scopes:
            if scope.name == name:
                return scope
        return None

    async def del_by_name(
        self,
        name: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        scope = await self.find_one_by_name(
            name, realm=realm, request_config=request_config
        )
        if scope is None or scope.id is None:
            raise ValueError(f"Client scope '{name}' not found")
        await self.delete(scope.id, realm=realm, request_config=request_config)

    # Realm default scopes

    async def list_default_client_scopes(
        self,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[ClientScopeRepresentation]:
        return await self._request(
            "GET",
            "/default-default-client-scopes",
            realm=realm,
            response_model=ClientScopeRepresentation,
            request_config=request_config,
        )

    async def add_default_client_scope(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "PUT",
            "/default-default-client-scopes/{id}",
            realm=realm,
            path_params={"id": id},
            request_config=request_config,
        )

    async def del_default_client_scope(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "DELETE",
            "/default-default-client-scopes/{id}",
            realm=realm,
            path_params={"id": id},
            request_config=request_config,
        )

    async def list_default_optional_client_scopes(
        self,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[ClientScopeRepresentation]:
        return await self._request(
            "GET",
            "/default-optional-client-scopes",
            realm=realm,
            response_model=ClientScopeRepresentation,
            request_config=request_config,
        )

    async def add_default_optional_client_scope(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "PUT",
            "/default-optional-client-scopes/{id}",
            realm=realm,
            path_params={"id": id},
            request_config=request_config,
        )

    async def del_default_optional_client_scope(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "DELETE",
            "/default-optional-client-scopes/{id}",
            realm=realm,
            path_params={"id": id},
            request_config=request_config,
        )

    # Protocol mappers

    async def add_multiple_protocol_mappers(
        self,
        id: str,
        mappers: list[ProtocolMapperRepresentation | dict[str, Any]],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "POST",
            "/client-scopes/{id}/protocol-mappers/add-models",
            realm=realm,
            path_params={"id": id},
            payload=[as_model(m, ProtocolMapperRepresentation) for m in mappers],
            request_config=request_config,
        )

    async def add_protocol_mapper(
        self,
        id: str,
        mapper: ProtocolMapperRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> CreatedResource | None:
        return await self._request(
            "POST",
            "/client-scopes/{id}/protocol-mappers/models",
            realm=realm,
            path_params={"id": id},
            payload=as_model(mapper, ProtocolMapperRepresentation),
            return_id_from_location=True,
            request_config=request_config,
        )

    async def list_protocol_mappers(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[ProtocolMapperRepresentation]:
        return await self._request(
            "GET",
            "/client-scopes/{id}/protocol-mappers/models",
            realm=realm,
            path_params={"id": id},
            response_model=ProtocolMapperRepresentation,
            request_config=request_config,
        )

    async def find_protocol_mapper(
        self,
        id: str,
        mapper_id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> ProtocolMapperRepresentation | None:
        return await self._request(
            "GET",
            "/client-scopes/{id}/protocol-mappers/models/{mapper_id}",
            realm=realm,
            path_params={"id": id, "mapper_id": mapper_id},
            response_model=ProtocolMapperRepresentation,
            catch_not_found=True,
            request_config=request_config,
        )

    async def find_protocol_mappers_by_protocol(
        self,
        id: str,
        protocol: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[ProtocolMapperRepresentation]:
        return await self._request(
            "GET",
            "/client-scopes/{id}/protocol-mappers/protocol/{protocol}",
            realm=realm,
            path_params={"id": id, "protocol": protocol},
            response_model=ProtocolMapperRepresentation,
            request_config=request_config,
        )

    async def update_protocol_mapper(
        self,
        id: str,
        mapper_id: str,
        mapper: ProtocolMapperRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "PUT",
            "/client-scopes/{id}/protocol-mappers/models/{mapper_id}",
            realm=realm,
            path_params={"id": id, "mapper_id": mapper_id},
            payload=as_model(mapper, ProtocolMapperRepresentation),
            request_config=request_config,
        )

    async def del_protocol_mapper(
        self,
        id: str,
        mapper_id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "DELETE",
            "/client-scopes/{id}/protocol-mappers/models/{mapper_id}",
            realm=realm,
            path_params={"id": id, "mapper_id": mapper_id},
            request_config=request_config,
        )

    # Scope mappings

    async def list_scope_mappings(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> MappingsRepresentation:
        return await self._request(
            "GET",
            "/client-scopes/{id}/scope-mappings",
            realm=realm,
            path_params={"id": id},
            response_model=MappingsRepresentation,
            request_config=request_config,
        )

    async def add_client_scope_mappings(
        self,
        id: str,
        client: str,
        roles: list[RoleRepresentation | dict[str, Any]],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "POST",
            "/client-scopes/{id}/scope-mappings/clients/{client}",
            realm=realm,
            path_params={"id": id, "client": client},
            payload=[as_model(role, RoleRepresentation) for role in roles],
            request_config=request_config,
        )

    async def list_client_scope_mappings(
        self,
        id: str,
        client: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[RoleRepresentation]:
        return await self._request(
            "GET",
            "/client-scopes/{id}/scope-mappings/clients/{client}",
            realm=realm,
            path_params={"id": id, "client": client},
            response_model=RoleRepresentation,
            request_config=request_config,
        )

    async def list_available_client_scope_mappings(
        self,
        id: str,
        client: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[RoleRepresentation]:
        return await self._request(
            "GET",
            "/client-scopes/{id}/scope-mappings/clients/{client}/available",
            realm=realm,
            path_params={"id": id, "client": client},
            response_model=RoleRepresentation,
            request_config=request_config,
        )

    async def list_composite_client_scope_mappings(
        self,
        id: str,
        client: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[RoleRepresentation]:
        return await self._request(
            "GET",
            "/client-scopes/{id}/scope-mappings/clients/{client}/composite",
            realm=realm,
            path_params={"id": id, "client": client},
            response_model=RoleRepresentation,
            request_config=request_config,
        )

    async def del_client_scope_mappings(
        self,
        id: str,
        client: str,
        roles: list[RoleRepresentation | dict[str, Any]],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "DELETE",
            "/client-scopes/{id}/scope-mappings/clients/{client}",
            realm=realm,
            path_params={"id": id, "client": client},
            payload=[as_model(role, RoleRepresentation) for role in roles],
            request_config=request_config,
        )

    async def add_realm_scope_mappings(
        self,
        id: str,
        roles: list[RoleRepresentation | dict[str, Any]],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "POST",
            "/client-scopes/{id}/scope-mappings/realm",
            realm=realm,
            path_params={"id": id},
            payload=[as_model(role, RoleRepresentation) for role in roles],
            request_config=request_config,
        )

    async def list_realm_scope_mappings(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[RoleRepresentation]:
        return await self._request(
            "GET",
            "/client-scopes/{id}/scope-mappings/realm",
            realm=realm,
            path_params={"id": id},
            response_model=RoleRepresentation,
            request_config=request_config,
        )

    async def list_available_realm_scope_mappings(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[RoleRepresentation]:
        return await self._request(
            "GET",
            "/client-scopes/{id}/scope-mappings/realm/available",
            realm=realm,
            path_params={"id": id},
            response_model=RoleRepresentation,
            request_config=request_config,
        )

    async def list_composite_realm_scope_mappings(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[RoleRepresentation]:
        return await self._request(
            "GET",
            "/client-scopes/{id}/scope-mappings/realm/composite",
            realm=realm,
            path_params={"id": id},
            response_model=RoleRepresentation,
            request_config=request_config,
        )

    async def del_realm_scope_mappings(
        self,
        id: str,
        roles: list[RoleRepresentation | dict[str, Any]],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "DELETE",
            "/client-scopes/{id}/scope-mappings/realm",
            realm=realm,
            path_params={"id": id},
            payload=[as_model(role, RoleRepresentation) for role in roles],
            request_config=request_config,
        )
