"""Clients: /admin/realms/{realm}/clients"""

from typing import Any

from ..models.connection import RequestConfig
from ..models.representations import (
    ClientRepresentation,
    ClientScopeRepresentation,
    ClientSecretRepresentation,
    ClientSessionCountRepresentation,
    CreatedResource,
    MappingsRepresentation,
    ProtocolMapperRepresentation,
    RoleRepresentation,
    UserRepresentation,
    UserSessionRepresentation,
)
from .base import Resource, as_model, camel_query


class Clients(Resource):
    """
    Client management.

    Every ``id`` below is the client's internal UUID, not its ``clientId``.
    Use ``find(client_id=...)`` to look one up.
    """

    async def find(
        self,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
        **query: Any,
    ) -> list[ClientRepresentation]:
        return await self._request(
            "GET",
            "/clients",
            realm=realm,
            params=camel_query(query),
            response_model=ClientRepresentation,
            request_config=request_config,
        )

    async def create(
        self,
        client: ClientRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> CreatedResource:
        return await self._request(
            "POST",
            "/clients",
            realm=realm,
            payload=as_model(client, ClientRepresentation),
            return_id_from_location=True,
            request_config=request_config,
        )

    async def find_one(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> ClientRepresentation | None:
        return await self._request(
            "GET",
            "/clients/{id}",
            realm=realm,
            path_params={"id": id},
            response_model=ClientRepresentation,
            catch_not_found=True,
            request_config=request_config,
        )

    async def update(
        self,
        id: str,
        client: ClientRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "PUT",
            "/clients/{id}",
            realm=realm,
            path_params={"id": id},
            payload=as_model(client, ClientRepresentation),
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
            "/clients/{id}",
            realm=realm,
            path_params={"id": id},
            request_config=request_config,
        )

    # Client roles

    async def create_role(
        self,
        id: str,
        role: RoleRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> CreatedResource:
        """Create a client role; the returned id is the role name."""
        return await self._request(
            "POST",
            "/clients/{id}/roles",
            realm=realm,
            path_params={"id": id},
            payload=as_model(role, RoleRepresentation),
            return_id_from_location=True,
            request_config=request_config,
        )

    async def list_roles(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
        **query: Any,
    ) -> list[RoleRepresentation]:
        return await self._request(
            "GET",
            "/clients/{id}/roles",
            realm=realm,
            path_params={"id": id},
            params=camel_query(query),
            response_model=RoleRepresentation,
            request_config=request_config,
        )

    async def find_role(
        self,
        id: str,
        role_name: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> RoleRepresentation | None:
        return await self._request(
            "GET",
            "/clients/{id}/roles/{role_name}",
            realm=realm,
            path_params={"id": id, "role_name": role_name},
            response_model=RoleRepresentation,
            catch_not_found=True,
            request_config=request_config,
        )

    async def update_role(
        self,
        id: str,
        role_name: str,
        role: RoleRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "PUT",
            "/clients/{id}/roles/{role_name}",
            realm=realm,
            path_params={"id": id, "role_name": role_name},
            payload=as_model(role, RoleRepresentation),
            request_config=request_config,
        )

    async def del_role(
        self,
        id: str,
        role_name: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "DELETE",
            "/clients/{id}/roles/{role_name}",
            realm=realm,
            path_params={"id": id, "role_name": role_name},
            request_config=request_config,
        )

    async def find_users_with_role(
        self,
        id: str,
        role_name: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
        **query: Any,
    ) -> list[UserRepresentation]:
        return await self._request(
            "GET",
            "/clients/{id}/roles/{role_name}/users",
            realm=realm,
            path_params={"id": id, "role_name": role_name},
            params=camel_query(query),
            response_model=UserRepresentation,
            request_config=request_config,
        )

    # Service account and secrets

    async def get_service_account_user(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> UserRepresentation:
        return await self._request(
            "GET",
            "/clients/{id}/service-account-user",
            realm=realm,
            path_params={"id": id},
            response_model=UserRepresentation,
            request_config=request_config,
        )

    async def generate_new_client_secret(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> ClientSecretRepresentation:
        return await self._request(
            "POST",
            "/clients/{id}/client-secret",
            realm=realm,
            path_params={"id": id},
            response_model=ClientSecretRepresentation,
            request_config=request_config,
        )

    async def get_client_secret(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> ClientSecretRepresentation:
        return await self._request(
            "GET",
            "/clients/{id}/client-secret",
            realm=realm,
            path_params={"id": id},
            response_model=ClientSecretRepresentation,
            request_config=request_config,
        )

    async def generate_registration_access_token(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> ClientRepresentation:
        return await self._request(
            "POST",
            "/clients/{id}/registration-access-token",
            realm=realm,
            path_params={"id": id},
            response_model=ClientRepresentation,
            request_config=request_config,
        )

    async def get_installation_providers(
        self,
        id: str,
        provider_id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> Any:
        """Installation file for the given provider (JSON or text, depending on provider)."""
        return await self._request(
            "GET",
            "/clients/{id}/installation/providers/{provider_id}",
            realm=realm,
            path_params={"id": id, "provider_id": provider_id},
            request_config=request_config,
        )

    # Client scopes

    async def list_default_client_scopes(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[ClientScopeRepresentation]:
        return await self._request(
            "GET",
            "/clients/{id}/default-client-scopes",
            realm=realm,
            path_params={"id": id},
            response_model=ClientScopeRepresentation,
            request_config=request_config,
        )

    async def add_default_client_scope(
        self,
        id: str,
        client_scope_id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "PUT",
            "/clients/{id}/default-client-scopes/{client_scope_id}",
            realm=realm,
            path_params={"id": id, "client_scope_id": client_scope_id},
            request_config=request_config,
        )

    async def del_default_client_scope(
        self,
        id: str,
        client_scope_id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "DELETE",
            "/clients/{id}/default-client-scopes/{client_scope_id}",
            realm=realm,
            path_params={"id": id, "client_scope_id": client_scope_id},
            request_config=request_config,
        )

    async def list_optional_client_scopes(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[ClientScopeRepresentation]:
        return await self._request(
            "GET",
            "/clients/{id}/optional-client-scopes",
            realm=realm,
            path_params={"id": id},
            response_model=ClientScopeRepresentation,
            request_config=request_config,
        )

    async def add_optional_client_scope(
        self,
        id: str,
        client_scope_id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "PUT",
            "/clients/{id}/optional-client-scopes/{client_scope_id}",
            realm=realm,
            path_params={"id": id, "client_scope_id": client_scope_id},
            request_config=request_config,
        )

    async def del_optional_client_scope(
        self,
        id: str,
        client_scope_id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "DELETE",
            "/clients/{id}/optional-client-scopes/{client_scope_id}",
            realm=realm,
            path_params={"id": id, "client_scope_id": client_scope_id},
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
            "/clients/{id}/scope-mappings",
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
            "/clients/{id}/scope-mappings/clients/{client}",
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
            "/clients/{id}/scope-mappings/clients/{client}",
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
            "/clients/{id}/scope-mappings/clients/{client}/available",
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
            "/clients/{id}/scope-mappings/clients/{client}/composite",
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
            "/clients/{id}/scope-mappings/clients/{client}",
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
            "/clients/{id}/scope-mappings/realm",
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
            "/clients/{id}/scope-mappings/realm",
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
            "/clients/{id}/scope-mappings/realm/available",
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
            "/clients/{id}/scope-mappings/realm/composite",
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
            "/clients/{id}/scope-mappings/realm",
            realm=realm,
            path_params={"id": id},
            payload=[as_model(role, RoleRepresentation) for role in roles],
            request_config=request_config,
        )

    # Sessions

    async def list_sessions(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
        **query: Any,
    ) -> list[UserSessionRepresentation]:
        return await self._request(
            "GET",
            "/clients/{id}/user-sessions",
            realm=realm,
            path_params={"id": id},
            params=camel_query(query),
            response_model=UserSessionRepresentation,
            request_config=request_config,
        )

    async def list_offline_sessions(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
        **query: Any,
    ) -> list[UserSessionRepresentation]:
        return await self._request(
            "GET",
            "/clients/{id}/offline-sessions",
            realm=realm,
            path_params={"id": id},
            params=camel_query(query),
            response_model=UserSessionRepresentation,
            request_config=request_config,
        )

    async def get_session_count(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> ClientSessionCountRepresentation:
        return await self._request(
            "GET",
            "/clients/{id}/session-count",
            realm=realm,
            path_params={"id": id},
            response_model=ClientSessionCountRepresentation,
            request_config=request_config,
        )

    async def get_offline_session_count(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> ClientSessionCountRepresentation:
        return await self._request(
            "GET",
            "/clients/{id}/offline-session-count",
            realm=realm,
            path_params={"id": id},
            response_model=ClientSessionCountRepresentation,
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
            "/clients/{id}/protocol-mappers/add-models",
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
            "/clients/{id}/protocol-mappers/models",
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
            "/clients/{id}/protocol-mappers/models",
            realm=realm,
            path_params={"id": id},
            response_model=ProtocolMapperRepresentation,
            request_config=request_config,
        )

    async def find_protocol_mapper_by_id(
        self,
        id: str,
        mapper_id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> ProtocolMapperRepresentation | None:
        return await self._request(
            "GET",
            "/clients/{id}/protocol-mappers/models/{mapper_id}",
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
            "/clients/{id}/protocol-mappers/protocol/{protocol}",
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
            "/clients/{id}/protocol-mappers/models/{mapper_id}",
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
            "/clients/{id}/protocol-mappers/models/{mapper_id}",
            realm=realm,
            path_params={"id": id, "mapper_id": mapper_id},
            request_config=request_config,
        )
