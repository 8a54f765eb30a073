"""Users: /admin/realms/{realm}/users"""

from typing import Any

from ..models.connection import RequestConfig
from ..models.representations import (
    CreatedResource,
    CredentialRepresentation,
    FederatedIdentityRepresentation,
    GroupRepresentation,
    MappingsRepresentation,
    RoleRepresentation,
    UserConsentRepresentation,
    UserRepresentation,
    UserSessionRepresentation,
)
from .base import Resource, as_model, camel_query


class Users(Resource):
    """User management, role mappings, groups, sessions and credentials."""

    async def find(
        self,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
        **query: Any,
    ) -> list[UserRepresentation]:
        """
        Search users.

        Keyword arguments become query parameters with camelCase names,
        e.g. ``find(username="alice", exact=True, brief_representation=True)``.
        """
        return await self._request(
            "GET",
            "/users",
            realm=realm,
            params=camel_query(query),
            response_model=UserRepresentation,
            request_config=request_config,
        )

    async def create(
        self,
        user: UserRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> CreatedResource:
        """Create a user; returns the new user's id."""
        return await self._request(
            "POST",
            "/users",
            realm=realm,
            payload=as_model(user, UserRepresentation),
            return_id_from_location=True,
            request_config=request_config,
        )

    async def find_one(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> UserRepresentation | None:
        return await self._request(
            "GET",
            "/users/{id}",
            realm=realm,
            path_params={"id": id},
            response_model=UserRepresentation,
            catch_not_found=True,
            request_config=request_config,
        )

    async def update(
        self,
        id: str,
        user: UserRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "PUT",
            "/users/{id}",
            realm=realm,
            path_params={"id": id},
            payload=as_model(user, UserRepresentation),
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
            "/users/{id}",
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
    ) -> int:
        return await self._request(
            "GET",
            "/users/count",
            realm=realm,
            params=camel_query(query),
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
            "/users/{id}/role-mappings",
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
            "/users/{id}/role-mappings/realm",
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
            "/users/{id}/role-mappings/realm",
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
            "/users/{id}/role-mappings/realm",
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
            "/users/{id}/role-mappings/realm/available",
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
            "/users/{id}/role-mappings/realm/composite",
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
            "/users/{id}/role-mappings/clients/{client_unique_id}",
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
            "/users/{id}/role-mappings/clients/{client_unique_id}",
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
            "/users/{id}/role-mappings/clients/{client_unique_id}",
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
            "/users/{id}/role-mappings/clients/{client_unique_id}/available",
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
            "/users/{id}/role-mappings/clients/{client_unique_id}/composite",
            realm=realm,
            path_params={"id": id, "client_unique_id": client_unique_id},
            response_model=RoleRepresentation,
            request_config=request_config,
        )

    # Account actions

    async def execute_actions_email(
        self,
        id: str,
        actions: list[str] | None = None,
        *,
        client_id: str | None = None,
        lifespan: int | None = None,
        redirect_uri: str | None = None,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        """Send an email asking the user to perform the given required actions."""
        await self._request(
            "PUT",
            "/users/{id}/execute-actions-email",
            realm=realm,
            path_params={"id": id},
            params={
                "client_id": client_id,
                "lifespan": lifespan,
                "redirect_uri": redirect_uri,
            },
            payload=actions or [],
            request_config=request_config,
        )

    async def send_verify_email(
        self,
        id: str,
        *,
        client_id: str | None = None,
        redirect_uri: str | None = None,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "PUT",
            "/users/{id}/send-verify-email",
            realm=realm,
            path_params={"id": id},
            params={"client_id": client_id, "redirect_uri": redirect_uri},
            request_config=request_config,
        )

    async def reset_password(
        self,
        id: str,
        credential: CredentialRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "PUT",
            "/users/{id}/reset-password",
            realm=realm,
            path_params={"id": id},
            payload=as_model(credential, CredentialRepresentation),
            request_config=request_config,
        )

    async def get_credentials(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[CredentialRepresentation]:
        return await self._request(
            "GET",
            "/users/{id}/credentials",
            realm=realm,
            path_params={"id": id},
            response_model=CredentialRepresentation,
            request_config=request_config,
        )

    async def delete_credential(
        self,
        id: str,
        credential_id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "DELETE",
            "/users/{id}/credentials/{credential_id}",
            realm=realm,
            path_params={"id": id, "credential_id": credential_id},
            request_config=request_config,
        )

    async def remove_totp(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "PUT",
            "/users/{id}/remove-totp",
            realm=realm,
            path_params={"id": id},
            request_config=request_config,
        )

    # Groups

    async def list_groups(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
        **query: Any,
    ) -> list[GroupRepresentation]:
        return await self._request(
            "GET",
            "/users/{id}/groups",
            realm=realm,
            path_params={"id": id},
            params=camel_query(query),
            response_model=GroupRepresentation,
            request_config=request_config,
        )

    async def count_groups(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
        **query: Any,
    ) -> dict[str, int]:
        return await self._request(
            "GET",
            "/users/{id}/groups/count",
            realm=realm,
            path_params={"id": id},
            params=camel_query(query),
            request_config=request_config,
        )

    async def add_to_group(
        self,
        id: str,
        group_id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "PUT",
            "/users/{id}/groups/{group_id}",
            realm=realm,
            path_params={"id": id, "group_id": group_id},
            request_config=request_config,
        )

    async def del_from_group(
        self,
        id: str,
        group_id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "DELETE",
            "/users/{id}/groups/{group_id}",
            realm=realm,
            path_params={"id": id, "group_id": group_id},
            request_config=request_config,
        )

    # Federated identities

    async def list_federated_identities(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[FederatedIdentityRepresentation]:
        return await self._request(
            "GET",
            "/users/{id}/federated-identity",
            realm=realm,
            path_params={"id": id},
            response_model=FederatedIdentityRepresentation,
            request_config=request_config,
        )

    async def add_to_federated_identity(
        self,
        id: str,
        federated_identity_id: str,
        federated_identity: FederatedIdentityRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "POST",
            "/users/{id}/federated-identity/{federated_identity_id}",
            realm=realm,
            path_params={"id": id, "federated_identity_id": federated_identity_id},
            payload=as_model(federated_identity, FederatedIdentityRepresentation),
            request_config=request_config,
        )

    async def del_from_federated_identity(
        self,
        id: str,
        federated_identity_id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "DELETE",
            "/users/{id}/federated-identity/{federated_identity_id}",
            realm=realm,
            path_params={"id": id, "federated_identity_id": federated_identity_id},
            request_config=request_config,
        )

    # Sessions and consents

    async def list_sessions(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[UserSessionRepresentation]:
        return await self._request(
            "GET",
            "/users/{id}/sessions",
            realm=realm,
            path_params={"id": id},
            response_model=UserSessionRepresentation,
            request_config=request_config,
        )

    async def list_offline_sessions(
        self,
        id: str,
        client_id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[UserSessionRepresentation]:
        return await self._request(
            "GET",
            "/users/{id}/offline-sessions/{client_id}",
            realm=realm,
            path_params={"id": id, "client_id": client_id},
            response_model=UserSessionRepresentation,
            request_config=request_config,
        )

    async def logout(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        """Remove all of the user's sessions."""
        await self._request(
            "POST",
            "/users/{id}/logout",
            realm=realm,
            path_params={"id": id},
            request_config=request_config,
        )

    async def list_consents(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[UserConsentRepresentation]:
        return await self._request(
            "GET",
            "/users/{id}/consents",
            realm=realm,
            path_params={"id": id},
            response_model=UserConsentRepresentation,
            request_config=request_config,
        )

    async def revoke_consent(
        self,
        id: str,
        client_id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "DELETE",
            "/users/{id}/consents/{client_id}",
            realm=realm,
            path_params={"id": id, "client_id": client_id},
            request_config=request_config,
        )

    async def impersonation(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> dict[str, Any]:
        return await self._request(
            "POST",
            "/users/{id}/impersonation",
            realm=realm,
            path_params={"id": id},
            request_config=request_config,
        )
