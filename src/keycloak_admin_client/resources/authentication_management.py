"""Authentication management: /admin/realms/{realm}/authentication"""

from typing import Any

from ..models.connection import RequestConfig
from ..models.representations import (
    AuthenticationExecutionInfoRepresentation,
    AuthenticationFlowRepresentation,
    AuthenticatorConfigInfoRepresentation,
    AuthenticatorConfigRepresentation,
    CreatedResource,
    RequiredActionProviderRepresentation,
)
from .base import Resource, as_model


class AuthenticationManagement(Resource):
    """
    Authentication flows, their executions and authenticator configs, and
    required actions.

    Flows are addressed by alias in the ``/flows/{flow}/executions`` paths
    and by id everywhere else, matching the Admin API.
    """

    # Required actions

    async def get_required_actions(
        self,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[RequiredActionProviderRepresentation]:
        return await self._request(
            "GET",
            "/authentication/required-actions",
            realm=realm,
            response_model=RequiredActionProviderRepresentation,
            request_config=request_config,
        )

    async def get_required_action_for_alias(
        self,
        alias: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> RequiredActionProviderRepresentation | None:
        return await self._request(
            "GET",
            "/authentication/required-actions/{alias}",
            realm=realm,
            path_params={"alias": alias},
            response_model=RequiredActionProviderRepresentation,
            catch_not_found=True,
            request_config=request_config,
        )

    async def update_required_action(
        self,
        alias: str,
        action: RequiredActionProviderRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "PUT",
            "/authentication/required-actions/{alias}",
            realm=realm,
            path_params={"alias": alias},
            payload=as_model(action, RequiredActionProviderRepresentation),
            request_config=request_config,
        )

    async def delete_required_action(
        self,
        alias: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "DELETE",
            "/authentication/required-actions/{alias}",
            realm=realm,
            path_params={"alias": alias},
            request_config=request_config,
        )

    async def get_unregistered_required_actions(
        self,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[dict[str, str]]:
        return await self._request(
            "GET",
            "/authentication/unregistered-required-actions",
            realm=realm,
            request_config=request_config,
        )

    async def register_required_action(
        self,
        provider_id: str,
        name: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "POST",
            "/authentication/register-required-action",
            realm=realm,
            payload={"providerId": provider_id, "name": name},
            request_config=request_config,
        )

    async def raise_required_action_priority(
        self,
        alias: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "POST",
            "/authentication/required-actions/{alias}/raise-priority",
            realm=realm,
            path_params={"alias": alias},
            request_config=request_config,
        )

    async def lower_required_action_priority(
        self,
        alias: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "POST",
            "/authentication/required-actions/{alias}/lower-priority",
            realm=realm,
            path_params={"alias": alias},
            request_config=request_config,
        )

    # Flows

    async def get_flows(
        self,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[AuthenticationFlowRepresentation]:
        return await self._request(
            "GET",
            "/authentication/flows",
            realm=realm,
            response_model=AuthenticationFlowRepresentation,
            request_config=request_config,
        )

    async def get_flow(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> AuthenticationFlowRepresentation | None:
        return await self._request(
            "GET",
            "/authentication/flows/{id}",
            realm=realm,
            path_params={"id": id},
            response_model=AuthenticationFlowRepresentation,
            catch_not_found=True,
            request_config=request_config,
        )

    async def create_flow(
        self,
        flow: AuthenticationFlowRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> CreatedResource:
        return await self._request(
            "POST",
            "/authentication/flows",
            realm=realm,
            payload=as_model(flow, AuthenticationFlowRepresentation),
            return_id_from_location=True,
            request_config=request_config,
        )

    async def update_flow(
        self,
        id: str,
        flow: AuthenticationFlowRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "PUT",
            "/authentication/flows/{id}",
            realm=realm,
            path_params={"id": id},
            payload=as_model(flow, AuthenticationFlowRepresentation),
            request_config=request_config,
        )

    async def delete_flow(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "DELETE",
            "/authentication/flows/{id}",
            realm=realm,
            path_params={"id": id},
            request_config=request_config,
        )

    async def copy_flow(
        self,
        flow: str,
        new_name: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        """Copy the flow with alias ``flow`` to a new flow named ``new_name``."""
        await self._request(
            "POST",
            "/authentication/flows/{flow}/copy",
            realm=realm,
            path_params={"flow": flow},
            payload={"newName": new_name},
            request_config=request_config,
        )

    # Executions

    async def get_executions(
        self,
        flow: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[AuthenticationExecutionInfoRepresentation]:
        return await self._request(
            "GET",
            "/authentication/flows/{flow}/executions",
            realm=realm,
            path_params={"flow": flow},
            response_model=AuthenticationExecutionInfoRepresentation,
            request_config=request_config,
        )

    async def update_execution(
        self,
        flow: str,
        execution: AuthenticationExecutionInfoRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "PUT",
            "/authentication/flows/{flow}/executions",
            realm=realm,
            path_params={"flow": flow},
            payload=as_model(execution, AuthenticationExecutionInfoRepresentation),
            request_config=request_config,
        )

    async def add_execution_to_flow(
        self,
        flow: str,
        provider: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> CreatedResource | None:
        return await self._request(
            "POST",
            "/authentication/flows/{flow}/executions/execution",
            realm=realm,
            path_params={"flow": flow},
            payload={"provider": provider},
            return_id_from_location=True,
            request_config=request_config,
        )

    async def add_flow_to_flow(
        self,
        flow: str,
        alias: str,
        *,
        type: str = "basic-flow",
        provider: str = "registration-page-form",
        description: str = "",
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> CreatedResource | None:
        """Add a sub-flow named ``alias`` to the flow with alias ``flow``."""
        return await self._request(
            "POST",
            "/authentication/flows/{flow}/executions/flow",
            realm=realm,
            path_params={"flow": flow},
            payload={
                "alias": alias,
                "type": type,
                "provider": provider,
                "description": description,
            },
            return_id_from_location=True,
            request_config=request_config,
        )

    async def get_execution(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> AuthenticationExecutionInfoRepresentation | None:
        return await self._request(
            "GET",
            "/authentication/executions/{id}",
            realm=realm,
            path_params={"id": id},
            response_model=AuthenticationExecutionInfoRepresentation,
            catch_not_found=True,
            request_config=request_config,
        )

    async def del_execution(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "DELETE",
            "/authentication/executions/{id}",
            realm=realm,
            path_params={"id": id},
            request_config=request_config,
        )

    async def raise_priority_execution(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "POST",
            "/authentication/executions/{id}/raise-priority",
            realm=realm,
            path_params={"id": id},
            request_config=request_config,
        )

    async def lower_priority_execution(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "POST",
            "/authentication/executions/{id}/lower-priority",
            realm=realm,
            path_params={"id": id},
            request_config=request_config,
        )

    # Authenticator configs

    async def get_config_description(
        self,
        provider_id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> AuthenticatorConfigInfoRepresentation:
        return await self._request(
            "GET",
            "/authentication/config-description/{provider_id}",
            realm=realm,
            path_params={"provider_id": provider_id},
            response_model=AuthenticatorConfigInfoRepresentation,
            request_config=request_config,
        )

    async def create_config(
        self,
        execution_id: str,
        config: AuthenticatorConfigRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> CreatedResource:
        return await self._request(
            "POST",
            "/authentication/executions/{id}/config",
            realm=realm,
            path_params={"id": execution_id},
            payload=as_model(config, AuthenticatorConfigRepresentation),
            return_id_from_location=True,
            request_config=request_config,
        )

    async def get_config(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> AuthenticatorConfigRepresentation | None:
        return await self._request(
            "GET",
            "/authentication/config/{id}",
            realm=realm,
            path_params={"id": id},
            response_model=AuthenticatorConfigRepresentation,
            catch_not_found=True,
            request_config=request_config,
        )

    async def update_config(
        self,
        id: str,
        config: AuthenticatorConfigRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "PUT",
            "/authentication/config/{id}",
            realm=realm,
            path_params={"id": id},
            payload=as_model(config, AuthenticatorConfigRepresentation),
            request_config=request_config,
        )

    async def del_config(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "DELETE",
            "/authentication/config/{id}",
            realm=realm,
            path_params={"id": id},
            request_config=request_config,
        )
