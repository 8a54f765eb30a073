"""Components: /admin/realms/{realm}/components"""

from typing import Any

from ..models.connection import RequestConfig
from ..models.representations import (
    ComponentRepresentation,
    ComponentTypeRepresentation,
    CreatedResource,
)
from .base import Resource, as_model, camel_query


class Components(Resource):
    """Realm components such as user federation providers and key providers."""

    async def find(
        self,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
        **query: Any,
    ) -> list[ComponentRepresentation]:
        """List components, optionally filtered by ``name``, ``parent`` or ``type``."""
        return await self._request(
            "GET",
            "/components",
            realm=realm,
            params=camel_query(query),
            response_model=ComponentRepresentation,
            request_config=request_config,
        )

    async def create(
        self,
        component: ComponentRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> CreatedResource:
        return await self._request(
            "POST",
            "/components",
            realm=realm,
            payload=as_model(component, ComponentRepresentation),
            return_id_from_location=True,
            request_config=request_config,
        )

    async def find_one(
        self,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> ComponentRepresentation | None:
        return await self._request(
            "GET",
            "/components/{id}",
            realm=realm,
            path_params={"id": id},
            response_model=ComponentRepresentation,
            catch_not_found=True,
            request_config=request_config,
        )

    async def update(
        self,
        id: str,
        component: ComponentRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "PUT",
            "/components/{id}",
            realm=realm,
            path_params={"id": id},
            payload=as_model(component, ComponentRepresentation),
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
            "/components/{id}",
            realm=realm,
            path_params={"id": id},
            request_config=request_config,
        )

    async def list_sub_components(
        self,
        id: str,
        type: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[ComponentTypeRepresentation]:
        return await self._request(
            "GET",
            "/components/{id}/sub-component-types",
            realm=realm,
            path_params={"id": id},
            params={"type": type},
            response_model=ComponentTypeRepresentation,
            request_config=request_config,
        )
