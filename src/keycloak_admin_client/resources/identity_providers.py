"""Identity providers: /admin/realms/{realm}/identity-provider"""

from typing import Any

from ..models.connection import RequestConfig
from ..models.representations import (
    CreatedResource,
    IdentityProviderMapperRepresentation,
    IdentityProviderMapperTypeRepresentation,
    IdentityProviderRepresentation,
)
from .base import Resource, as_model


class IdentityProviders(Resource):
    """Brokered identity providers, addressed by alias, and their mappers."""

    async def find(
        self,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[IdentityProviderRepresentation]:
        return await self._request(
            "GET",
            "/identity-provider/instances",
            realm=realm,
            response_model=IdentityProviderRepresentation,
            request_config=request_config,
        )

    async def create(
        self,
        provider: IdentityProviderRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> CreatedResource:
        """Create an identity provider; the returned id is its alias."""
        return await self._request(
            "POST",
            "/identity-provider/instances",
            realm=realm,
            payload=as_model(provider, IdentityProviderRepresentation),
            return_id_from_location=True,
            request_config=request_config,
        )

    async def find_one(
        self,
        alias: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> IdentityProviderRepresentation | None:
        return await self._request(
            "GET",
            "/identity-provider/instances/{alias}",
            realm=realm,
            path_params={"alias": alias},
            response_model=IdentityProviderRepresentation,
            catch_not_found=True,
            request_config=request_config,
        )

    async def update(
        self,
        alias: str,
        provider: IdentityProviderRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "PUT",
            "/identity-provider/instances/{alias}",
            realm=realm,
            path_params={"alias": alias},
            payload=as_model(provider, IdentityProviderRepresentation),
            request_config=request_config,
        )

    async def delete(
        self,
        alias: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "DELETE",
            "/identity-provider/instances/{alias}",
            realm=realm,
            path_params={"alias": alias},
            request_config=request_config,
        )

    async def find_mappers(
        self,
        alias: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> list[IdentityProviderMapperRepresentation]:
        return await self._request(
            "GET",
            "/identity-provider/instances/{alias}/mappers",
            realm=realm,
            path_params={"alias": alias},
            response_model=IdentityProviderMapperRepresentation,
            request_config=request_config,
        )

    async def find_one_mapper(
        self,
        alias: str,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> IdentityProviderMapperRepresentation | None:
        return await self._request(
            "GET",
            "/identity-provider/instances/{alias}/mappers/{id}",
            realm=realm,
            path_params={"alias": alias, "id": id},
            response_model=IdentityProviderMapperRepresentation,
            catch_not_found=True,
            request_config=request_config,
        )

    async def create_mapper(
        self,
        alias: str,
        mapper: IdentityProviderMapperRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> CreatedResource:
        return await self._request(
            "POST",
            "/identity-provider/instances/{alias}/mappers",
            realm=realm,
            path_params={"alias": alias},
            payload=as_model(mapper, IdentityProviderMapperRepresentation),
            return_id_from_location=True,
            request_config=request_config,
        )

    async def update_mapper(
        self,
        alias: str,
        id: str,
        mapper: IdentityProviderMapperRepresentation | dict[str, Any],
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "PUT",
            "/identity-provider/instances/{alias}/mappers/{id}",
            realm=realm,
            path_params={"alias": alias, "id": id},
            payload=as_model(mapper, IdentityProviderMapperRepresentation),
            request_config=request_config,
        )

    async def del_mapper(
        self,
        alias: str,
        id: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> None:
        await self._request(
            "DELETE",
            "/identity-provider/instances/{alias}/mappers/{id}",
            realm=realm,
            path_params={"alias": alias, "id": id},
            request_config=request_config,
        )

    async def find_mapper_types(
        self,
        alias: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> dict[str, IdentityProviderMapperTypeRepresentation]:
        raw = await self._request(
            "GET",
            "/identity-provider/instances/{alias}/mapper-types",
            realm=realm,
            path_params={"alias": alias},
            request_config=request_config,
        )
        return {
            key: IdentityProviderMapperTypeRepresentation.model_validate(value)
            for key, value in (raw or {}).items()
        }

    async def import_from_url(
        self,
        provider_id: str,
        from_url: str,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> dict[str, Any]:
        """Fetch a provider's metadata (e.g. an OIDC discovery document) into IdP config."""
        return await self._request(
            "POST",
            "/identity-provider/import-config",
            realm=realm,
            payload={"providerId": provider_id, "fromUrl": from_url},
            request_config=request_config,
        )
