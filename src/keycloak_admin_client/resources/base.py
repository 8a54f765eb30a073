"""
Base class for Admin API resource accessors.

An accessor turns a method call into one authenticated HTTP request. It
keeps no state of its own: the token, base URL, realm and transport
overrides are read from the owning client at call time.
"""

import logging
import weakref
from typing import TYPE_CHECKING, Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_camel

from ..constants import ADMIN_REALM_PATH, LOG_BODY_PREVIEW_LIMIT
from ..errors import ApiError, NotAuthenticatedError, TransportError
from ..models.connection import RequestConfig
from ..models.representations import CreatedResource, KeycloakModel
from ..observability.tracing import client_span, inject_trace_context

if TYPE_CHECKING:
    from ..client import KeycloakAdminClient

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def as_model(data: ModelT | dict[str, Any], model: type[ModelT]) -> ModelT:
    """Convert a dict to the given model; models pass through unchanged."""
    if isinstance(data, dict):
        return model.model_validate(data)
    return data


def camel_query(query: dict[str, Any]) -> dict[str, Any]:
    """Rename snake_case query keys to the camelCase the Admin API expects."""
    return {to_camel(key): value for key, value in query.items() if value is not None}


def _serialize(payload: Any) -> Any:
    if isinstance(payload, KeycloakModel):
        return payload.to_payload()
    if isinstance(payload, list):
        return [_serialize(item) for item in payload]
    return payload


class Resource:
    """
    Common request machinery for every accessor.

    Subclasses set ``base_path`` (formatted with ``realm``) and call
    ``_request`` with a path template relative to it.
    """

    base_path: str = ADMIN_REALM_PATH

    def __init__(self, client: "KeycloakAdminClient") -> None:
        # The client owns its accessors; holding it weakly avoids a cycle
        self._client_ref = weakref.ref(client)

    @property
    def client(self) -> "KeycloakAdminClient":
        client = self._client_ref()
        if client is None:
            raise ReferenceError("The owning KeycloakAdminClient no longer exists")
        return client

    def _build_url(
        self, path: str, realm: str, path_params: dict[str, Any] | None
    ) -> str:
        values = {
            key: quote(str(value), safe="")
            for key, value in (path_params or {}).items()
        }
        values["realm"] = quote(realm, safe="")
        template = f"{self.base_path}{path}"
        return f"{self.client.base_url.rstrip('/')}{template.format(**values)}"

    def _resolve_config(
        self, realm: str, request_config: RequestConfig | None
    ) -> RequestConfig:
        """Global overrides, then realm defaults, then method-level options."""
        config = self.client.get_request_config() or RequestConfig()
        config = config.merge(self.client.get_realm_request_config(realm))
        return config.merge(request_config)

    async def _request(
        self,
        method: str,
        path: str = "",
        *,
        realm: str | None = None,
        path_params: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        payload: Any = None,
        response_model: type[BaseModel] | None = None,
        catch_not_found: bool = False,
        return_id_from_location: bool = False,
        request_config: RequestConfig | None = None,
    ) -> Any:
        """
        Make an authenticated request to the Keycloak Admin API.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: Path template relative to base_path, e.g. "/users/{id}"
            realm: Target realm (default: the client's realm_name)
            path_params: Values substituted into the path template
            params: Query parameters; None values are dropped
            payload: JSON body (models are serialized by alias without nulls)
            response_model: Model used to validate the JSON response
            catch_not_found: Return None instead of raising on 404
            return_id_from_location: Return the id from the Location header
            request_config: Method-level transport overrides

        Returns:
            Validated model, list of models, CreatedResource, raw JSON,
            text, or None for empty bodies

        Raises:
            NotAuthenticatedError: If no access token is available
            ApiError: On non-2xx responses
            TransportError: If the request could not be sent or completed
        """
        token = await self.client.get_access_token()
        if not token:
            raise NotAuthenticatedError()

        realm_name = realm or self.client.realm_name
        url = self._build_url(path, realm_name, path_params)
        config = self._resolve_config(realm_name, request_config)

        headers = {
            key: value
            for key, value in config.headers.items()
            if key.lower() != "authorization"
        }
        headers["Authorization"] = f"Bearer {token}"
        query = {
            **config.params,
            **{key: value for key, value in (params or {}).items() if value is not None},
        }
        body = _serialize(payload)

        http_client = await self.client._get_http_client()

        attributes = {
            "http.request.method": method,
            "url.full": url,
            "keycloak.realm": realm_name,
        }
        with client_span(f"keycloak.admin {method}", attributes) as span:
            inject_trace_context(headers)
            try:
                response = await http_client.request(
                    method,
                    url,
                    headers=headers,
                    params=query or None,
                    json=body,
                    **config.request_kwargs(),
                )
            except httpx.RequestError as e:
                logger.error(f"Request failed: {method} {url} - {e}")
                raise TransportError(f"API request failed: {e}") from e

            span.set_attribute("http.response.status_code", response.status_code)

            if response.status_code == 404 and catch_not_found:
                logger.debug(f"{method} {url} returned 404, treating as not found")
                return None

            if not response.is_success:
                response_body = response.text or "<no content>"
                logger.error(
                    f"Request failed: {method} {url} - HTTP {response.status_code}",
                    extra={
                        "method": method,
                        "url": url,
                        "http_status": response.status_code,
                        "response_body": response_body[:LOG_BODY_PREVIEW_LIMIT],
                    },
                )
                raise ApiError(
                    f"API request failed: {method} {url}",
                    status_code=response.status_code,
                    response_body=response_body,
                    method=method,
                    url=url,
                )

        if return_id_from_location:
            location = response.headers.get("Location", "")
            if not location:
                logger.warning(f"{method} {url} returned no Location header")
                return None
            return CreatedResource(id=location.rstrip("/").split("/")[-1])

        return self._parse_body(response, response_model, method, url)

    @staticmethod
    def _parse_body(
        response: httpx.Response,
        response_model: type[BaseModel] | None,
        method: str,
        url: str,
    ) -> Any:
        if not response.content:
            return None

        content_type = response.headers.get("Content-Type", "")
        if "json" not in content_type:
            return response.text

        try:
            data = response.json()
        except ValueError as e:
            raise ApiError(
                f"Response from {method} {url} is not valid JSON",
                status_code=response.status_code,
                response_body=response.text,
                method=method,
                url=url,
            ) from e

        if response_model is None:
            return data
        try:
            if isinstance(data, list):
                return [response_model.model_validate(item) for item in data]
            return response_model.model_validate(data)
        except ValidationError as e:
            logger.error(
                f"Response from {method} {url} failed validation as "
                f"{response_model.__name__}: {e.error_count()} error(s)"
            )
            raise ApiError(
                f"Response from {method} {url} does not match "
                f"{response_model.__name__}",
                status_code=response.status_code,
                response_body=response.text,
                method=method,
                url=url,
            ) from e
