"""
Token acquisition against the realm OpenID Connect token endpoint.

Exchanges credentials for an access/refresh token pair. This module does
not touch any shared state; storing the tokens is the caller's job.
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from ..constants import (
    FORM_CONTENT_TYPE,
    LOG_BODY_PREVIEW_LIMIT,
    OFFLINE_ACCESS_SCOPE,
    TOKEN_ENDPOINT_TEMPLATE,
)
from ..errors import AuthenticationError, TransportError
from ..models.connection import RequestConfig
from ..models.credentials import (
    ClientCredentials,
    Credentials,
    PasswordCredentials,
    RefreshTokenCredentials,
)
from ..models.token import TokenPair
from ..observability.tracing import client_span

logger = logging.getLogger(__name__)


def token_endpoint(base_url: str, realm_name: str) -> str:
    """Build the realm-scoped token endpoint URL."""
    return TOKEN_ENDPOINT_TEMPLATE.format(
        base_url=base_url.rstrip("/"), realm=realm_name
    )


def build_token_request(
    credentials: Credentials,
) -> tuple[dict[str, str], httpx.BasicAuth | None]:
    """
    Build the form body and client authentication for a credential variant.

    Args:
        credentials: Active credential variant

    Returns:
        Tuple of (form fields, HTTP Basic auth for confidential clients or None)
    """
    if isinstance(credentials, PasswordCredentials):
        form = {
            "grant_type": credentials.grant_type,
            "username": credentials.username,
            "password": credentials.password,
            "client_id": credentials.client_id,
        }
        if credentials.totp:
            form["totp"] = credentials.totp
        if credentials.offline_token:
            form["scope"] = OFFLINE_ACCESS_SCOPE
    elif isinstance(credentials, ClientCredentials):
        form = {
            "grant_type": credentials.grant_type,
            "client_id": credentials.client_id,
        }
    elif isinstance(credentials, RefreshTokenCredentials):
        form = {
            "grant_type": credentials.grant_type,
            "refresh_token": credentials.refresh_token,
            "client_id": credentials.client_id,
        }
    else:
        raise TypeError(f"Unsupported credentials type: {type(credentials).__name__}")

    auth = None
    if credentials.client_secret:
        auth = httpx.BasicAuth(credentials.client_id, credentials.client_secret)

    return form, auth


def _form_headers(request_config: RequestConfig | None) -> dict[str, str]:
    """Override headers with the form content type forced on top."""
    headers = {
        key: value
        for key, value in (request_config.headers if request_config else {}).items()
        if key.lower() != "content-type"
    }
    headers["Content-Type"] = FORM_CONTENT_TYPE
    return headers


def _parse_token_response(response: httpx.Response) -> TokenPair:
    try:
        token_data: Any = response.json()
    except ValueError as e:
        raise AuthenticationError(
            "Token endpoint returned a body that is not JSON",
            status_code=response.status_code,
            response_body=response.text,
        ) from e

    if not isinstance(token_data, dict):
        raise AuthenticationError(
            "Token endpoint returned JSON that is not an object",
            status_code=response.status_code,
            response_body=response.text,
        )

    try:
        return TokenPair.model_validate(token_data)
    except ValidationError as e:
        raise AuthenticationError(
            f"Token endpoint response is missing required fields: {e.error_count()} error(s)",
            status_code=response.status_code,
            response_body=response.text,
        ) from e


async def get_token(
    http_client: httpx.AsyncClient,
    base_url: str,
    realm_name: str,
    credentials: Credentials,
    request_config: RequestConfig | None = None,
) -> TokenPair:
    """
    Exchange credentials for tokens at the realm token endpoint.

    Args:
        http_client: Client used to send the request
        base_url: Keycloak server URL including context path
        realm_name: Realm that issues the token
        credentials: Credential variant selecting the grant type
        request_config: Transport overrides (headers, params, timeout)

    Returns:
        TokenPair parsed from the response

    Raises:
        AuthenticationError: On non-2xx responses or malformed bodies
        TransportError: If the request could not be sent or completed
    """
    url = token_endpoint(base_url, realm_name)
    form, auth = build_token_request(credentials)
    config = request_config or RequestConfig()

    request_kwargs: dict[str, Any] = config.request_kwargs()
    if auth is not None:
        request_kwargs["auth"] = auth

    attributes = {
        "http.request.method": "POST",
        "url.full": url,
        "keycloak.realm": realm_name,
        "keycloak.grant_type": credentials.grant_type,
    }

    with client_span("keycloak.token", attributes) as span:
        try:
            response = await http_client.post(
                url,
                data=form,
                headers=_form_headers(config),
                params=config.params or None,
                **request_kwargs,
            )
        except httpx.RequestError as e:
            logger.error(f"Token request to {url} failed: {e}")
            raise TransportError(f"Token request failed: {e}") from e

        span.set_attribute("http.response.status_code", response.status_code)

        if not response.is_success:
            body = response.text
            logger.error(
                f"Authentication failed for realm '{realm_name}' "
                f"({credentials.grant_type} grant): HTTP {response.status_code}",
                extra={
                    "realm_name": realm_name,
                    "grant_type": credentials.grant_type,
                    "http_status": response.status_code,
                    "response_body": body[:LOG_BODY_PREVIEW_LIMIT],
                },
            )
            raise AuthenticationError(
                "Authentication failed",
                status_code=response.status_code,
                response_body=body,
            )

        token_pair = _parse_token_response(response)

    logger.debug(
        f"Obtained {credentials.grant_type} token for realm '{realm_name}'"
    )
    return token_pair
