"""
Models for browser-based interactive sessions.

These mirror the configuration and init options accepted by the
Keycloak browser adapter; the adapter itself is an external collaborator.
"""

from typing import Literal

from pydantic import BaseModel, Field


class InteractiveConfig(BaseModel):
    """Where the interactive session should authenticate."""

    model_config = {"populate_by_name": True}

    url: str | None = Field(None, description="Keycloak server URL")
    realm: str = Field(..., min_length=1)
    client_id: str = Field(..., alias="clientId", min_length=1)


class InitOptions(BaseModel):
    """Options passed to the interactive session's init sequence."""

    model_config = {"populate_by_name": True, "extra": "allow"}

    on_load: Literal["login-required", "check-sso"] | None = Field(
        None, alias="onLoad"
    )
    token: str | None = None
    refresh_token: str | None = Field(None, alias="refreshToken")
    id_token: str | None = Field(None, alias="idToken")
    time_skew: int | None = Field(None, alias="timeSkew")
    check_login_iframe: bool | None = Field(None, alias="checkLoginIframe")
    silent_check_sso_redirect_uri: str | None = Field(
        None, alias="silentCheckSsoRedirectUri"
    )
    redirect_uri: str | None = Field(None, alias="redirectUri")
    response_mode: Literal["query", "fragment"] | None = Field(
        None, alias="responseMode"
    )
    flow: Literal["standard", "implicit", "hybrid"] | None = None
    pkce_method: Literal["S256"] | None = Field(None, alias="pkceMethod")
