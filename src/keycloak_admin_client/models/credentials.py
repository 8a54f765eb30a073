"""
Credential models for the realm token endpoint.

Each grant type is its own model, tagged by ``grant_type``, so that
choosing the grant and checking required fields happens when the
credentials are built rather than when the request is sent.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, TypeAdapter

from ..constants import (
    DEFAULT_CLIENT_ID,
    GRANT_TYPE_CLIENT_CREDENTIALS,
    GRANT_TYPE_PASSWORD,
    GRANT_TYPE_REFRESH_TOKEN,
)


class PasswordCredentials(BaseModel):
    """Resource owner password grant."""

    model_config = {"populate_by_name": True, "frozen": True}

    grant_type: Literal["password"] = GRANT_TYPE_PASSWORD
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    client_id: str = Field(DEFAULT_CLIENT_ID, alias="clientId", min_length=1)
    client_secret: str | None = Field(None, alias="clientSecret")
    totp: str | None = Field(None, description="One-time password, if OTP is required")
    offline_token: bool = Field(
        False, alias="offlineToken", description="Request an offline refresh token"
    )


class ClientCredentials(BaseModel):
    """Client credentials grant for confidential clients with a service account."""

    model_config = {"populate_by_name": True, "frozen": True}

    grant_type: Literal["client_credentials"] = GRANT_TYPE_CLIENT_CREDENTIALS
    client_id: str = Field(..., alias="clientId", min_length=1)
    client_secret: str = Field(..., alias="clientSecret", min_length=1)


class RefreshTokenCredentials(BaseModel):
    """Refresh token grant, also used to redeem offline tokens."""

    model_config = {"populate_by_name": True, "frozen": True}

    grant_type: Literal["refresh_token"] = GRANT_TYPE_REFRESH_TOKEN
    refresh_token: str = Field(..., alias="refreshToken", min_length=1)
    client_id: str = Field(DEFAULT_CLIENT_ID, alias="clientId", min_length=1)
    client_secret: str | None = Field(None, alias="clientSecret")


Credentials = Annotated[
    PasswordCredentials | ClientCredentials | RefreshTokenCredentials,
    Field(discriminator="grant_type"),
]

_credentials_adapter: TypeAdapter[Credentials] = TypeAdapter(Credentials)


def parse_credentials(data: dict[str, Any]) -> Credentials:
    """
    Validate a plain mapping into the matching credential variant.

    Accepts both snake_case and camelCase keys. When ``grant_type`` is
    missing it defaults to the password grant.

    Raises:
        pydantic.ValidationError: If required fields are missing or empty
    """
    payload = dict(data)
    if "grantType" in payload:
        payload.setdefault("grant_type", payload.pop("grantType"))
    payload.setdefault("grant_type", GRANT_TYPE_PASSWORD)
    return _credentials_adapter.validate_python(payload)
