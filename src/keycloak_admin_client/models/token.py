"""Token endpoint response model."""

from pydantic import BaseModel, Field


class TokenPair(BaseModel):
    """
    Tokens returned by the realm token endpoint.

    Only ``access_token`` is guaranteed; the client credentials grant
    usually comes back without a refresh token.
    """

    model_config = {"populate_by_name": True, "extra": "allow"}

    access_token: str = Field(..., min_length=1)
    refresh_token: str | None = None
    expires_in: int | None = None
    refresh_expires_in: int | None = None
    token_type: str | None = None
    id_token: str | None = None
    not_before_policy: int | None = Field(None, alias="not-before-policy")
    session_state: str | None = None
    scope: str | None = None
