"""
Connection and request configuration models.

ConnectionConfig is what a caller hands to the client at construction.
RequestConfig carries transport overrides that are layered onto every
outgoing request: global, then realm-level defaults, then method-level
options, with the later layer winning.
"""

from typing import Any

from pydantic import BaseModel, Field


def _merge_headers(base: dict[str, str], override: dict[str, str]) -> dict[str, str]:
    """Merge header dicts; keys compare case-insensitively and override wins."""
    merged = dict(base)
    for key, value in override.items():
        for existing in [k for k in merged if k.lower() == key.lower()]:
            del merged[existing]
        merged[key] = value
    return merged


class RequestConfig(BaseModel):
    """Transport overrides applied to outgoing requests."""

    model_config = {"populate_by_name": True}

    headers: dict[str, str] = Field(
        default_factory=dict, description="Extra headers sent with each request"
    )
    params: dict[str, Any] = Field(
        default_factory=dict, description="Extra query parameters sent with each request"
    )
    timeout: float | None = Field(None, description="Request timeout in seconds")
    follow_redirects: bool | None = Field(
        None, description="Whether redirects are followed"
    )
    verify: bool | None = Field(
        None, description="TLS verification (client-scoped, applied at client creation)"
    )
    proxy: str | None = Field(
        None, description="Proxy URL (client-scoped, applied at client creation)"
    )

    def merge(self, other: "RequestConfig | None") -> "RequestConfig":
        """
        Layer another config on top of this one.

        Args:
            other: Config whose values take precedence, or None

        Returns:
            New RequestConfig; neither input is modified
        """
        if other is None:
            return self.model_copy(deep=True)

        return RequestConfig(
            headers=_merge_headers(self.headers, other.headers),
            params={**self.params, **other.params},
            timeout=other.timeout if other.timeout is not None else self.timeout,
            follow_redirects=(
                other.follow_redirects
                if other.follow_redirects is not None
                else self.follow_redirects
            ),
            verify=other.verify if other.verify is not None else self.verify,
            proxy=other.proxy if other.proxy is not None else self.proxy,
        )

    def request_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for httpx.AsyncClient.request()."""
        kwargs: dict[str, Any] = {}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        if self.follow_redirects is not None:
            kwargs["follow_redirects"] = self.follow_redirects
        return kwargs


class ConnectionConfig(BaseModel):
    """Connection settings supplied at client construction or via set_config()."""

    model_config = {"populate_by_name": True}

    base_url: str | None = Field(
        None, alias="baseUrl", description="Keycloak server URL including context path"
    )
    realm_name: str | None = Field(
        None, alias="realmName", description="Realm used when a call names none"
    )
    request_config: RequestConfig | None = Field(
        None, alias="requestConfig", description="Global transport overrides"
    )
