"""Client settings using pydantic-settings.

The client never reads the environment on its own. Applications that want
environment-driven configuration call ``load_settings()`` (or
``KeycloakAdminClient.from_settings()``) explicitly.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_BASE_URL, DEFAULT_REALM


class ClientSettings(BaseSettings):
    """Admin client configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        validation_alias="KEYCLOAK_ADMIN_BASE_URL",
        description="Keycloak server URL including context path",
    )
    realm_name: str = Field(
        default=DEFAULT_REALM,
        validation_alias="KEYCLOAK_ADMIN_REALM_NAME",
        description="Realm used for authentication and as the default target realm",
    )
    timeout: float | None = Field(
        default=None,
        validation_alias="KEYCLOAK_ADMIN_TIMEOUT",
        description="Request timeout in seconds (None keeps the httpx default)",
    )
    verify_ssl: bool = Field(
        default=True,
        validation_alias="KEYCLOAK_ADMIN_VERIFY_SSL",
        description="Verify TLS certificates",
    )

    # Logging configuration
    log_level: str = Field(
        default="INFO",
        validation_alias="KEYCLOAK_ADMIN_LOG_LEVEL",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    json_logs: bool = Field(
        default=False,
        validation_alias="KEYCLOAK_ADMIN_JSON_LOGS",
        description="Enable JSON formatted logging",
    )


def load_settings() -> ClientSettings:
    """Read settings from the environment and an optional .env file."""
    return ClientSettings()
