"""
Keycloak Admin Client - An asyncio client for the Keycloak Admin REST API.

This library provides:
- Token acquisition with password, client credentials and refresh token grants
- Session state shared by every resource accessor
- Optional interactive (browser-style) sessions with automatic token refresh
- Typed accessors for users, groups, roles, clients, realms and more
"""

from .client import KeycloakAdminClient, SessionState
from .errors import (
    ApiError,
    AuthenticationError,
    InitializationError,
    KeycloakAdminClientError,
    NotAuthenticatedError,
    TransportError,
)
from .models import (
    ClientCredentials,
    ConnectionConfig,
    PasswordCredentials,
    RefreshTokenCredentials,
    RequestConfig,
    TokenPair,
)

__version__ = "0.1.0"

__all__ = [
    "KeycloakAdminClient",
    "SessionState",
    "ConnectionConfig",
    "RequestConfig",
    "PasswordCredentials",
    "ClientCredentials",
    "RefreshTokenCredentials",
    "TokenPair",
    "KeycloakAdminClientError",
    "TransportError",
    "AuthenticationError",
    "InitializationError",
    "NotAuthenticatedError",
    "ApiError",
]
