"""
Models package - Pydantic models for type-safe request and response handling.

Defines data models for:
- Connection and request configuration
- Token endpoint credentials and responses
- Interactive session configuration
- Keycloak Admin API representations
"""

from .connection import ConnectionConfig, RequestConfig
from .credentials import (
    ClientCredentials,
    Credentials,
    PasswordCredentials,
    RefreshTokenCredentials,
    parse_credentials,
)
from .interactive import InitOptions, InteractiveConfig
from .token import TokenPair

__all__ = [
    "ConnectionConfig",
    "RequestConfig",
    "Credentials",
    "PasswordCredentials",
    "ClientCredentials",
    "RefreshTokenCredentials",
    "parse_credentials",
    "InitOptions",
    "InteractiveConfig",
    "TokenPair",
]
