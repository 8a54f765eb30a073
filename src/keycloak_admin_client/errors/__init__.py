"""
Error handling module for the Keycloak admin client.

This module provides the error hierarchy raised by token acquisition,
interactive session setup and every resource accessor call.
"""

from .client_errors import (
    ApiError,
    AuthenticationError,
    InitializationError,
    KeycloakAdminClientError,
    NotAuthenticatedError,
    TransportError,
)

__all__ = [
    "KeycloakAdminClientError",
    "TransportError",
    "AuthenticationError",
    "InitializationError",
    "NotAuthenticatedError",
    "ApiError",
]
