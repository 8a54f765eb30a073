"""
Resource accessors for the Keycloak Admin API.

Each accessor maps method calls to one authenticated HTTP request against
a fixed path template; all session state lives on the owning client.
"""

from .authentication_management import AuthenticationManagement
from .base import Resource
from .client_scopes import ClientScopes
from .clients import Clients
from .components import Components
from .groups import Groups
from .identity_providers import IdentityProviders
from .realms import Realms
from .roles import Roles
from .server_info import ServerInfo
from .users import Users
from .who_am_i import WhoAmI

__all__ = [
    "Resource",
    "Users",
    "Groups",
    "Roles",
    "Clients",
    "Realms",
    "ClientScopes",
    "IdentityProviders",
    "Components",
    "AuthenticationManagement",
    "ServerInfo",
    "WhoAmI",
]
