"""
Keycloak Admin REST API representations.

Field names are snake_case in Python and camelCase on the wire. Fields the
server sends that are not modelled here are kept (``extra="allow"``) so that
a read-modify-write cycle never drops data.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class KeycloakModel(BaseModel):
    """Base for all Admin API representations."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize for a request body: camelCase keys, no null values."""
        return self.model_dump(exclude_none=True, by_alias=True)


class CreatedResource(KeycloakModel):
    """Identifier taken from the Location header of a 201 response."""

    id: str


# Realms and events


class RealmRepresentation(KeycloakModel):
    id: str | None = None
    realm: str | None = None
    display_name: str | None = None
    enabled: bool | None = None
    ssl_required: str | None = None
    registration_allowed: bool | None = None
    login_with_email_allowed: bool | None = None
    duplicate_emails_allowed: bool | None = None
    reset_password_allowed: bool | None = None
    edit_username_allowed: bool | None = None
    brute_force_protected: bool | None = None
    access_token_lifespan: int | None = None
    sso_session_idle_timeout: int | None = None
    sso_session_max_lifespan: int | None = None
    login_theme: str | None = None
    account_theme: str | None = None
    admin_theme: str | None = None
    email_theme: str | None = None
    default_roles: list[str] | None = None
    smtp_server: dict[str, str] | None = None
    attributes: dict[str, Any] | None = None


class RealmEventsConfigRepresentation(KeycloakModel):
    events_enabled: bool | None = None
    events_expiration: int | None = None
    events_listeners: list[str] | None = None
    enabled_event_types: list[str] | None = None
    admin_events_enabled: bool | None = None
    admin_events_details_enabled: bool | None = None


class EventRepresentation(KeycloakModel):
    time: int | None = None
    type: str | None = None
    realm_id: str | None = None
    client_id: str | None = None
    user_id: str | None = None
    session_id: str | None = None
    ip_address: str | None = None
    error: str | None = None
    details: dict[str, str] | None = None


class AdminEventRepresentation(KeycloakModel):
    time: int | None = None
    realm_id: str | None = None
    auth_details: dict[str, Any] | None = None
    operation_type: str | None = None
    resource_type: str | None = None
    resource_path: str | None = None
    representation: str | None = None
    error: str | None = None


class ManagementPermissionReference(KeycloakModel):
    enabled: bool | None = None
    resource: str | None = None
    scope_permissions: dict[str, str] | None = None


class PartialImportRepresentation(KeycloakModel):
    if_resource_exists: str | None = None
    users: list[dict[str, Any]] | None = None
    clients: list[dict[str, Any]] | None = None
    groups: list[dict[str, Any]] | None = None
    identity_providers: list[dict[str, Any]] | None = None
    roles: dict[str, Any] | None = None


class PartialImportResult(KeycloakModel):
    overwritten: int | None = None
    added: int | None = None
    skipped: int | None = None
    results: list[dict[str, Any]] | None = None


# Users


class CredentialRepresentation(KeycloakModel):
    id: str | None = None
    type: str | None = None
    value: str | None = None
    temporary: bool | None = None
    user_label: str | None = None
    created_date: int | None = None


class FederatedIdentityRepresentation(KeycloakModel):
    identity_provider: str | None = None
    user_id: str | None = None
    user_name: str | None = None


class UserRepresentation(KeycloakModel):
    id: str | None = None
    username: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    enabled: bool | None = None
    email_verified: bool | None = None
    created_timestamp: int | None = None
    totp: bool | None = None
    attributes: dict[str, list[str]] | None = None
    required_actions: list[str] | None = None
    groups: list[str] | None = None
    realm_roles: list[str] | None = None
    client_roles: dict[str, list[str]] | None = None
    credentials: list[CredentialRepresentation] | None = None
    federated_identities: list[FederatedIdentityRepresentation] | None = None
    service_account_client_id: str | None = None


class UserSessionRepresentation(KeycloakModel):
    id: str | None = None
    username: str | None = None
    user_id: str | None = None
    ip_address: str | None = None
    start: int | None = None
    last_access: int | None = None
    clients: dict[str, str] | None = None


class UserConsentRepresentation(KeycloakModel):
    client_id: str | None = None
    granted_client_scopes: list[str] | None = None
    created_date: int | None = None
    last_updated_date: int | None = None


# Roles and groups


class RoleRepresentation(KeycloakModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    composite: bool | None = None
    client_role: bool | None = None
    container_id: str | None = None
    attributes: dict[str, list[str]] | None = None


class ClientMappingsRepresentation(KeycloakModel):
    id: str | None = None
    client: str | None = None
    mappings: list[RoleRepresentation] | None = None


class MappingsRepresentation(KeycloakModel):
    realm_mappings: list[RoleRepresentation] | None = None
    client_mappings: dict[str, ClientMappingsRepresentation] | None = None


class GroupRepresentation(KeycloakModel):
    id: str | None = None
    name: str | None = None
    path: str | None = None
    parent_id: str | None = None
    sub_group_count: int | None = None
    attributes: dict[str, list[str]] | None = None
    realm_roles: list[str] | None = None
    client_roles: dict[str, list[str]] | None = None
    sub_groups: list["GroupRepresentation"] | None = None


# Clients and client scopes


class ProtocolMapperRepresentation(KeycloakModel):
    id: str | None = None
    name: str | None = None
    protocol: str | None = None
    protocol_mapper: str | None = None
    consent_required: bool | None = None
    config: dict[str, str] | None = None


class ClientRepresentation(KeycloakModel):
    id: str | None = None
    client_id: str | None = None
    name: str | None = None
    description: str | None = None
    root_url: str | None = None
    base_url: str | None = None
    admin_url: str | None = None
    enabled: bool | None = None
    client_authenticator_type: str | None = None
    secret: str | None = None
    redirect_uris: list[str] | None = None
    web_origins: list[str] | None = None
    bearer_only: bool | None = None
    consent_required: bool | None = None
    standard_flow_enabled: bool | None = None
    implicit_flow_enabled: bool | None = None
    direct_access_grants_enabled: bool | None = None
    service_accounts_enabled: bool | None = None
    public_client: bool | None = None
    protocol: str | None = None
    attributes: dict[str, str] | None = None
    full_scope_allowed: bool | None = None
    default_client_scopes: list[str] | None = None
    optional_client_scopes: list[str] | None = None
    protocol_mappers: list[ProtocolMapperRepresentation] | None = None


class ClientScopeRepresentation(KeycloakModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    protocol: str | None = None
    attributes: dict[str, str] | None = None
    protocol_mappers: list[ProtocolMapperRepresentation] | None = None


class ClientSecretRepresentation(KeycloakModel):
    type: str | None = None
    value: str | None = None


class ClientInstallationRepresentation(KeycloakModel):
    """Installation provider output; the shape depends on the provider."""


class GlobalRequestResult(KeycloakModel):
    success_requests: list[str] | None = None
    failed_requests: list[str] | None = None


class ClientSessionCountRepresentation(KeycloakModel):
    count: int | None = None


# Identity providers


class IdentityProviderRepresentation(KeycloakModel):
    alias: str | None = None
    display_name: str | None = None
    internal_id: str | None = None
    provider_id: str | None = None
    enabled: bool | None = None
    trust_email: bool | None = None
    store_token: bool | None = None
    link_only: bool | None = None
    first_broker_login_flow_alias: str | None = None
    post_broker_login_flow_alias: str | None = None
    config: dict[str, Any] | None = None


class IdentityProviderMapperRepresentation(KeycloakModel):
    id: str | None = None
    name: str | None = None
    identity_provider_alias: str | None = None
    identity_provider_mapper: str | None = None
    config: dict[str, Any] | None = None


class IdentityProviderMapperTypeRepresentation(KeycloakModel):
    id: str | None = None
    name: str | None = None
    category: str | None = None
    help_text: str | None = None
    properties: list[dict[str, Any]] | None = None


# Components


class ComponentRepresentation(KeycloakModel):
    id: str | None = None
    name: str | None = None
    provider_id: str | None = None
    provider_type: str | None = None
    parent_id: str | None = None
    sub_type: str | None = None
    config: dict[str, list[str]] | None = None


class ComponentTypeRepresentation(KeycloakModel):
    id: str | None = None
    help_text: str | None = None
    properties: list[dict[str, Any]] | None = None
    metadata: dict[str, Any] | None = None


# Authentication management


class AuthenticationExecutionExportRepresentation(KeycloakModel):
    authenticator: str | None = None
    authenticator_config: str | None = None
    authenticator_flow: bool | None = None
    requirement: str | None = None
    priority: int | None = None
    flow_alias: str | None = None
    user_setup_allowed: bool | None = None


class AuthenticationFlowRepresentation(KeycloakModel):
    id: str | None = None
    alias: str | None = None
    description: str | None = None
    provider_id: str | None = None
    top_level: bool | None = None
    built_in: bool | None = None
    authentication_executions: list[AuthenticationExecutionExportRepresentation] | None = None


class AuthenticationExecutionInfoRepresentation(KeycloakModel):
    id: str | None = None
    requirement: str | None = None
    display_name: str | None = None
    alias: str | None = None
    description: str | None = None
    requirement_choices: list[str] | None = None
    configurable: bool | None = None
    authentication_flow: bool | None = None
    provider_id: str | None = None
    authentication_config: str | None = None
    flow_id: str | None = None
    level: int | None = None
    index: int | None = None
    priority: int | None = None


class AuthenticatorConfigRepresentation(KeycloakModel):
    id: str | None = None
    alias: str | None = None
    config: dict[str, str] | None = None


class AuthenticatorConfigInfoRepresentation(KeycloakModel):
    name: str | None = None
    provider_id: str | None = None
    help_text: str | None = None
    properties: list[dict[str, Any]] | None = None


class RequiredActionProviderRepresentation(KeycloakModel):
    alias: str | None = None
    name: str | None = None
    provider_id: str | None = None
    enabled: bool | None = None
    default_action: bool | None = None
    priority: int | None = None
    config: dict[str, str] | None = None


# Server and console


class ServerInfoRepresentation(KeycloakModel):
    system_info: dict[str, Any] | None = None
    memory_info: dict[str, Any] | None = None
    profile_info: dict[str, Any] | None = None
    themes: dict[str, Any] | None = None
    social_providers: list[dict[str, Any]] | None = None
    identity_providers: list[dict[str, Any]] | None = None
    client_importers: list[dict[str, Any]] | None = None
    providers: dict[str, Any] | None = None
    protocol_mapper_types: dict[str, Any] | None = None
    builtin_protocol_mappers: dict[str, Any] | None = None
    client_installations: dict[str, Any] | None = None
    component_types: dict[str, Any] | None = None
    password_policies: list[dict[str, Any]] | None = None
    enums: dict[str, Any] | None = None


class WhoAmIRepresentation(KeycloakModel):
    user_id: str | None = None
    realm: str | None = None
    display_name: str | None = None
    locale: str | None = None
    create_realm: bool | None = None
    realm_access: dict[str, list[str]] | None = None


GroupRepresentation.model_rebuild()
