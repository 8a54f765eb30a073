"""
Keycloak Admin API client.

This module provides the single object callers instantiate. It owns the
session state (base URL, realm, tokens, interactive session, transport
overrides), performs authentication, and exposes one accessor per Admin
API resource family.

The client handles:
- Credential exchange at the realm token endpoint
- Browser-based interactive sessions through an adapter
- Token resolution for every accessor call
- Layered request configuration (global, per realm, per call)

Example:
    async with KeycloakAdminClient({"baseUrl": "https://sso.example.com"}) as kc:
        await kc.auth(PasswordCredentials(username="admin", password="admin"))
        users = await kc.users.find(realm="demo")
"""

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx
from pydantic import ValidationError

from .auth.interactive import InteractiveAuthAdapter, InteractiveSessionFactory
from .auth.token import get_token
from .constants import (
    DEFAULT_BASE_URL,
    DEFAULT_REALM,
    DEFAULT_TIMEOUT_SECONDS,
    TOKEN_MIN_VALIDITY_SECONDS,
)
from .errors import InitializationError
from .models.connection import ConnectionConfig, RequestConfig
from .models.credentials import Credentials, parse_credentials
from .models.interactive import InitOptions, InteractiveConfig
from .models.token import TokenPair
from .observability.logging import setup_structured_logging
from .resources import (
    AuthenticationManagement,
    Clients,
    ClientScopes,
    Components,
    Groups,
    IdentityProviders,
    Realms,
    Roles,
    ServerInfo,
    Users,
    WhoAmI,
)
from .settings import ClientSettings

logger = logging.getLogger(__name__)


@dataclass
class SessionState:
    """Mutable connection state; owned by exactly one KeycloakAdminClient."""

    base_url: str = DEFAULT_BASE_URL
    realm_name: str = DEFAULT_REALM
    access_token: str | None = None
    refresh_token: str | None = None
    interactive: InteractiveAuthAdapter | None = None
    request_config: RequestConfig | None = None
    realm_request_configs: dict[str, RequestConfig] = field(default_factory=dict)


class KeycloakAdminClient:
    """
    High-level client for Keycloak Admin API operations.

    Accessors (``users``, ``groups``, ``roles``, ``clients``, ``realms``,
    ``client_scopes``, ``identity_providers``, ``components``,
    ``authentication_management``, ``server_info``, ``who_am_i``) read the
    token, base URL and realm from this object on every call and never
    cache them.

    No locking is done: concurrent auth() calls race and the last one to
    finish wins. Callers that need ordering must serialize themselves.
    """

    def __init__(
        self,
        connection_config: ConnectionConfig | dict[str, Any] | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        session_factory: InteractiveSessionFactory | None = None,
    ) -> None:
        """
        Initialize Keycloak Admin client.

        Args:
            connection_config: Base URL, realm name and global request overrides
            http_client: Pre-built httpx client to send requests with
                (the caller keeps ownership and closes it)
            session_factory: Builds the interactive session used by init()
        """
        if isinstance(connection_config, dict):
            connection_config = ConnectionConfig.model_validate(connection_config)
        config = connection_config or ConnectionConfig()

        self._state = SessionState(
            base_url=config.base_url or DEFAULT_BASE_URL,
            realm_name=config.realm_name or DEFAULT_REALM,
            request_config=config.request_config,
        )
        self._http_client = http_client
        self._owns_http_client = http_client is None
        self._session_factory = session_factory

        # Resources
        self.users = Users(self)
        self.groups = Groups(self)
        self.roles = Roles(self)
        self.clients = Clients(self)
        self.realms = Realms(self)
        self.client_scopes = ClientScopes(self)
        self.identity_providers = IdentityProviders(self)
        self.components = Components(self)
        self.authentication_management = AuthenticationManagement(self)
        self.server_info = ServerInfo(self)
        self.who_am_i = WhoAmI(self)

        logger.info(f"Initialized Keycloak Admin client for {self._state.base_url}")

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings | None = None,
        *,
        configure_logging: bool = False,
        **kwargs: Any,
    ) -> "KeycloakAdminClient":
        """
        Build a client from ClientSettings (read from the environment if omitted).

        Args:
            settings: Settings to use; loaded from the environment when None
            configure_logging: Also install root logging from log_level and json_logs
            **kwargs: Passed through to the constructor
        """
        settings = settings or ClientSettings()
        if configure_logging:
            setup_structured_logging(
                log_level=settings.log_level,
                enable_json_formatting=settings.json_logs,
            )
        request_config = RequestConfig(
            timeout=settings.timeout, verify=settings.verify_ssl
        )
        return cls(
            ConnectionConfig(
                base_url=settings.base_url,
                realm_name=settings.realm_name,
                request_config=request_config,
            ),
            **kwargs,
        )

    # Session state

    @property
    def base_url(self) -> str:
        return self._state.base_url

    @property
    def realm_name(self) -> str:
        return self._state.realm_name

    @property
    def access_token(self) -> str | None:
        return self._state.access_token

    @property
    def refresh_token(self) -> str | None:
        return self._state.refresh_token

    @property
    def interactive(self) -> InteractiveAuthAdapter | None:
        return self._state.interactive

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Get or create the httpx client (lazy initialization)."""
        if self._http_client is not None and not self._http_client.is_closed:
            return self._http_client

        config = self._state.request_config or RequestConfig()
        self._http_client = httpx.AsyncClient(
            verify=config.verify if config.verify is not None else True,
            proxy=config.proxy,
            timeout=httpx.Timeout(
                config.timeout if config.timeout is not None else DEFAULT_TIMEOUT_SECONDS
            ),
            follow_redirects=False,
        )
        self._owns_http_client = True
        logger.debug(f"Created httpx client for {self._state.base_url}")
        return self._http_client

    async def close(self) -> None:
        """Close the httpx client if this object created it."""
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> "KeycloakAdminClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    # Authentication

    async def auth(self, credentials: Credentials | dict[str, Any]) -> TokenPair:
        """
        Exchange credentials for tokens and store them.

        Both tokens are replaced together, and only on success; a failed
        exchange leaves the previous tokens in place.

        Args:
            credentials: Credential model or a mapping validated into one

        Returns:
            The full token response

        Raises:
            pydantic.ValidationError: If a credential mapping is invalid
            AuthenticationError: If the token endpoint rejects the request
            TransportError: If the token endpoint cannot be reached
        """
        if isinstance(credentials, dict):
            credentials = parse_credentials(credentials)

        http_client = await self._get_http_client()
        token_pair = await get_token(
            http_client,
            base_url=self._state.base_url,
            realm_name=self._state.realm_name,
            credentials=credentials,
            request_config=self._state.request_config,
        )

        self._state.access_token = token_pair.access_token
        self._state.refresh_token = token_pair.refresh_token

        logger.info(
            f"Authenticated against realm '{self._state.realm_name}' "
            f"using {credentials.grant_type} grant"
        )
        return token_pair

    async def init(
        self,
        init_options: InitOptions | dict[str, Any] | None = None,
        config: InteractiveConfig | dict[str, Any] | None = None,
        *,
        session_factory: InteractiveSessionFactory | None = None,
    ) -> None:
        """
        Start a browser-based interactive session.

        After this succeeds the session owns token refresh, and base_url is
        replaced by the server URL the session reports.

        Args:
            init_options: Options for the session's init sequence
            config: Server URL, realm and client id for the session
            session_factory: Overrides the factory given at construction

        Raises:
            InitializationError: If the session cannot be built or initialized
        """
        factory = session_factory or self._session_factory
        if factory is None:
            raise InitializationError(
                "No interactive session factory configured; pass session_factory"
            )

        try:
            if isinstance(config, dict):
                config = InteractiveConfig.model_validate(config)
            if init_options is None:
                init_options = InitOptions()
            elif isinstance(init_options, dict):
                init_options = InitOptions.model_validate(init_options)
        except ValidationError as e:
            raise InitializationError(f"Invalid interactive session config: {e}") from e

        try:
            session = factory(config)
        except Exception as e:
            logger.error(f"Failed to create interactive session: {e}")
            raise InitializationError(f"Failed to create interactive session: {e}") from e

        adapter = InteractiveAuthAdapter(session)
        await adapter.init(init_options)

        self._state.interactive = adapter
        self._state.base_url = adapter.auth_server_url or self._state.base_url
        logger.info(f"Interactive session initialized against {self._state.base_url}")

    def set_access_token(self, token: str) -> None:
        """Store an externally obtained access token as-is."""
        self._state.access_token = token

    async def get_access_token(self) -> str | None:
        """
        Resolve the token to present on the next request.

        Without an interactive session this returns the stored access token
        (possibly None) and does nothing else. With one, the session token
        is refreshed if it is about to expire; if refreshing fails, login is
        triggered in the background and the session's current token, which
        may be stale or None, is returned. This method never raises for a
        refresh failure.
        """
        adapter = self._state.interactive
        if adapter is None:
            return self._state.access_token

        try:
            await adapter.refresh_if_needed(TOKEN_MIN_VALIDITY_SECONDS)
        except Exception as e:
            logger.warning(f"Interactive token refresh failed, triggering login: {e}")
            self.trigger_login()
        return adapter.current_token

    def trigger_login(self, options: dict[str, Any] | None = None) -> None:
        """
        Start the interactive login flow without waiting for it.

        Raises:
            InitializationError: If init() has not completed
        """
        adapter = self._state.interactive
        if adapter is None:
            raise InitializationError("No interactive session; call init() first")
        adapter.trigger_login(options)

    # Configuration

    def get_request_config(self) -> RequestConfig | None:
        """Return a copy of the global request overrides."""
        if self._state.request_config is None:
            return None
        return self._state.request_config.model_copy(deep=True)

    def set_config(self, connection_config: ConnectionConfig | dict[str, Any]) -> None:
        """
        Update base_url and/or realm_name.

        Only non-empty string values are applied; anything else leaves the
        current value in place.
        """
        if isinstance(connection_config, ConnectionConfig):
            base_url = connection_config.base_url
            realm_name = connection_config.realm_name
        else:
            base_url = connection_config.get("base_url", connection_config.get("baseUrl"))
            realm_name = connection_config.get(
                "realm_name", connection_config.get("realmName")
            )

        if isinstance(base_url, str) and base_url:
            self._state.base_url = base_url

        if isinstance(realm_name, str) and realm_name:
            self._state.realm_name = realm_name

    def set_realm_request_config(
        self, realm: str, request_config: RequestConfig | dict[str, Any] | None
    ) -> None:
        """Set (or with None, clear) default overrides for calls into one realm."""
        if request_config is None:
            self._state.realm_request_configs.pop(realm, None)
            return
        if isinstance(request_config, dict):
            request_config = RequestConfig.model_validate(request_config)
        self._state.realm_request_configs[realm] = request_config

    def get_realm_request_config(self, realm: str) -> RequestConfig | None:
        config = self._state.realm_request_configs.get(realm)
        return config.model_copy(deep=True) if config is not None else None
