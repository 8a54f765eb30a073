"""Unit tests for KeycloakAdminClient session state and token resolution."""

from unittest.mock import patch

import httpx
import pytest
from pydantic import ValidationError

from keycloak_admin_client import (
    AuthenticationError,
    ConnectionConfig,
    KeycloakAdminClient,
    PasswordCredentials,
    RequestConfig,
)
from keycloak_admin_client.constants import DEFAULT_BASE_URL, DEFAULT_REALM
from keycloak_admin_client.settings import ClientSettings


class TestConstruction:
    def test_defaults(self):
        client = KeycloakAdminClient()

        assert client.base_url == DEFAULT_BASE_URL == "http://127.0.0.1:8080/auth"
        assert client.realm_name == DEFAULT_REALM == "master"
        assert client.access_token is None
        assert client.refresh_token is None
        assert client.interactive is None
        assert client.get_request_config() is None

    def test_accepts_camel_case_mapping(self):
        client = KeycloakAdminClient(
            {
                "baseUrl": "https://sso.example.com",
                "realmName": "demo",
                "requestConfig": {"headers": {"X-Tenant": "a"}},
            }
        )

        assert client.base_url == "https://sso.example.com"
        assert client.realm_name == "demo"
        assert client.get_request_config().headers == {"X-Tenant": "a"}

    def test_accepts_connection_config(self):
        client = KeycloakAdminClient(
            ConnectionConfig(base_url="https://sso.example.com", realm_name="demo")
        )

        assert client.base_url == "https://sso.example.com"
        assert client.realm_name == "demo"

    def test_exposes_every_accessor(self):
        client = KeycloakAdminClient()

        for name in (
            "users",
            "groups",
            "roles",
            "clients",
            "realms",
            "client_scopes",
            "identity_providers",
            "components",
            "authentication_management",
            "server_info",
            "who_am_i",
        ):
            assert getattr(client, name).client is client


class TestAuth:
    """Tests for auth() storing tokens."""

    @pytest.mark.asyncio
    async def test_password_auth_stores_both_tokens(self, keycloak, admin_client):
        keycloak.queue(200, json={"access_token": "A", "refresh_token": "B"})

        token_pair = await admin_client.auth(
            PasswordCredentials(username="admin", password="admin")
        )

        assert token_pair.access_token == "A"
        assert admin_client.access_token == "A"
        assert admin_client.refresh_token == "B"
        assert await admin_client.get_access_token() == "A"

    @pytest.mark.asyncio
    async def test_auth_uses_current_base_url_and_realm(self, keycloak, admin_client):
        keycloak.queue(200, json={"access_token": "A"})
        admin_client.set_config({"realmName": "demo"})

        await admin_client.auth({"username": "admin", "password": "admin"})

        assert keycloak.last_request.url.path == (
            "/realms/demo/protocol/openid-connect/token"
        )

    @pytest.mark.asyncio
    async def test_failed_auth_leaves_tokens_unchanged(self, keycloak, admin_client):
        keycloak.queue(200, json={"access_token": "old-A", "refresh_token": "old-B"})
        await admin_client.auth(PasswordCredentials(username="admin", password="admin"))
        keycloak.queue(401, json={"error": "invalid_grant"})

        with pytest.raises(AuthenticationError) as exc_info:
            await admin_client.auth(
                PasswordCredentials(username="admin", password="wrong")
            )

        assert exc_info.value.status_code == 401
        assert admin_client.access_token == "old-A"
        assert admin_client.refresh_token == "old-B"

    @pytest.mark.asyncio
    async def test_invalid_credential_mapping_sends_nothing(
        self, keycloak, admin_client
    ):
        with pytest.raises(ValidationError):
            await admin_client.auth({"username": "admin"})

        assert keycloak.requests == []

    @pytest.mark.asyncio
    async def test_auth_applies_global_request_config(self, keycloak, http_client):
        keycloak.queue(200, json={"access_token": "A"})
        client = KeycloakAdminClient(
            {"requestConfig": {"headers": {"X-Tenant": "acme"}}},
            http_client=http_client,
        )

        await client.auth(PasswordCredentials(username="admin", password="admin"))

        assert keycloak.last_request.headers["X-Tenant"] == "acme"


class TestSetConfig:
    """Tests for partial updates of base_url and realm_name."""

    def test_empty_base_url_is_ignored(self, admin_client):
        before = admin_client.base_url

        admin_client.set_config({"baseUrl": ""})
        admin_client.set_config({"realmName": "demo"})

        assert admin_client.realm_name == "demo"
        assert admin_client.base_url == before

    def test_snake_case_keys(self, admin_client):
        admin_client.set_config({"base_url": "https://new.example.com", "realm_name": "x"})

        assert admin_client.base_url == "https://new.example.com"
        assert admin_client.realm_name == "x"

    def test_non_string_values_are_ignored(self, admin_client):
        admin_client.set_config({"baseUrl": 42, "realmName": None})

        assert admin_client.base_url == "http://keycloak:8080"
        assert admin_client.realm_name == "master"

    def test_connection_config_model(self, admin_client):
        admin_client.set_config(ConnectionConfig(realm_name="demo"))

        assert admin_client.realm_name == "demo"
        assert admin_client.base_url == "http://keycloak:8080"

    def test_is_idempotent(self, admin_client):
        admin_client.set_config({"realmName": "demo"})
        admin_client.set_config({"realmName": "demo"})

        assert admin_client.realm_name == "demo"


class TestAccessToken:
    def test_set_access_token_is_idempotent(self, admin_client):
        admin_client.set_access_token("T")
        once = admin_client.access_token
        admin_client.set_access_token("T")

        assert admin_client.access_token == once == "T"

    @pytest.mark.asyncio
    async def test_get_access_token_is_a_pure_read(self, keycloak, admin_client):
        admin_client.set_access_token("T")

        first = await admin_client.get_access_token()
        second = await admin_client.get_access_token()

        assert first == second == "T"
        assert keycloak.requests == []

    @pytest.mark.asyncio
    async def test_get_access_token_returns_none_when_unset(self, admin_client):
        assert await admin_client.get_access_token() is None


class TestRealmRequestConfig:
    def test_set_and_clear(self, admin_client):
        admin_client.set_realm_request_config("demo", {"headers": {"X-Realm": "demo"}})

        assert admin_client.get_realm_request_config("demo").headers == {
            "X-Realm": "demo"
        }

        admin_client.set_realm_request_config("demo", None)

        assert admin_client.get_realm_request_config("demo") is None

    def test_global_request_config_is_returned_as_copy(self):
        client = KeycloakAdminClient({"requestConfig": {"headers": {"X-Tenant": "a"}}})

        config = client.get_request_config()
        config.headers["X-Tenant"] = "changed"
        config.timeout = 1

        assert client.get_request_config().headers == {"X-Tenant": "a"}
        assert client.get_request_config().timeout is None

    def test_realm_request_config_is_returned_as_copy(self, admin_client):
        admin_client.set_realm_request_config(
            "demo", {"params": {"briefRepresentation": "true"}}
        )

        admin_client.get_realm_request_config("demo").params.clear()

        assert admin_client.get_realm_request_config("demo").params == {
            "briefRepresentation": "true"
        }

    def test_other_realms_are_unaffected(self, admin_client):
        admin_client.set_realm_request_config("demo", RequestConfig(timeout=5))

        assert admin_client.get_realm_request_config("master") is None


class TestHttpClientLifecycle:
    @pytest.mark.asyncio
    async def test_creates_and_closes_own_client(self):
        client = KeycloakAdminClient({"requestConfig": {"timeout": 5, "verify": False}})

        http_client = await client._get_http_client()

        assert isinstance(http_client, httpx.AsyncClient)
        assert http_client.timeout.read == 5
        assert await client._get_http_client() is http_client

        await client.close()

        assert http_client.is_closed

    @pytest.mark.asyncio
    async def test_does_not_close_injected_client(self, http_client):
        async with KeycloakAdminClient(http_client=http_client) as client:
            assert await client._get_http_client() is http_client

        assert not http_client.is_closed


class TestFromSettings:
    def test_builds_client_from_settings(self, monkeypatch):
        monkeypatch.setenv("KEYCLOAK_ADMIN_BASE_URL", "https://sso.example.com")
        monkeypatch.setenv("KEYCLOAK_ADMIN_REALM_NAME", "demo")
        monkeypatch.setenv("KEYCLOAK_ADMIN_TIMEOUT", "12.5")

        client = KeycloakAdminClient.from_settings()

        assert client.base_url == "https://sso.example.com"
        assert client.realm_name == "demo"
        assert client.get_request_config().timeout == 12.5

    def test_configure_logging_is_opt_in(self):
        settings = ClientSettings(
            KEYCLOAK_ADMIN_LOG_LEVEL="DEBUG", KEYCLOAK_ADMIN_JSON_LOGS=True
        )

        with patch("keycloak_admin_client.client.setup_structured_logging") as setup:
            KeycloakAdminClient.from_settings(settings)
            setup.assert_not_called()

            KeycloakAdminClient.from_settings(settings, configure_logging=True)

        setup.assert_called_once_with(log_level="DEBUG", enable_json_formatting=True)

    def test_constructor_does_not_read_environment(self, monkeypatch):
        monkeypatch.setenv("KEYCLOAK_ADMIN_BASE_URL", "https://sso.example.com")

        with patch("keycloak_admin_client.client.ClientSettings") as settings_cls:
            client = KeycloakAdminClient()

        settings_cls.assert_not_called()
        assert client.base_url == DEFAULT_BASE_URL
