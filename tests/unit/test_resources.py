"""Unit tests for the shared request machinery of resource accessors."""

import json

import httpx
import pytest
from pydantic import ValidationError

from keycloak_admin_client import (
    ApiError,
    KeycloakAdminClient,
    NotAuthenticatedError,
    RequestConfig,
    TransportError,
)
from keycloak_admin_client.models.representations import (
    CreatedResource,
    UserRepresentation,
)
from keycloak_admin_client.resources import Users


class TestAuthentication:
    @pytest.mark.asyncio
    async def test_call_before_auth_raises_without_network(
        self, keycloak, admin_client
    ):
        with pytest.raises(NotAuthenticatedError):
            await admin_client.users.find()

        assert keycloak.requests == []

    @pytest.mark.asyncio
    async def test_sends_bearer_token(self, keycloak, authenticated_client):
        keycloak.queue(200, json=[])

        await authenticated_client.users.find()

        assert keycloak.last_request.headers["Authorization"] == "Bearer test-token"

    @pytest.mark.asyncio
    async def test_reads_token_at_call_time(self, keycloak, authenticated_client):
        users = authenticated_client.users
        authenticated_client.set_access_token("rotated-token")

        await users.delete("u1")

        assert keycloak.last_request.headers["Authorization"] == "Bearer rotated-token"

    @pytest.mark.asyncio
    async def test_authorization_cannot_be_overridden(
        self, keycloak, authenticated_client
    ):
        await authenticated_client.users.delete(
            "u1",
            request_config=RequestConfig(headers={"Authorization": "Basic abc"}),
        )

        assert keycloak.last_request.headers["Authorization"] == "Bearer test-token"

    @pytest.mark.asyncio
    async def test_authorization_override_is_case_insensitive(
        self, keycloak, authenticated_client
    ):
        await authenticated_client.users.delete(
            "u1",
            request_config=RequestConfig(headers={"authorization": "Basic abc"}),
        )

        assert keycloak.last_request.headers.get_list("authorization") == [
            "Bearer test-token"
        ]


class TestRequestConfigLayering:
    """Method-level options beat realm defaults, which beat global overrides."""

    @pytest.mark.asyncio
    async def test_header_precedence(self, keycloak, http_client):
        client = KeycloakAdminClient(
            {
                "baseUrl": "http://keycloak:8080",
                "requestConfig": {"headers": {"X-Layer": "global", "X-Global": "1"}},
            },
            http_client=http_client,
        )
        client.set_access_token("test-token")
        client.set_realm_request_config(
            "master", {"headers": {"X-Layer": "realm", "X-Realm": "1"}}
        )

        await client.users.find(
            request_config=RequestConfig(headers={"x-layer": "method"})
        )

        headers = keycloak.last_request.headers
        assert headers["X-Layer"] == "method"
        assert headers.get_list("X-Layer") == ["method"]
        assert headers["X-Global"] == "1"
        assert headers["X-Realm"] == "1"

    @pytest.mark.asyncio
    async def test_realm_defaults_apply_only_to_that_realm(
        self, keycloak, authenticated_client
    ):
        authenticated_client.set_realm_request_config(
            "demo", {"headers": {"X-Realm": "demo"}}
        )

        await authenticated_client.users.find(realm="other")

        assert "X-Realm" not in keycloak.last_request.headers

        await authenticated_client.users.find(realm="demo")

        assert keycloak.last_request.headers["X-Realm"] == "demo"

    @pytest.mark.asyncio
    async def test_query_params_merge_with_call_params(
        self, keycloak, authenticated_client
    ):
        await authenticated_client.users.find(
            username="alice",
            request_config=RequestConfig(params={"trace": "1"}),
        )

        params = keycloak.last_request.url.params
        assert params["trace"] == "1"
        assert params["username"] == "alice"


class TestUrls:
    @pytest.mark.asyncio
    async def test_uses_session_realm_by_default(self, keycloak, authenticated_client):
        await authenticated_client.users.find()

        assert keycloak.last_request.url.path == "/admin/realms/master/users"

    @pytest.mark.asyncio
    async def test_realm_argument_overrides_session_realm(
        self, keycloak, authenticated_client
    ):
        await authenticated_client.users.find(realm="demo")

        assert keycloak.last_request.url.path == "/admin/realms/demo/users"

    @pytest.mark.asyncio
    async def test_follows_set_config(self, keycloak, authenticated_client):
        authenticated_client.set_config(
            {"baseUrl": "http://other:8080/auth/", "realmName": "demo"}
        )

        await authenticated_client.users.find()

        assert str(keycloak.last_request.url) == (
            "http://other:8080/auth/admin/realms/demo/users"
        )

    @pytest.mark.asyncio
    async def test_path_params_are_quoted(self, keycloak, authenticated_client):
        await authenticated_client.roles.del_by_name("a/b c", realm="my realm")

        url = str(keycloak.last_request.url)
        assert "/admin/realms/my%20realm/roles/a%2Fb%20c" in url

    @pytest.mark.asyncio
    async def test_query_keys_are_camel_cased(self, keycloak, authenticated_client):
        await authenticated_client.users.find(
            brief_representation=True, first=0, max=10, email=None
        )

        params = keycloak.last_request.url.params
        assert params["briefRepresentation"] == "true"
        assert params["first"] == "0"
        assert params["max"] == "10"
        assert "email" not in params


class TestResponses:
    @pytest.mark.asyncio
    async def test_list_is_mapped_to_models(self, keycloak, authenticated_client):
        keycloak.queue(
            200,
            json=[
                {"id": "u1", "username": "alice", "firstName": "Alice"},
                {"id": "u2", "username": "bob", "customField": "kept"},
            ],
        )

        users = await authenticated_client.users.find()

        assert [user.username for user in users] == ["alice", "bob"]
        assert isinstance(users[0], UserRepresentation)
        assert users[0].first_name == "Alice"
        assert users[1].model_extra == {"customField": "kept"}

    @pytest.mark.asyncio
    async def test_create_returns_id_from_location(
        self, keycloak, authenticated_client
    ):
        keycloak.queue(
            201,
            headers={
                "Location": "http://keycloak:8080/admin/realms/master/users/abc-123"
            },
        )

        created = await authenticated_client.users.create(
            {"username": "alice", "enabled": True, "firstName": "Alice"}
        )

        assert created == CreatedResource(id="abc-123")
        body = json.loads(keycloak.last_request.content)
        assert body == {"username": "alice", "enabled": True, "firstName": "Alice"}

    @pytest.mark.asyncio
    async def test_create_without_location_returns_none(
        self, keycloak, authenticated_client
    ):
        keycloak.queue(201)

        assert await authenticated_client.users.create({"username": "alice"}) is None

    @pytest.mark.asyncio
    async def test_payload_models_are_serialized_without_nulls(
        self, keycloak, authenticated_client
    ):
        await authenticated_client.users.update(
            "u1", UserRepresentation(email="a@example.com", email_verified=True)
        )

        body = json.loads(keycloak.last_request.content)
        assert body == {"email": "a@example.com", "emailVerified": True}

    @pytest.mark.asyncio
    async def test_find_one_maps_404_to_none(self, keycloak, authenticated_client):
        keycloak.queue(404, json={"error": "User not found"})

        assert await authenticated_client.users.find_one("missing") is None

    @pytest.mark.asyncio
    async def test_empty_body_returns_none(self, keycloak, authenticated_client):
        assert await authenticated_client.users.delete("u1") is None

    @pytest.mark.asyncio
    async def test_plain_number_body(self, keycloak, authenticated_client):
        keycloak.queue(200, json=42)

        assert await authenticated_client.users.count() == 42

    @pytest.mark.asyncio
    async def test_non_json_body_returned_as_text(self, keycloak, authenticated_client):
        keycloak.queue(200, text="<xml/>", headers={"Content-Type": "application/xml"})

        installation = await authenticated_client.clients.get_installation_providers(
            "c1", "keycloak-saml-subsystem"
        )

        assert installation == "<xml/>"


class TestErrors:
    @pytest.mark.asyncio
    async def test_non_2xx_raises_api_error(self, keycloak, authenticated_client):
        keycloak.queue(409, json={"errorMessage": "User exists with same username"})

        with pytest.raises(ApiError) as exc_info:
            await authenticated_client.users.create({"username": "alice"})

        error = exc_info.value
        assert error.status_code == 409
        assert "User exists" in error.response_body
        assert error.method == "POST"
        assert error.url == "http://keycloak:8080/admin/realms/master/users"
        assert error.retryable is False
        assert str(error).startswith("HTTP 409:")

    @pytest.mark.asyncio
    async def test_404_without_catch_raises(self, keycloak, authenticated_client):
        keycloak.queue(404)

        with pytest.raises(ApiError) as exc_info:
            await authenticated_client.users.delete("missing")

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_server_error_is_retryable(self, keycloak, authenticated_client):
        keycloak.queue(502, text="bad gateway")

        with pytest.raises(ApiError) as exc_info:
            await authenticated_client.groups.find()

        assert exc_info.value.retryable is True

    @pytest.mark.asyncio
    async def test_transport_failure_raises_transport_error(
        self, keycloak, authenticated_client
    ):
        keycloak.error = httpx.ReadTimeout("timed out")

        with pytest.raises(TransportError) as exc_info:
            await authenticated_client.users.find()

        assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)

    @pytest.mark.asyncio
    async def test_malformed_json_body_raises_api_error(
        self, keycloak, authenticated_client
    ):
        keycloak.queue(
            200, text='{"id": ', headers={"Content-Type": "application/json"}
        )

        with pytest.raises(ApiError) as exc_info:
            await authenticated_client.users.find()

        error = exc_info.value
        assert error.status_code == 200
        assert error.response_body == '{"id": '
        assert error.method == "GET"
        assert isinstance(error.__cause__, ValueError)

    @pytest.mark.asyncio
    async def test_invalid_record_raises_api_error(
        self, keycloak, authenticated_client
    ):
        keycloak.queue(200, json=["alice"])

        with pytest.raises(ApiError) as exc_info:
            await authenticated_client.users.find()

        assert exc_info.value.status_code == 200
        assert isinstance(exc_info.value.__cause__, ValidationError)


class TestOwnership:
    def test_accessor_does_not_keep_client_alive(self):
        users = KeycloakAdminClient().users

        assert isinstance(users, Users)
        with pytest.raises(ReferenceError):
            _ = users.client
