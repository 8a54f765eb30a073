"""Shared pytest fixtures for Keycloak admin client tests."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from keycloak_admin_client import KeycloakAdminClient

BASE_URL = "http://keycloak:8080"


class MockKeycloak:
    """
    In-process stand-in for a Keycloak server.

    Records every request it receives and answers from a queue of canned
    responses (204 No Content once the queue is empty). Setting ``error``
    makes every request fail at the transport level instead.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.responses: list[httpx.Response] = []
        self.error: Exception | None = None

    def queue(self, status_code: int, json=None, headers=None, text=None):
        self.responses.append(
            httpx.Response(status_code, json=json, headers=headers, text=text)
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if not self.responses:
            return httpx.Response(204)
        return self.responses.pop(0)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


class FakeInteractiveSession:
    """Interactive session double with mockable init/refresh/login."""

    def __init__(
        self,
        auth_server_url: str | None = "https://sso.example.com/auth",
        token: str | None = "session-token",
    ):
        self.auth_server_url = auth_server_url
        self.token = token
        self.init = AsyncMock(return_value=True)
        self.update_token = AsyncMock(return_value=False)
        self.login = MagicMock(return_value=None)


@pytest.fixture
def keycloak():
    return MockKeycloak()


@pytest.fixture
def http_client(keycloak):
    return httpx.AsyncClient(transport=httpx.MockTransport(keycloak.handler))


@pytest.fixture
def admin_client(http_client):
    """Unauthenticated client wired to the mock transport."""
    return KeycloakAdminClient(
        {"baseUrl": BASE_URL, "realmName": "master"}, http_client=http_client
    )


@pytest.fixture
def authenticated_client(admin_client):
    admin_client.set_access_token("test-token")
    return admin_client


@pytest.fixture
def interactive_session():
    return FakeInteractiveSession()
