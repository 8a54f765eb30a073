"""
Client error hierarchy with categorization.

This module defines the error types raised by the Keycloak admin client.
Every error carries the HTTP status and response body when the failure
came from the server, so callers can decide how to react.
"""


class KeycloakAdminClientError(Exception):
    """
    Base error class for all admin client exceptions.

    Provides categorization, a retry hint, and access to the HTTP status
    and response body of the failed exchange when one exists.
    """

    def __init__(
        self,
        message: str,
        category: str = "client",
        status_code: int | None = None,
        response_body: str | None = None,
        retryable: bool = False,
    ):
        """
        Initialize client error.

        Args:
            message: Human-readable error description
            category: Error category (transport, authentication, initialization, api)
            status_code: HTTP status code of the failed response, if any
            response_body: Raw response body of the failed response, if any
            retryable: Whether repeating the same call may succeed
        """
        super().__init__(message)
        self.category = category
        self.status_code = status_code
        self.response_body = response_body
        self.retryable = retryable

    def body_preview(self, limit: int = 2048) -> str | None:
        """Return a truncated preview of the response body for logging."""

        if self.response_body is None:
            return None

        if len(self.response_body) <= limit:
            return self.response_body

        return f"{self.response_body[:limit]}...<truncated>"

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.status_code is not None:
            return f"HTTP {self.status_code}: {base_msg}"
        return base_msg


class TransportError(KeycloakAdminClientError):
    """The request could not be sent or completed (DNS, TLS, reset, timeout)."""

    def __init__(self, message: str):
        super().__init__(message=message, category="transport", retryable=True)


class AuthenticationError(KeycloakAdminClientError):
    """The token endpoint rejected the credentials or returned an unusable body."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ):
        # 5xx from the token endpoint is a server problem, not bad credentials
        retryable = status_code is not None and status_code >= 500
        super().__init__(
            message=message,
            category="authentication",
            status_code=status_code,
            response_body=response_body,
            retryable=retryable,
        )


class InitializationError(KeycloakAdminClientError):
    """The interactive session could not be initialized."""

    def __init__(self, message: str):
        super().__init__(message=message, category="initialization")


class NotAuthenticatedError(KeycloakAdminClientError):
    """A resource call was attempted without a usable access token."""

    def __init__(self, message: str = "No access token available; call auth() or init() first"):
        super().__init__(message=message, category="authentication")


class ApiError(KeycloakAdminClientError):
    """An Admin API endpoint answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        response_body: str | None = None,
        method: str | None = None,
        url: str | None = None,
    ):
        # 4xx errors are client errors and not retryable
        retryable = not 400 <= status_code < 500
        super().__init__(
            message=message,
            category="api",
            status_code=status_code,
            response_body=response_body,
            retryable=retryable,
        )
        self.method = method
        self.url = url
