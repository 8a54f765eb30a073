"""
Adapter around a browser-based interactive Keycloak session.

The session itself (redirects, SSO cookie checks, silent refresh) belongs
to an external library. This module only defines the narrow interface the
client needs from it and wraps the calls with the client's error types.
"""

import asyncio
import inspect
import logging
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from ..errors import InitializationError
from ..models.interactive import InitOptions, InteractiveConfig

logger = logging.getLogger(__name__)


@runtime_checkable
class InteractiveSession(Protocol):
    """What the client needs from a browser-based session implementation."""

    @property
    def auth_server_url(self) -> str | None: ...

    @property
    def token(self) -> str | None: ...

    async def init(self, options: InitOptions) -> bool: ...

    async def update_token(self, min_validity: int) -> bool: ...

    def login(self, options: dict[str, Any] | None = None) -> Any: ...


InteractiveSessionFactory = Callable[[InteractiveConfig | None], InteractiveSession]


class InteractiveAuthAdapter:
    """
    Wraps one interactive session for use by the admin client.

    Once initialized, the session owns the token: refreshing it and, when
    refreshing fails, sending the user through login again.
    """

    def __init__(self, session: InteractiveSession) -> None:
        self.session = session
        self._login_tasks: set[asyncio.Task[Any]] = set()

    @property
    def auth_server_url(self) -> str | None:
        return self.session.auth_server_url

    @property
    def current_token(self) -> str | None:
        return self.session.token

    async def init(self, options: InitOptions) -> None:
        """
        Run the session's init sequence.

        Raises:
            InitializationError: If the session reports failure or raises
        """
        try:
            result = await self.session.init(options)
        except InitializationError:
            raise
        except Exception as e:
            logger.error(f"Interactive session initialization failed: {e}")
            raise InitializationError(
                f"Interactive session initialization failed: {e}"
            ) from e

        # init() resolves with the authenticated flag; False is not a failure
        logger.debug(f"Interactive session initialized (authenticated={result})")

        if not self.session.auth_server_url:
            raise InitializationError(
                "Interactive session did not report an auth server URL"
            )

    async def refresh_if_needed(self, min_validity: int) -> bool:
        """
        Refresh the session token if it expires within min_validity seconds.

        Returns:
            True if the token was refreshed, False if it was still valid

        Raises:
            Exception: Whatever the session raises when refreshing fails
        """
        return await self.session.update_token(min_validity)

    def trigger_login(self, options: dict[str, Any] | None = None) -> None:
        """
        Start the session's login flow without waiting for it.

        If the session returns an awaitable, it is scheduled on the running
        loop. Failures are logged whether login raises immediately or later.
        """
        try:
            result = self.session.login(options)
        except Exception as e:
            logger.error(f"Interactive login failed: {e}")
            return
        if not inspect.isawaitable(result):
            return

        task = asyncio.ensure_future(result)
        self._login_tasks.add(task)
        task.add_done_callback(self._on_login_done)

    def _on_login_done(self, task: "asyncio.Task[Any]") -> None:
        self._login_tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(f"Interactive login failed: {error}")
