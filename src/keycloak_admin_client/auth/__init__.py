"""Token acquisition and interactive session support."""

from .interactive import (
    InteractiveAuthAdapter,
    InteractiveSession,
    InteractiveSessionFactory,
)
from .token import build_token_request, get_token, token_endpoint

__all__ = [
    "InteractiveAuthAdapter",
    "InteractiveSession",
    "InteractiveSessionFactory",
    "build_token_request",
    "get_token",
    "token_endpoint",
]
