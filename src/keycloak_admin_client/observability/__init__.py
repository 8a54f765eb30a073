"""
Observability utilities for the Keycloak admin client.

This module provides opt-in structured logging and the tracing helpers
used around outbound requests.
"""

from .logging import setup_structured_logging
from .tracing import client_span, get_tracer, inject_trace_context

__all__ = [
    "setup_structured_logging",
    "client_span",
    "get_tracer",
    "inject_trace_context",
]
