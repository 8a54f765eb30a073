"""
OpenTelemetry tracing helpers for outbound Keycloak requests.

The library creates spans and propagates W3C trace context on Admin API
requests; exporting spans is up to the application, which installs a
tracer provider. Without a provider every span is a no-op.

Usage:
    from keycloak_admin_client.observability.tracing import client_span

    with client_span("keycloak.token", {"keycloak.realm": realm}) as span:
        ...
"""

import contextlib
import logging
from collections.abc import Iterator
from typing import Any

from opentelemetry import trace
from opentelemetry.trace import Span, SpanKind, Status, StatusCode, Tracer
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator

logger = logging.getLogger(__name__)

TRACER_NAME = "keycloak_admin_client"


def get_tracer(name: str = TRACER_NAME) -> Tracer:
    """
    Get a tracer instance for creating spans.

    Args:
        name: Name of the tracer

    Returns:
        Tracer instance (no-op if no provider is installed)
    """
    return trace.get_tracer(name)


@contextlib.contextmanager
def client_span(
    name: str, attributes: dict[str, Any] | None = None
) -> Iterator[Span]:
    """
    Open a CLIENT span around one outbound request.

    Exceptions raised inside the block are recorded on the span, the span
    status is set to ERROR, and the exception is re-raised unchanged.

    Args:
        name: Span name
        attributes: Initial span attributes
    """
    tracer = get_tracer()
    with tracer.start_as_current_span(
        name,
        kind=SpanKind.CLIENT,
        attributes=attributes or {},
        record_exception=False,
        set_status_on_exception=False,
    ) as span:
        try:
            yield span
        except Exception as e:
            span.set_status(Status(StatusCode.ERROR, str(e)))
            span.record_exception(e)
            raise


def inject_trace_context(headers: dict[str, str]) -> dict[str, str]:
    """
    Inject current trace context into headers for propagation.

    Args:
        headers: Existing headers dict (will be modified in place)

    Returns:
        Headers dict with trace context added
    """
    TraceContextTextMapPropagator().inject(headers)
    return headers
