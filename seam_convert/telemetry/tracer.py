"""
OpenTelemetry span helpers

Wraps conversions in internal spans so they show up under the RPC call span of the
surrounding client.
"""

from typing import Any, Dict

from opentelemetry import trace

TRACER_NAME = "seam_convert"


def create_span(name: str, attributes: Dict[str, Any] = None):
    """Create new span

    Args:
        name: Span name
        attributes: Span attributes

    Returns:
        Context manager yielding the span
    """
    tracer = trace.get_tracer(TRACER_NAME)
    return tracer.start_as_current_span(
        name,
        attributes=attributes or {},
        kind=trace.SpanKind.INTERNAL,
    )

