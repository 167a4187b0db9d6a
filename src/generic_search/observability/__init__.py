"""Logging, tracing and metrics for generic-search."""

from generic_search.observability.context import get_trace_context, set_trace_context, trace_context
from generic_search.observability.logging import JsonFormatter, configure_logging
from generic_search.observability.metrics import (
    SEARCH_LATENCY,
    SEARCH_REQUESTS,
    SEARCH_RESULTS,
    get_metrics,
    get_metrics_content_type,
    track_latency,
)
from generic_search.observability.tracing import create_span, disable_tracing, get_tracer, init_tracing


__all__ = [
    "SEARCH_LATENCY",
    "SEARCH_REQUESTS",
    "SEARCH_RESULTS",
    "JsonFormatter",
    "configure_logging",
    "create_span",
    "disable_tracing",
    "get_metrics",
    "get_metrics_content_type",
    "get_trace_context",
    "get_tracer",
    "init_tracing",
    "set_trace_context",
    "trace_context",
    "track_latency",
]
