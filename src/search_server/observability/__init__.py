"""Observability module: structured logging, tracing and metrics."""

from search_server.observability.context import get_trace_context, set_trace_context, trace_context
from search_server.observability.logging import JsonFormatter, configure_logging, configure_logging_from_settings
from search_server.observability.metrics import (
    ERROR_COUNT,
    INDEX_DOC_COUNT,
    SEARCH_LATENCY,
    SEARCH_RESULTS,
    get_metrics,
    track_latency,
)
from search_server.observability.tracing import create_span, get_tracer, init_tracing


__all__ = [
    "ERROR_COUNT",
    "INDEX_DOC_COUNT",
    "SEARCH_LATENCY",
    "SEARCH_RESULTS",
    "JsonFormatter",
    "configure_logging",
    "configure_logging_from_settings",
    "create_span",
    "get_metrics",
    "get_trace_context",
    "get_tracer",
    "init_tracing",
    "set_trace_context",
    "trace_context",
    "track_latency",
]
