"""Prometheus metrics for search operations."""

from __future__ import annotations

from contextlib import contextmanager
import time
from typing import TYPE_CHECKING

from prometheus_client import Counter, Gauge, Histogram, generate_latest


if TYPE_CHECKING:
    from collections.abc import Generator


SEARCH_LATENCY = Histogram(
    "search_server_operation_latency_seconds",
    "Search server operation latency",
    ["operation"],
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25),
)

SEARCH_RESULTS = Counter(
    "search_server_results_total",
    "Documents returned by top-documents queries",
)

INDEX_DOC_COUNT = Gauge(
    "search_server_index_document_count",
    "Documents in index",
)

ERROR_COUNT = Counter(
    "search_server_errors_total",
    "Total errors",
    ["error_type", "operation"],
)


@contextmanager
def track_latency(histogram: Histogram, **labels: str) -> Generator[None, None, None]:
    """Context manager to track operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        histogram.labels(**labels).observe(time.perf_counter() - start)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest()
