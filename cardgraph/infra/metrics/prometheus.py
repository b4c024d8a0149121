"""Prometheus metrics for the pagination service."""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter, Gauge, Histogram

# Custom registry so tests and multiple app instances don't collide with
# the process-wide default registry.
REGISTRY = CollectorRegistry()

# Covers query times from 1ms to 10s
DEFAULT_LATENCY_BUCKETS = (
    0.001,
    0.005,
    0.01,
    0.025,
    0.05,
    0.1,
    0.25,
    0.5,
    1.0,
    2.5,
    5.0,
    10.0,
)

PAGE_SIZE_BUCKETS = (0, 1, 5, 10, 25, 50, 100, 250, 500, 1000)

application_info = Gauge(
    "application_info",
    "Application information",
    ["version", "service", "environment"],
    registry=REGISTRY,
)

pagination_requests_total = Counter(
    "pagination_requests_total",
    "Page requests by outcome",
    ["outcome"],
    registry=REGISTRY,
)

pagination_query_duration_seconds = Histogram(
    "pagination_query_duration_seconds",
    "Duration of the page query against the store",
    buckets=DEFAULT_LATENCY_BUCKETS,
    registry=REGISTRY,
)

pagination_page_size = Histogram(
    "pagination_page_size",
    "Number of rows returned per page",
    buckets=PAGE_SIZE_BUCKETS,
    registry=REGISTRY,
)
