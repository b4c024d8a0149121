"""Metrics infrastructure."""

from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from cardgraph.infra.metrics.prometheus import (
    REGISTRY,
    application_info,
    pagination_page_size,
    pagination_query_duration_seconds,
    pagination_requests_total,
)

__all__ = [
    "CONTENT_TYPE_LATEST",
    "REGISTRY",
    "application_info",
    "generate_latest",
    "pagination_page_size",
    "pagination_query_duration_seconds",
    "pagination_requests_total",
]
