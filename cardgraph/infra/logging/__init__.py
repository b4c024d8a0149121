"""Logging infrastructure: dictConfig setup, JSON formatting, context injection."""

from cardgraph.infra.logging.config import configure_logging, setup_logging, shutdown
from cardgraph.infra.logging.context import (
    ContextInjectingFilter,
    clear_log_context,
    get_log_context,
    set_log_context,
)
from cardgraph.infra.logging.formatters import JSONFormatter

__all__ = [
    "ContextInjectingFilter",
    "JSONFormatter",
    "clear_log_context",
    "configure_logging",
    "get_log_context",
    "set_log_context",
    "setup_logging",
    "shutdown",
]
