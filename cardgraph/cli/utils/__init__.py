"""CLI utilities."""

from cardgraph.cli.utils.async_runner import coro
from cardgraph.cli.utils.formatters import error, info, success

__all__ = ["coro", "error", "info", "success"]
