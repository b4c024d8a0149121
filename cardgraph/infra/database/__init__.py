"""Database infrastructure."""

from cardgraph.infra.database.session import Database

__all__ = ["Database"]
