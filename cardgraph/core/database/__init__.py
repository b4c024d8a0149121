"""Database model foundations."""

from cardgraph.core.database.base import NAMING_CONVENTION, Base

__all__ = ["NAMING_CONVENTION", "Base"]
