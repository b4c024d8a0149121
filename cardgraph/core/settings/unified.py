"""Unified settings composition for convenient access.

Usage:
    from cardgraph.core.settings import get_settings

    settings = get_settings()
    print(settings.app.port)
    print(settings.pagination.default_limit)

Each nested settings class still loads from its own environment prefix
(APP_, DB_, LOG_, GRAPHQL_, PAGINATION_).
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .app import AppSettings
from .graphql import GraphQLSettings
from .loader import (
    get_app_settings,
    get_db_settings,
    get_graphql_settings,
    get_logging_settings,
    get_pagination_settings,
)
from .logs import LoggingSettings
from .pagination import PaginationSettings
from .postgres import PostgresSettings


class Settings(BaseSettings):
    """Unified settings composing all domain settings.

    Example:
        settings = Settings()
        assert settings.db.pool_size == 10
    """

    model_config = SettingsConfigDict(
        frozen=True,
        extra="ignore",
    )

    app: AppSettings = Field(default_factory=get_app_settings)
    db: PostgresSettings = Field(default_factory=get_db_settings)
    logging: LoggingSettings = Field(default_factory=get_logging_settings)
    graphql: GraphQLSettings = Field(default_factory=get_graphql_settings)
    pagination: PaginationSettings = Field(default_factory=get_pagination_settings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get unified settings instance (cached)."""
    return Settings()
