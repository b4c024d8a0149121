"""Modular Pydantic Settings v2 configuration.

One frozen settings class per domain, each read from its own environment
prefix:

    APP_         AppSettings         service identity, host/port, environment
    DB_          PostgresSettings    connection and pool (or DATABASE_URL)
    LOG_         LoggingSettings     level, JSON output, file rotation
    GRAPHQL_     GraphQLSettings     endpoint path, IDE, depth limit, masking
    PAGINATION_  PaginationSettings  default/max page size, hasNextPage mode

Import settings via cached loaders:
    from cardgraph.core.settings import get_pagination_settings

Or use unified settings for convenient access to all domains:
    from cardgraph.core.settings import get_settings

Configuration precedence (highest to lowest):
    1. init kwargs (testing/overrides)
    2. Environment variables
    3. .env file
"""

from __future__ import annotations

from .app import AppSettings
from .graphql import GraphQLSettings
from .loader import (
    clear_settings_cache,
    get_app_settings,
    get_db_settings,
    get_graphql_settings,
    get_logging_settings,
    get_pagination_settings,
)
from .logs import LoggingSettings
from .pagination import PaginationSettings
from .postgres import PostgresSettings
from .unified import Settings, get_settings

__all__ = [
    "AppSettings",
    "GraphQLSettings",
    "LoggingSettings",
    "PaginationSettings",
    "PostgresSettings",
    "Settings",
    "clear_settings_cache",
    "get_app_settings",
    "get_db_settings",
    "get_graphql_settings",
    "get_logging_settings",
    "get_pagination_settings",
    "get_settings",
]
