"""Pytest configuration and shared fixtures.

Organization:
    - Database Fixtures: in-memory SQLite handle seeded with cards
    - Service Fixtures: card pagination service
    - Application Fixtures: FastAPI app (lifespan running) and HTTP client
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator
from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from cardgraph.core.settings import (
    AppSettings,
    GraphQLSettings,
    LoggingSettings,
    PaginationSettings,
    PostgresSettings,
    Settings,
    clear_settings_cache,
)
from cardgraph.features.cards import Card, create_card_pagination_service
from cardgraph.infra.database import Database

if TYPE_CHECKING:
    from fastapi import FastAPI

    from cardgraph.core.pagination import PaginationService

# Ensure tests run without external infrastructure
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("LOG_JSON", "false")
os.environ.setdefault("LOG_FILE_ENABLED", "false")

SQLITE_URL = "sqlite+aiosqlite://"

# CardID -> CardName; two cards share a name to exercise the filter
CARD_NAMES = {
    1: "Coalition Victory",
    2: "Llanowar Elves",
    3: "Coalition Victory",
    4: "Lightning Bolt",
    5: "Counterspell",
}


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> None:
    clear_settings_cache()


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest.fixture
async def database() -> AsyncGenerator[Database]:
    """In-memory SQLite database with the card table created and empty.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    db = Database(
        SQLITE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await db.create_all()
    try:
        yield db
    finally:
        await db.dispose()


@pytest.fixture
async def seeded_database(database: Database) -> Database:
    """Database holding cards 1..5 (see CARD_NAMES)."""
    async with database.session() as session:
        session.add_all(
            Card(
                card_id=card_id,
                card_name=name,
                card_flavor_text=f"Flavor of {name}",
                card_oracle_text=None,
            )
            for card_id, name in CARD_NAMES.items()
        )
        await session.commit()
    return database


# ============================================================================
# Service Fixtures
# ============================================================================


@pytest.fixture
def pagination_settings() -> PaginationSettings:
    return PaginationSettings(default_limit=2, query_timeout=5.0)


@pytest.fixture
def card_service(
    seeded_database: Database,
    pagination_settings: PaginationSettings,
) -> PaginationService:
    """Card pagination service over the seeded database."""
    return create_card_pagination_service(seeded_database.session_factory, pagination_settings)


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
def settings(pagination_settings: PaginationSettings) -> Settings:
    """Settings for an app that needs no external services."""
    return Settings(
        app=AppSettings(environment="test"),
        db=PostgresSettings(dsn=SQLITE_URL),
        logging=LoggingSettings(json_logs=False, console_enabled=False, file_enabled=False),
        graphql=GraphQLSettings(graphql_ide=False),
        pagination=pagination_settings,
    )


@pytest.fixture
async def app(settings: Settings, seeded_database: Database) -> AsyncGenerator[FastAPI]:
    """FastAPI application with its lifespan running against the seeded database."""
    from cardgraph.app.main import create_app

    application = create_app(settings, database=seeded_database)
    async with application.router.lifespan_context(application):
        yield application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """HTTPX AsyncClient bound to the application.

    Example:
        async def test_health_check(client):
            response = await client.get("/health")
            assert response.status_code == 200
    """
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
