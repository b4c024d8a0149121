"""Application lifespan management.

Startup order:
1. logging
2. application info metric
3. database handle (unless one was injected)
4. card pagination service

Shutdown reverses it: the engine is disposed (when owned) and the log
listener is stopped.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from cardgraph.features.cards import create_card_pagination_service
from cardgraph.infra.database import Database
from cardgraph.infra.logging import setup_logging, shutdown
from cardgraph.infra.metrics.prometheus import application_info

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from fastapi import FastAPI

    from cardgraph.core.settings import Settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Start and stop the services the application depends on.

    Reads ``app.state.settings``. A ``Database`` already present on
    ``app.state.database`` is used as-is and left open on shutdown.
    """
    settings: Settings = app.state.settings

    setup_logging(log_settings=settings.logging, force=True)
    logger.info(
        "Application starting",
        extra={
            "service": settings.app.service_name,
            "environment": settings.app.environment,
        },
    )

    application_info.labels(
        version=settings.app.version,
        service=settings.app.service_name,
        environment=settings.app.environment,
    ).set(1)

    database: Database | None = getattr(app.state, "database", None)
    owns_database = database is None
    if database is None:
        database = Database.from_settings(settings.db)
        app.state.database = database

    app.state.card_pagination = create_card_pagination_service(
        database.session_factory,
        settings.pagination,
    )
    logger.info(
        "Card pagination ready",
        extra={
            "default_limit": settings.pagination.default_limit,
            "max_limit": settings.pagination.max_limit,
            "exact_has_next_page": settings.pagination.exact_has_next_page,
        },
    )

    try:
        yield
    finally:
        logger.info("Application shutting down")
        if owns_database:
            await database.dispose()
            app.state.database = None
        shutdown()


__all__ = ["lifespan"]
