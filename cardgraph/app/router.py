"""Router registry and setup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cardgraph.features.graphql import create_graphql_router
from cardgraph.features.health.router import router as health_router
from cardgraph.features.metrics.router import router as metrics_router

if TYPE_CHECKING:
    from fastapi import FastAPI

    from cardgraph.core.settings import Settings

logger = logging.getLogger(__name__)


def setup_routers(app: FastAPI, settings: Settings) -> None:
    """Register all routers with the application.

    Args:
        app: FastAPI application instance.
        settings: Settings controlling GraphQL availability and masking.
    """
    app.include_router(metrics_router)
    app.include_router(health_router)

    if settings.graphql.enabled:
        app.include_router(
            create_graphql_router(settings.graphql, environment=settings.app.environment),
            tags=["graphql"],
        )
        logger.debug("GraphQL endpoint registered", extra={"path": settings.graphql.path})


__all__ = ["setup_routers"]
