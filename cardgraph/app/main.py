"""FastAPI application factory."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import FastAPI

from cardgraph.app.lifespan import lifespan
from cardgraph.app.router import setup_routers
from cardgraph.core.settings import get_settings

if TYPE_CHECKING:
    from cardgraph.core.settings import Settings
    from cardgraph.infra.database import Database


def create_app(settings: Settings | None = None, *, database: Database | None = None) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        settings: Settings to use; loaded via ``get_settings()`` when omitted.
        database: Pre-built database handle. When given, the lifespan uses
            it instead of creating one and leaves it open on shutdown.

    Returns:
        Configured FastAPI application instance.
    """
    settings = settings or get_settings()
    app_settings = settings.app

    app = FastAPI(
        title=app_settings.title,
        description=app_settings.description,
        version=app_settings.version,
        debug=app_settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    setup_routers(app, settings)

    return app
