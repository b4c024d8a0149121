"""Health check endpoints.

Endpoints:
    GET /health - Liveness; does not touch the database
    GET /health/ready - Readiness; runs ``SELECT 1`` against the card store
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

router = APIRouter(prefix="/health", tags=["health"])
logger = logging.getLogger(__name__)


@router.get("")
async def liveness() -> dict[str, str]:
    """Report that the process is up."""
    return {"status": "ok"}


@router.get("/ready", response_model=None)
async def readiness(request: Request) -> dict[str, str] | JSONResponse:
    """Report whether the card store answers queries."""
    try:
        await request.app.state.database.check()
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Readiness check failed", extra={"error": str(e)})
        return JSONResponse(status_code=503, content={"status": "unavailable"})
    return {"status": "ok"}
