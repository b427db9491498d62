"""Health check endpoint."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from pagecraft.api.deps import get_session_factory
from pagecraft.database import ping

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    success: bool = True
    status: str
    database: str


@router.get("/api/health", response_model=HealthResponse)
async def health_check(
    session_factory: Annotated[async_sessionmaker[AsyncSession], Depends(get_session_factory)],
) -> HealthResponse:
    """Health check endpoint for monitoring and load balancers."""
    db_status = "connected"
    try:
        await ping(session_factory)
    except Exception:
        logger.warning("Health check database query failed", exc_info=True)
        db_status = "disconnected"

    return HealthResponse(status="Server is running", database=db_status)
