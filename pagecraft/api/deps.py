"""Shared API dependencies: session factory, page registry."""

from __future__ import annotations

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from pagecraft.services.page_registry import PageRegistry


def get_session_factory(request: Request) -> async_sessionmaker[AsyncSession]:
    """Get the process-scoped session factory from app state."""
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.session_factory
    return session_factory


def get_page_registry(request: Request) -> PageRegistry:
    """Get the page registry from app state."""
    registry: PageRegistry = request.app.state.page_registry
    return registry
