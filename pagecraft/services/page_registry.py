"""Page registry: slug ownership, uniqueness, and admin-token checks.

The registry holds no state of its own. Every operation opens a session from
the process-scoped factory and round-trips to the database, which is the
single source of truth. Slug and id pre-checks are a fast path only; the
unique constraints on ``pages`` are the authoritative guard, and a constraint
violation on commit is reported as the matching conflict error.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from pagecraft.exceptions import (
    ForbiddenError,
    InfrastructureError,
    InvalidInputError,
    MissingTokenError,
    PageNotFoundError,
    SlugConflictError,
)
from pagecraft.models.page import Page
from pagecraft.schemas.page import PageFull, PagePublic, PageSummary
from pagecraft.services.datetime_service import timestamp_now
from pagecraft.services.token_service import (
    generate_admin_token,
    generate_page_id,
    tokens_match,
)

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

logger = logging.getLogger(__name__)


def _summary(page: Page) -> PageSummary:
    return PageSummary(
        id=page.id,
        slug=page.slug,
        title=page.title,
        created_at=page.created_at,
        updated_at=page.updated_at,
    )


def _public(page: Page) -> PagePublic:
    return PagePublic(
        id=page.id,
        slug=page.slug,
        title=page.title,
        html=page.html,
        created_at=page.created_at,
        updated_at=page.updated_at,
    )


def _full(page: Page) -> PageFull:
    return PageFull(
        id=page.id,
        slug=page.slug,
        title=page.title,
        html=page.html,
        admin_token=page.admin_token,
        created_at=page.created_at,
        updated_at=page.updated_at,
    )


class PageRegistry:
    """CRUD over pages, gated by per-page admin tokens."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    @asynccontextmanager
    async def _session(self, failure_message: str) -> AsyncIterator[AsyncSession]:
        """Open a session; storage failures become ``InfrastructureError``."""
        try:
            async with self._session_factory() as session:
                yield session
        except SQLAlchemyError as exc:
            raise InfrastructureError(failure_message) from exc

    @staticmethod
    async def _find_by_slug(session: AsyncSession, slug: str) -> Page | None:
        result = await session.execute(select(Page).where(Page.slug == slug))
        return result.scalar_one_or_none()

    async def _authorize(self, session: AsyncSession, slug: str, token: str | None) -> Page:
        """Load the page for ``slug`` and check ``token`` against it."""
        page = await self._find_by_slug(session, slug)
        if page is None:
            raise PageNotFoundError
        if not tokens_match(page.admin_token, token):
            logger.warning("Rejected admin token for page %r", slug)
            raise ForbiddenError
        return page

    async def list_pages(self) -> list[PageSummary]:
        """Return summaries of all pages, most recently updated first."""
        stmt = select(Page).order_by(Page.updated_at.desc(), Page.created_at.desc())
        async with self._session("Failed to fetch pages") as session:
            result = await session.execute(stmt)
            pages = result.scalars().all()
        return [_summary(p) for p in pages]

    async def get_public(self, slug: str) -> PagePublic:
        """Return the page for ``slug`` without its admin token."""
        async with self._session("Failed to fetch page") as session:
            page = await self._find_by_slug(session, slug)
        if page is None:
            raise PageNotFoundError
        return _public(page)

    async def get_with_auth(self, slug: str, token: str) -> PageFull:
        """Return the complete page for ``slug`` to the holder of its token."""
        async with self._session("Failed to fetch page") as session:
            page = await self._authorize(session, slug, token)
        return _full(page)

    async def create(
        self,
        title: str | None,
        slug: str | None,
        html: str | None,
        page_id: str | None = None,
        admin_token: str | None = None,
    ) -> PageFull:
        """Create a page, generating its id and admin token when not supplied.

        Raises InvalidInputError when title, slug or html is empty, or when a
        caller-supplied id is already in use, and SlugConflictError when the
        slug is taken.
        """
        if not title or not slug or not html:
            raise InvalidInputError("Missing required fields")

        async with self._session("Failed to create page") as session:
            if await self._find_by_slug(session, slug) is not None:
                raise SlugConflictError("Slug already taken")
            if page_id and await session.get(Page, page_id) is not None:
                raise InvalidInputError("Page id already taken")

            now = timestamp_now()
            page = Page(
                id=page_id or generate_page_id(),
                slug=slug,
                title=title,
                html=html,
                admin_token=admin_token or generate_admin_token(),
                created_at=now,
                updated_at=now,
            )
            session.add(page)
            try:
                await session.commit()
            except IntegrityError as exc:
                await session.rollback()
                logger.warning("Unique constraint rejected new page %r: %s", slug, exc)
                if await self._find_by_slug(session, slug) is not None:
                    raise SlugConflictError("Slug already taken") from exc
                raise InvalidInputError("Page id already taken") from exc

        logger.info("Created page %r (id=%s)", page.slug, page.id)
        return _full(page)

    async def update(
        self,
        slug: str,
        token: str | None,
        title: str | None = None,
        html: str | None = None,
        new_slug: str | None = None,
    ) -> PageFull:
        """Apply the given changes to the page and refresh ``updated_at``.

        Falsy ``title``, ``html`` and ``new_slug`` leave the field unchanged.
        Renaming to the current slug is a no-op.
        """
        if not token:
            raise MissingTokenError

        async with self._session("Failed to update page") as session:
            page = await self._authorize(session, slug, token)

            if new_slug and new_slug != page.slug:
                if await self._find_by_slug(session, new_slug) is not None:
                    raise SlugConflictError("New slug already taken")
                page.slug = new_slug

            if title:
                page.title = title
            if html:
                page.html = html
            page.updated_at = timestamp_now()

            try:
                await session.commit()
            except IntegrityError as exc:
                await session.rollback()
                logger.warning("Unique constraint rejected rename of %r: %s", slug, exc)
                raise SlugConflictError("New slug already taken") from exc

        if page.slug != slug:
            logger.info("Updated page %r (renamed to %r)", slug, page.slug)
        else:
            logger.info("Updated page %r", slug)
        return _full(page)

    async def delete(self, slug: str, token: str | None) -> None:
        """Permanently remove the page for ``slug``."""
        if not token:
            raise MissingTokenError

        async with self._session("Failed to delete page") as session:
            page = await self._authorize(session, slug, token)
            await session.delete(page)
            await session.commit()

        logger.info("Deleted page %r", slug)
