"""Page API endpoints."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from pagecraft.api.deps import get_page_registry
from pagecraft.schemas.page import (
    ErrorResponse,
    PageCreate,
    PageDelete,
    PageDeleteResponse,
    PageFullResponse,
    PageListResponse,
    PagePublicResponse,
    PageReceiptResponse,
    PageUpdate,
)
from pagecraft.services.page_registry import PageRegistry

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status_code: {"model": ErrorResponse}
    for status_code in (400, 403, 404, 413, 500)
}

router = APIRouter(prefix="/api", tags=["pages"], responses=_ERROR_RESPONSES)


@router.get("/pages", response_model=PageListResponse)
async def list_pages_endpoint(
    registry: Annotated[PageRegistry, Depends(get_page_registry)],
) -> PageListResponse:
    """List all pages without html or admin tokens."""
    return PageListResponse(pages=await registry.list_pages())


@router.get("/page/{slug}", response_model=PagePublicResponse)
async def get_page_endpoint(
    slug: str,
    registry: Annotated[PageRegistry, Depends(get_page_registry)],
) -> PagePublicResponse:
    """Get a page for public viewing."""
    return PagePublicResponse(page=await registry.get_public(slug))


@router.get("/page/{slug}/{token}", response_model=PageFullResponse)
async def get_page_admin_endpoint(
    slug: str,
    token: str,
    registry: Annotated[PageRegistry, Depends(get_page_registry)],
) -> PageFullResponse:
    """Get the full page record for the holder of its admin token."""
    return PageFullResponse(page=await registry.get_with_auth(slug, token))


@router.post("/pages", response_model=PageReceiptResponse)
async def create_page_endpoint(
    registry: Annotated[PageRegistry, Depends(get_page_registry)],
    body: PageCreate | None = None,
) -> PageReceiptResponse:
    """Create a page. The response carries the page's admin token."""
    body = body or PageCreate()
    page = await registry.create(
        title=body.title,
        slug=body.slug,
        html=body.html,
        page_id=body.id,
        admin_token=body.admin_token,
    )
    return PageReceiptResponse(page=page.receipt())


@router.put("/page/{slug}", response_model=PageReceiptResponse)
async def update_page_endpoint(
    slug: str,
    registry: Annotated[PageRegistry, Depends(get_page_registry)],
    body: PageUpdate | None = None,
) -> PageReceiptResponse:
    """Update a page's title, html or slug."""
    body = body or PageUpdate()
    page = await registry.update(
        slug,
        body.admin_token,
        title=body.title,
        html=body.html,
        new_slug=body.new_slug,
    )
    return PageReceiptResponse(page=page.receipt())


@router.delete("/page/{slug}", response_model=PageDeleteResponse)
async def delete_page_endpoint(
    slug: str,
    registry: Annotated[PageRegistry, Depends(get_page_registry)],
    body: PageDelete | None = None,
) -> PageDeleteResponse:
    """Delete a page permanently."""
    body = body or PageDelete()
    await registry.delete(slug, body.admin_token)
    return PageDeleteResponse()
