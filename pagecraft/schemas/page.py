"""Page-related schemas.

JSON field names are camelCase (``adminToken``, ``createdAt``, ``newSlug``);
Python code uses the snake_case field names.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PageCreate(CamelModel):
    """Request to create a page.

    Fields are optional at the schema level so that missing values are
    reported as "Missing required fields" by the registry.
    """

    title: str | None = None
    slug: str | None = None
    html: str | None = None
    id: str | None = None
    admin_token: str | None = None


class PageUpdate(CamelModel):
    """Request to update a page. Falsy fields are left unchanged."""

    admin_token: str | None = None
    title: str | None = None
    html: str | None = None
    new_slug: str | None = None


class PageDelete(CamelModel):
    """Request to delete a page."""

    admin_token: str | None = None


class PageSummary(CamelModel):
    """Page listing entry: no html, no admin token."""

    id: str
    slug: str
    title: str
    created_at: str
    updated_at: str


class PageReceipt(PageSummary):
    """Response after create/update: the summary plus the admin token."""

    admin_token: str


class PagePublic(PageSummary):
    """Public page view with content but no admin token."""

    html: str


class PageFull(PagePublic):
    """Complete page record, only returned to token holders."""

    admin_token: str

    def receipt(self) -> PageReceipt:
        """Drop the html payload for post-mutation responses."""
        return PageReceipt(
            id=self.id,
            slug=self.slug,
            title=self.title,
            admin_token=self.admin_token,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class PageListResponse(BaseModel):
    """All pages, most recently updated first."""

    success: bool = True
    pages: list[PageSummary]


class PagePublicResponse(BaseModel):
    success: bool = True
    page: PagePublic


class PageFullResponse(BaseModel):
    success: bool = True
    page: PageFull


class PageReceiptResponse(BaseModel):
    success: bool = True
    page: PageReceipt


class PageDeleteResponse(BaseModel):
    success: bool = True
    message: str = "Page deleted"


class ErrorResponse(BaseModel):
    """Error envelope returned for every failed request."""

    success: bool = False
    error: str
