"""SQLAlchemy ORM models for PageCraft."""

from pagecraft.models.base import Base
from pagecraft.models.page import Page

__all__ = [
    "Base",
    "Page",
]
