"""Application-level exception types.

Convention:
- Every ``PageError`` carries the HTTP status it maps to and a ``message``
  that is safe to forward to clients verbatim. The global handler in
  ``pagecraft/main.py`` renders it as ``{"success": false, "error": message}``.
- ``InfrastructureError`` wraps storage failures. Its message is a generic
  per-operation string; the underlying exception is chained (``raise ... from``)
  and logged server-side, never sent to the client.
"""

from __future__ import annotations


class PageError(Exception):
    """Base class for errors raised by the page registry."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(PageError):
    """Required fields are missing or a request body is malformed."""

    status_code = 400
    default_message = "Missing required fields"


class SlugConflictError(PageError):
    """The requested slug belongs to another page."""

    status_code = 400
    default_message = "Slug already taken"


class MissingTokenError(PageError):
    """A mutating request did not present an admin token."""

    status_code = 403
    default_message = "Admin token required"


class ForbiddenError(PageError):
    """The presented admin token does not match the page's token."""

    status_code = 403
    default_message = "Invalid admin token"


class PageNotFoundError(PageError):
    """No page has the requested slug."""

    status_code = 404
    default_message = "Page not found"


class InfrastructureError(PageError):
    """The backing store failed or is unreachable."""

    status_code = 500
