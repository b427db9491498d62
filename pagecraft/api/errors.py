"""JSON error envelope shared by exception handlers and middleware."""

from __future__ import annotations

from fastapi.responses import JSONResponse


def error_response(status_code: int, message: str) -> JSONResponse:
    """Render the ``{"success": false, "error": ...}`` envelope."""
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})
