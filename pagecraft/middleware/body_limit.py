"""Request body size limit enforced on the bytes actually received."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import HTTPException
from starlette.datastructures import Headers

from pagecraft.api.errors import error_response

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)


class PayloadTooLargeError(HTTPException):
    """Raised from ``receive`` once the streamed body passes the limit."""

    def __init__(self) -> None:
        super().__init__(status_code=413, detail="Payload too large")


class BodySizeLimitMiddleware:
    """Reject request bodies larger than ``max_body_bytes`` with 413.

    A declared ``Content-Length`` over the limit is rejected before the app
    runs. Bodies without a length (chunked) are counted as they are read; the
    app sees ``PayloadTooLargeError`` from ``receive`` as soon as the running
    total passes the limit.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int) -> None:
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        content_length = Headers(scope=scope).get("content-length")
        if content_length is not None:
            try:
                declared = int(content_length)
            except ValueError:
                await error_response(400, "Invalid Content-Length header")(scope, receive, send)
                return
            if declared > self.max_body_bytes:
                self._log_rejection(scope, declared)
                await error_response(413, "Payload too large")(scope, receive, send)
                return

        received = 0
        response_started = False

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_bytes:
                    self._log_rejection(scope, received)
                    raise PayloadTooLargeError
            return message

        async def tracking_send(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, limited_receive, tracking_send)
        except PayloadTooLargeError:
            if response_started:
                raise
            await error_response(413, "Payload too large")(scope, receive, send)

    def _log_rejection(self, scope: Scope, size: int) -> None:
        logger.warning(
            "Rejected %s %s: body of %d bytes exceeds limit of %d",
            scope.get("method"),
            scope.get("path"),
            size,
            self.max_body_bytes,
        )
