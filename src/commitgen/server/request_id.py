# File: src/commitgen/server/request_id.py
# Purpose: Request ID middleware for log correlation
import time
import uuid

import structlog

logger = structlog.get_logger(__name__)


class RequestIDMiddleware:
    """
    Middleware to add a unique request ID to each HTTP request.
    The request ID is:
    - Added to response headers (X-Request-ID)
    - Bound to the logging context for correlation
    - Available in request.state for use in handlers
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = str(uuid.uuid4())
        scope.setdefault("state", {})
        scope["state"]["request_id"] = request_id

        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=scope.get("method"),
            path=scope.get("path"),
        )
        start_time = time.monotonic()

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                headers = list(message.get("headers") or [])
                headers.append((b"x-request-id", request_id.encode("utf-8")))
                message["headers"] = headers
                logger.info(
                    "http_request_completed",
                    status_code=message.get("status"),
                    duration_ms=round((time.monotonic() - start_time) * 1000, 2),
                )
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            structlog.contextvars.clear_contextvars()
