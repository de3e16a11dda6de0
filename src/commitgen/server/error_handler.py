# File: src/commitgen/server/error_handler.py
# Purpose: Map generation errors and unexpected exceptions to JSON responses
from fastapi import Request, status
from fastapi.responses import JSONResponse
import structlog

from commitgen.errors import ClassifiedError, get_status_code
from commitgen.i18n import user_message
from commitgen.server.schemas import ErrorResponse

logger = structlog.get_logger(__name__)


async def classified_error_handler(request: Request, exc: ClassifiedError) -> JSONResponse:
    """
    Handler for failed generations.

    Every kind is surfaced to the client; the body carries the kind, the
    localized user text and the raw detail.

    Args:
        request: FastAPI request object
        exc: Classified generation error

    Returns:
        JSON error response
    """
    request_id = getattr(request.state, "request_id", None)
    language = getattr(request.state, "language", None) or request.app.state.settings.LANGUAGE

    logger.warning(
        "commit_message_generation_failed",
        error=exc.kind.value,
        detail=exc.detail,
        request_id=request_id,
    )

    body = ErrorResponse(
        error=exc.kind.value,
        message=user_message(exc, language),
        detail=exc.detail,
        request_id=request_id,
    )
    return JSONResponse(status_code=get_status_code(exc.kind), content=body.model_dump())


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handler for all unhandled exceptions."""
    request_id = getattr(request.state, "request_id", None)

    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
        request_id=request_id,
        exc_info=True,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "ok": False,
            "error": "internal_server_error",
            "message": str(exc),
            "request_id": request_id,
        },
    )
