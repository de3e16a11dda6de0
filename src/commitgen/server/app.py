# File: src/commitgen/server/app.py
# Purpose: FastAPI application exposing commit message generation
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Request
import structlog

from commitgen import __version__
from commitgen.config import Settings, get_settings
from commitgen.core.generator import CommitMessageGenerator
from commitgen.errors import ClassifiedError
from commitgen.infrastructure.logging.setup import setup_logging
from commitgen.server.error_handler import classified_error_handler, global_exception_handler
from commitgen.server.request_id import RequestIDMiddleware
from commitgen.server.schemas import CommitMessageRequest, CommitMessageResponse, ErrorResponse

logger = structlog.get_logger(__name__)
router = APIRouter()

# Stateless, shared by all worker threads
_generator = CommitMessageGenerator()


def get_generator() -> CommitMessageGenerator:
    return _generator


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.post(
    "/commit-message",
    response_model=CommitMessageResponse,
    responses={403: {"model": ErrorResponse}, 409: {"model": ErrorResponse},
               502: {"model": ErrorResponse}, 504: {"model": ErrorResponse}},
)
def generate_commit_message(
    request: Request,
    body: Optional[CommitMessageRequest] = None,
    settings: Settings = Depends(get_app_settings),
    generator: CommitMessageGenerator = Depends(get_generator),
):
    """
    Run the configured LLM command and return the commit message.

    Declared sync so FastAPI runs the blocking subprocess wait in its
    thread pool; concurrent requests each own their process and deadline.
    """
    request.state.language = (body.language if body else None) or settings.LANGUAGE
    message = generator.generate(settings.invocation_config())
    return CommitMessageResponse(message=message.text, warnings=list(message.warnings))


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title="commitgen",
        description="Commit message generation through a user-configured LLM command",
        version=__version__,
    )
    app.state.settings = settings
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(ClassifiedError, classified_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(router, prefix="/api/v1", tags=["commit"])

    @app.get("/health")
    async def health_check():
        """Basic health check endpoint"""
        return {
            "status": "ok",
            "service": "commitgen",
            "version": __version__,
            "llm_enabled": settings.LLM_ENABLED,
        }

    logger.info("application_created", llm_enabled=settings.LLM_ENABLED)
    return app


def main() -> None:
    import uvicorn

    settings = get_settings()
    setup_logging(
        log_level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR or None,
        json_output=settings.LOG_JSON,
    )
    uvicorn.run(create_app(settings), host="127.0.0.1", port=18890)
