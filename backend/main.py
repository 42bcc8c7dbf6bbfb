"""
Medical AI Relay - Backend
FastAPI application relaying prompts and report images to OpenAI.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from medrelay.api.routers import api_router
from medrelay.config.log_config import configure_logging
from medrelay.config.media import configure_cloudinary
from medrelay.config.settings import get_settings
from medrelay.middleware.error_handling import ErrorHandlingMiddleware, request_validation_handler
from medrelay.middleware.request_logging import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager."""
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} ({settings.environment})")

    if not settings.supabase_configured:
        logger.error("Supabase configuration missing! Check SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY")
    if not settings.openai_configured:
        logger.error("OpenAI configuration missing! Check OPENAI_API_KEY")
    configure_cloudinary()

    yield

    logger.info("Shutting down...")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Relays medical prompts and report images to an LLM",
        version="1.0.0",
        lifespan=lifespan,
        redirect_slashes=False,
    )

    app.add_middleware(ErrorHandlingMiddleware)
    if settings.enable_request_logging:
        app.add_middleware(RequestLoggingMiddleware)

    # Added last so it is outermost and error responses carry CORS headers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(api_router)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_local,
    )
