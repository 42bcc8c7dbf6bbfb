"""
Error handling middleware.
Single top-level handler turning every failure into a `{"error": message}` body.
"""
import logging
from typing import Callable

from fastapi import Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from medrelay.utils.exceptions import RelayError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def format_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into one readable line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "Invalid request: " + "; ".join(parts) if parts else "Invalid request"


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Exception handler for request bodies that cannot be parsed at all."""
    message = format_validation_errors(exc)
    logger.warning(
        "Validation error",
        extra={"path": request.url.path, "method": request.method, "errors": exc.errors()},
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Middleware for centralized error handling and logging."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)

        except RelayError as e:
            logger.warning(
                f"{type(e).__name__}: {e.message}",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "status_code": e.status_code,
                },
            )
            return error_response(e.status_code, e.message)

        except Exception as e:
            logger.error(
                "Unhandled error",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
                exc_info=True,
            )
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                str(e) or "Internal Server Error",
            )
