"""
Middleware - request tracing and the unified error envelope
"""
import time
from typing import Callable, Optional
from uuid import uuid4

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from standards_compare.core.errors import BaseApplicationError
from standards_compare.core.logging import LogEvent, create_request_logger, get_logger

logger = get_logger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Assigns a request id and records processing time"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = str(uuid4())
        request.state.request_id = request_id
        start_time = time.time()

        response = await call_next(request)

        process_time = time.time() - start_time
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = str(process_time)

        create_request_logger(request_id).debug(
            LogEvent.REQUEST_COMPLETED,
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration=round(process_time, 4),
        )
        return response


def _error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: Optional[dict] = None
) -> JSONResponse:
    """Build the unified error response"""
    request_id = getattr(request.state, "request_id", None)
    content = {
        "error": {
            "code": error_code,
            "message": message,
            "details": details or {},
            "request_id": request_id
        }
    }
    headers = {"X-Request-ID": request_id} if request_id else None
    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def application_error_handler(request: Request, exc: BaseApplicationError) -> JSONResponse:
    logger.info(
        LogEvent.REQUEST_FAILED,
        path=request.url.path,
        **exc.to_dict(),
    )
    return _error_response(
        request,
        status_code=exc.status_code,
        error_code=exc.error_code.value,
        message=exc.message,
        details=exc.details,
    )


async def http_error_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return _error_response(
        request,
        status_code=exc.status_code,
        error_code="HTTP_ERROR",
        message=str(exc.detail),
    )


def make_unhandled_error_handler(development: bool) -> Callable:
    """Handler for unexpected exceptions; exposes the message only in development"""

    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            LogEvent.REQUEST_FAILED,
            path=request.url.path,
            error=str(exc),
            exc_info=True,
        )
        details = {"type": type(exc).__name__}
        message = str(exc) if development else "An unexpected error occurred"
        return _error_response(
            request,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_code="INTERNAL_ERROR",
            message=message,
            details=details,
        )

    return unhandled_error_handler
