"""Global exception handlers for consistent error responses.

Every failure leaves the API as ``{"error": "<message>"}``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from smartparenting.core.exceptions import AppException

logger = logging.getLogger("smartparenting.exception")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle all AppException subclasses."""
    extra = {
        "method": request.method,
        "path": request.url.path,
        "status_code": exc.status_code,
        "error_type": exc.error_type,
    }
    if exc.status_code >= 500:
        logger.error(
            "AppException: %s - %s",
            exc.error_type,
            exc.message,
            extra=extra,
            exc_info=exc.__cause__ is not None,
        )
    else:
        logger.info("AppException: %s - %s", exc.error_type, exc.message, extra=extra)
    return _error(exc.status_code, exc.message)


def http_exception_handler(
    _request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle HTTPException raised by the framework (404, 405, ...)."""
    return _error(exc.status_code, str(exc.detail))


def validation_exception_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Flatten Pydantic request errors into a single message."""
    messages = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"] if loc != "body")
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])
    return _error(422, "; ".join(messages))


def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected errors."""
    logger.error(
        "Unhandled exception: %s %s - %s",
        request.method,
        request.url.path,
        exc,
        extra={"method": request.method, "path": request.url.path, "status_code": 500},
        exc_info=True,
    )
    return _error(500, "Server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
