"""
Error bodies for the analysis API.

Every error is returned as {"status": "error", "code": ..., "message": ...}.
Messages are fixed strings; exception details only reach the log.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from aidetect.core.logging import get_logger

logger = get_logger(__name__)

INVALID_REQUEST_DATA_MSG = "Invalid request data"
INVALID_REQUEST_MSG = "Invalid request"
INTERNAL_ERROR_MSG = "Internal server error"


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "code": status_code, "message": message},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Routing errors and explicit HTTPExceptions (unknown sample kind, 404, 405)."""
    logger.warning(
        "http_exception",
        path=request.url.path,
        method=request.method,
        status_code=exc.status_code,
        detail=exc.detail,
    )
    return _error_response(exc.status_code, str(exc.detail) if exc.detail else "An error occurred")


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(
        "request_validation_failed",
        path=request.url.path,
        errors=[{"loc": e.get("loc"), "msg": e.get("msg")} for e in exc.errors()],
    )
    return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, INVALID_REQUEST_DATA_MSG)


async def value_error_exception_handler(request: Request, exc: ValueError) -> JSONResponse:
    """ValueError from the service layer, EmptyInputError included, is a 400."""
    logger.error(
        "value_error_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return _error_response(status.HTTP_400_BAD_REQUEST, INVALID_REQUEST_MSG)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unexpected_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exc_info=True,
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MSG)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValueError, value_error_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
