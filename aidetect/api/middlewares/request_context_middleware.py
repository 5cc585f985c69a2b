"""
Assigns a correlation id to every request and exposes it to the log processors.
"""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from aidetect.core.logging import (
    clear_request_context,
    generate_request_id,
    get_logger,
    set_request_context,
)

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or generate_request_id()
        set_request_context(request_id=request_id)
        try:
            logger.debug("request_started", method=request.method, path=request.url.path)
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            logger.debug("request_finished", status_code=response.status_code)
            return response
        finally:
            clear_request_context()
