"""
Response middleware for automatic standardized API response wrapping.
"""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse
import json
from typing import Any

from aidetect.api.v1.controllers.proxy import PROXY_PATH
from aidetect.core.logging import get_logger

logger = get_logger(__name__)

# Responses on these paths are passed through untouched
UNWRAPPED_PATHS = ("/openapi.json", "/docs", "/redoc", PROXY_PATH)


class StandardResponseMiddleware(BaseHTTPMiddleware):
    """
    Middleware that wraps all successful JSON responses as {"data": ...}.

    The proxy route relays the upstream body verbatim and is never wrapped.
    """

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        if request.url.path in UNWRAPPED_PATHS:
            return response

        # Only process successful JSON responses (200-299 status codes)
        if not (200 <= response.status_code < 300):
            return response

        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type:
            return response

        try:
            body = b""
            async for chunk in response.body_iterator:
                body += chunk

            if not body:
                return response

            data = json.loads(body.decode())

            # If already wrapped with 'status', return as-is
            if isinstance(data, dict) and "status" in data:
                headers = {k: v for k, v in response.headers.items()
                          if k.lower() not in ["content-length", "transfer-encoding"]}
                return JSONResponse(
                    content=data,
                    status_code=response.status_code,
                    headers=headers
                )

            new_response = JSONResponse(
                content=self._wrap_response(data),
                status_code=response.status_code,
            )

            # JSONResponse sets its own Content-Length and Content-Type
            for key, value in response.headers.items():
                if key.lower() in ["content-length", "content-type", "transfer-encoding"]:
                    continue
                new_response.headers.append(key, value)

            return new_response

        except Exception as e:
            logger.error(
                "response_middleware_error",
                error=str(e),
                path=request.url.path
            )
            # The body iterator is consumed at this point
            return JSONResponse(
                status_code=500,
                content={"status": "error", "code": 500, "message": "Internal server error"},
            )

    def _wrap_response(self, data: Any) -> dict:
        return {"data": data}
