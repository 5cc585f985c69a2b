"""
structlog setup for the analysis service.

Every entry carries the service identity; entries emitted while a request is
in flight also carry its correlation id.
"""

from __future__ import annotations

import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Any

import structlog
from structlog.types import EventDict, FilteringBoundLogger

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)

_service: dict[str, str] = {
    "service": "aidetect",
    "version": "0.0.0",
    "environment": "development",
}

# Libraries that log every request at INFO
_NOISY_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def set_service_context(name: str, version: str, environment: str) -> None:
    _service.update(service=name, version=version, environment=environment)


def add_service_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    for key, value in _service.items():
        event_dict.setdefault(key, value)
    return event_dict


def add_request_id(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    request_id = _request_id.get()
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


def setup_logging(level: str = "INFO", json_logs: bool = True) -> None:
    """Route structlog through stdlib logging on stdout.

    JSON lines in production, the console renderer when ``json_logs`` is off.
    """
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level.upper())
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            add_service_context,
            add_request_id,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> FilteringBoundLogger:
    return structlog.get_logger(name or __name__)


def generate_request_id() -> str:
    return uuid.uuid4().hex


def set_request_context(request_id: str | None = None) -> None:
    if request_id:
        _request_id.set(request_id)


def clear_request_context() -> None:
    _request_id.set(None)
