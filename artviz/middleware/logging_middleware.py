"""
Request logging middleware with correlation IDs for request tracing.
"""
import logging
import re
import time
import uuid
from contextvars import ContextVar
from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

# Request ID shared across the awaits of one request
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

logger = logging.getLogger(__name__)

# Incoming IDs are echoed into every log line; anything else gets a fresh ID
REQUEST_ID_PATTERN = re.compile(r"[\w-]{1,64}", re.ASCII)


def get_request_id() -> str:
    """Get the current request ID from context."""
    return request_id_var.get()


def resolve_request_id(header_value: Optional[str]) -> str:
    """Honour a well-formed incoming X-Request-ID, otherwise mint a short one."""
    if header_value and REQUEST_ID_PATTERN.fullmatch(header_value):
        return header_value
    return str(uuid.uuid4())[:8]


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Assigns a short request ID to each request, logs start and end with
    timing, and echoes the ID back in the ``X-Request-ID`` header.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = resolve_request_id(request.headers.get("x-request-id"))
        token = request_id_var.set(request_id)

        path = request.url.path
        start_time = time.time()
        logger.info(
            f"[{request_id}] → {request.method} {path}",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": path,
                "phase": "request_start",
            },
        )

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            logger.error(
                f"[{request_id}] ✗ Error: {str(e)[:100]} ({duration_ms:.0f}ms)",
                extra={
                    "request_id": request_id,
                    "error": str(e),
                    "duration_ms": duration_ms,
                    "phase": "request_error",
                },
                exc_info=True,
            )
            raise
        finally:
            request_id_var.reset(token)

        duration_ms = (time.time() - start_time) * 1000
        log_level = logging.INFO if response.status_code < 400 else logging.WARNING
        logger.log(
            log_level,
            f"[{request_id}] ← {response.status_code} ({duration_ms:.0f}ms)",
            extra={
                "request_id": request_id,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
                "phase": "request_end",
            },
        )

        response.headers["X-Request-ID"] = request_id
        return response


class ContextualLogger:
    """
    Logger wrapper that prefixes messages with the current request ID.
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _format_msg(self, msg: str) -> str:
        request_id = get_request_id()
        return f"[{request_id}] {msg}" if request_id else msg

    def debug(self, msg: str, *args, **kwargs):
        self.logger.debug(self._format_msg(msg), *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        self.logger.info(self._format_msg(msg), *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        self.logger.warning(self._format_msg(msg), *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        self.logger.error(self._format_msg(msg), *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        self.logger.exception(self._format_msg(msg), *args, **kwargs)


def get_logger(name: str) -> ContextualLogger:
    """Get a contextual logger that includes the request ID."""
    return ContextualLogger(name)
