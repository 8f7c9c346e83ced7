# recipe_ai/core/middleware.py
from __future__ import annotations

import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from recipe_ai.core.request_context import reset_request_id, set_request_id

log = logging.getLogger("recipe_ai.request")

# Probes hit these every few seconds; only failures are worth a line.
QUIET_PATHS = {"/health", "/health/ready", "/version"}


def _level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One "request" record per call, tagged with the X-Request-ID it echoes back."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        token = set_request_id(request_id)
        started = time.perf_counter()

        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers["X-Request-ID"] = request_id
            return response
        finally:
            path = request.url.path
            if status_code >= 400 or path not in QUIET_PATHS:
                log.log(
                    _level_for(status_code),
                    "request",
                    extra={
                        "method": request.method,
                        "path": path,
                        "status_code": status_code,
                        "duration_ms": int((time.perf_counter() - started) * 1000),
                    },
                )
            reset_request_id(token)
