# recipe_ai/core/logging.py
from __future__ import annotations

import logging
import sys
from pythonjsonlogger import jsonlogger

from recipe_ai.core import config
from recipe_ai.core.request_context import RequestIdFilter

# Anything passed via extra= that isn't listed here still lands in the JSON.
LOG_FORMAT = " ".join(
    f"%({field})s"
    for field in (
        "asctime", "levelname", "name", "message",
        "request_id", "method", "path", "status_code", "duration_ms",
    )
)

# httpx logs full request URLs at INFO, and the Gemini key travels as ?key=.
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str | None = None) -> None:
    root = logging.getLogger()
    root.setLevel((level or config.LOG_LEVEL).upper())

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(jsonlogger.JsonFormatter(LOG_FORMAT))
    handler.addFilter(RequestIdFilter())
    root.handlers = [handler]

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        lg = logging.getLogger(name)
        lg.handlers = [handler]
        lg.propagate = False

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
