"""Logging setup for the identity service.

Logs go to stdout, as text or one JSON object per line. Configuration is read
straight from the environment so it can run before Settings are loaded.
"""

from __future__ import annotations

import json
import logging
import logging.config
import os
import sys
import time
from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI, Request
from starlette.responses import Response

# Record attributes copied into JSON output when a call site passes them in ``extra``.
_EXTRA_KEYS = (
    "method",
    "path",
    "status_code",
    "duration_ms",
    "client_ip",
    "error_type",
    "user_id",
    "role",
)


def env_flag(name: str, *, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "t", "yes", "y", "on"}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            if key in record.__dict__:
                payload[key] = record.__dict__[key]
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging() -> None:
    """Install the root handler and route uvicorn loggers through it.

    Env vars:
    - LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: INFO)
    - LOG_JSON: emit JSON lines instead of text (default: false)
    - LOG_REQUESTS: per-request access lines from our middleware (default: true);
      uvicorn's own access log is silenced while this is on.
    """
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    formatter = "json" if env_flag("LOG_JSON", default=False) else "text"
    access_level = "WARNING" if env_flag("LOG_REQUESTS", default=True) else "INFO"

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "text": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                },
                "json": {"()": "smartparenting.core.logging.JsonFormatter"},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": level,
                    "formatter": formatter,
                    "stream": sys.stdout,
                }
            },
            "root": {"handlers": ["console"], "level": level},
            "loggers": {
                "uvicorn": {"level": level, "propagate": True},
                "uvicorn.error": {"level": level, "propagate": True},
                "uvicorn.access": {"level": access_level, "propagate": True},
            },
        }
    )


def add_request_logging(app: FastAPI) -> None:
    """Log one line per request with its status and duration."""
    if not env_flag("LOG_REQUESTS", default=True):
        return

    request_logger = logging.getLogger("smartparenting.request")

    @app.middleware("http")
    async def log_request(request: Request, call_next) -> Response:
        start = time.perf_counter()
        status_code: int | None = None
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration_ms = round((time.perf_counter() - start) * 1000.0, 2)
            log = (
                request_logger.error
                if status_code is None or status_code >= 500
                else request_logger.info
            )
            # Path parameters may carry emails or phones; keep them in the log
            # line but never the request body.
            log(
                "%s %s -> %s (%.2fms)",
                request.method,
                request.url.path,
                status_code,
                duration_ms,
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": status_code,
                    "duration_ms": duration_ms,
                    "client_ip": request.client.host if request.client else None,
                },
            )
