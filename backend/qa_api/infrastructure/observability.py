"""Structured Logging — JSON formatter, setup and per-request trace middleware.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (request_id, method, path, status_code, error_kind) surfaced when present
    - Every response carries an X-Request-ID header (propagated or generated),
      CORS rejections and unhandled 500s included
    - One access log line per request that produces a response; an unhandled
      exception is logged by the catch-all handler instead

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once on startup via lifespan
"""

import json
import logging
import time
import uuid
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone

from fastapi import Request, Response

REQUEST_ID_HEADER = "X-Request-ID"

_EXTRA_KEYS = (
    "request_id", "method", "path", "status_code",
    "duration_ms", "error_kind", "question_id", "answer_id",
)

access_logger = logging.getLogger("qa_api.access")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))


def request_id_of(request: Request) -> str | None:
    """Request id assigned by trace_middleware, if it ran."""
    return getattr(request.state, "request_id", None)


async def trace_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Attach a correlation id to the request, echo it back and log the request."""
    rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    request.state.request_id = rid
    started = time.perf_counter()
    response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = rid
    access_logger.info(
        f"{request.method} {request.url.path} -> {response.status_code}",
        extra={
            "request_id": rid,
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": round((time.perf_counter() - started) * 1000, 2),
        },
    )
    return response
