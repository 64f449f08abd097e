"""Error Handlers — the single recovery point that turns failures into Envelopes.

Invariants:
    - QAError → status from its kind, Envelope(error=True, message)
    - RequestValidationError in the path → InvalidIdShape; anywhere else → MalformedBody
    - Starlette 404/405 (no route for method+path) → Unmatched
    - Exception (catch-all) → 500 Envelope with X-Request-ID, never leaks internal details
    - Every framework failure is converted to a QAError first and rendered by
      render_error(), so there is exactly one place that builds error responses

Design Decisions:
    - Four-layer handler: domain (QAError), validation (Pydantic), routing
      (Starlette HTTPException), catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from qa_api.core.errors import ErrorKind, QAError
from qa_api.infrastructure.observability import REQUEST_ID_HEADER, request_id_of
from qa_api.schemas.envelope import Envelope

logger = logging.getLogger(__name__)

_UNMATCHED_STATUSES = {
    status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_qa_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def render_error(request: Request, exc: QAError) -> JSONResponse:
    """Log a classified error and build its Envelope response."""
    level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
    logger.log(
        level,
        f"QAError: {exc.message}",
        extra={
            "error_kind": exc.kind.value,
            "status_code": exc.http_status,
            "path": request.url.path,
            "request_id": request_id_of(request),
        },
    )
    return JSONResponse(
        status_code=exc.http_status,
        content=Envelope.failure(exc.message).model_dump(),
    )


def classify_validation_error(exc: RequestValidationError) -> QAError:
    """Map a FastAPI request-validation failure onto the error taxonomy."""
    errors = exc.errors()
    if any(e["loc"] and e["loc"][0] == "path" for e in errors):
        return QAError(ErrorKind.INVALID_ID_SHAPE)
    return QAError(ErrorKind.MALFORMED_BODY, _summarize(errors))


def _summarize(errors) -> str:
    parts = []
    for e in errors:
        field = ".".join(str(loc) for loc in e["loc"][1:])
        parts.append(f"{field}: {e['msg']}" if field else e["msg"])
    return "; ".join(parts)


def _register_qa_error_handler(app: FastAPI) -> None:

    @app.exception_handler(QAError)
    async def qa_error_handler(request: Request, exc: QAError):
        """Handle all classified domain/infrastructure errors."""
        return render_error(request, exc)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle path/body validation errors raised before the route runs."""
        return render_error(request, classify_validation_error(exc))


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Handle routing failures raised by Starlette itself."""
        if exc.status_code in _UNMATCHED_STATUSES:
            return render_error(request, QAError(ErrorKind.UNMATCHED))
        logger.warning(f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content=Envelope.failure(str(exc.detail)).model_dump(),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        rid = request_id_of(request)
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"request_id": rid},
        )
        # Runs outside trace_middleware, so the request id is echoed here
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=Envelope.failure("An unexpected error occurred").model_dump(),
            headers={REQUEST_ID_HEADER: rid} if rid else None,
        )
