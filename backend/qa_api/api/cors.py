"""CORS Policy — Starlette CORSMiddleware whose rejections use the Envelope shape.

Invariants:
    - Allowed origins/methods/headers come from settings (defaults: any origin,
      GET/POST/PUT/DELETE, Content-Type)
    - A rejected preflight answers 403 with Envelope(error=True), classified as CorsRejected
    - Accepted preflights and simple requests are untouched
"""

import logging

from fastapi import status
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import Response

from qa_api.core.errors import ErrorKind, QAError
from qa_api.schemas.envelope import Envelope

logger = logging.getLogger(__name__)


class EnvelopeCORSMiddleware(CORSMiddleware):
    """CORSMiddleware that reports disallowed preflights as CorsRejected."""

    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers)
        if response.status_code == status.HTTP_200_OK:
            return response
        exc = QAError(ErrorKind.CORS_REJECTED, bytes(response.body).decode())
        logger.warning(
            f"QAError: {exc.message}",
            extra={
                "error_kind": exc.kind.value,
                "status_code": exc.http_status,
                "method": request_headers.get("access-control-request-method"),
            },
        )
        return JSONResponse(
            status_code=exc.http_status,
            content=Envelope.failure(exc.message).model_dump(),
        )
