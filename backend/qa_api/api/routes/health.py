"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if database is unreachable (readiness)
    - Probes are operational endpoints and do not use the Envelope shape
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from qa_api.api.dependencies import get_store
from qa_api.infrastructure.repositories import Store

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "qa-api"}


@router.get("/ready")
async def readiness_check(store: Store = Depends(get_store)):
    """Readiness probe — includes database connectivity."""
    if not await store.db.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
