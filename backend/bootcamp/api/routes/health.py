"""Health Probes — liveness and readiness.

Invariants:
    - GET /api/v1/health/ answers 200 whenever the process is serving
    - GET /api/v1/health/ready answers 503 when the database is unreachable
    - A disabled mail transport is reported but does not fail readiness
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])

SERVICE = "bootcamp-api"


@router.get("/")
async def liveness():
    return {"status": "healthy", "service": SERVICE, "version": "1.0.0"}


@router.get("/ready")
async def readiness(request: Request):
    """Database connectivity plus mail transport state."""
    manager = getattr(request.app.state, "db", None)
    mailer = getattr(request.app.state, "mailer", None)
    checks = {
        "database": "healthy" if manager and await manager.health_check() else "unavailable",
        "mail": "enabled" if getattr(mailer, "enabled", False) else "disabled",
    }
    if checks["database"] != "healthy":
        logger.warning("Readiness check failed: database unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "checks": checks},
        )
    return {"status": "ready", "checks": checks}
