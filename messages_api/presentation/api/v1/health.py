from typing import Annotated

import structlog
from fastapi import APIRouter, Depends

from ....infrastructure.logging import Timer
from ....infrastructure.persistence import Database
from ..dependencies import get_database

router = APIRouter(tags=["health"])
logger = structlog.get_logger()


@router.get("/health", summary="Health check")
async def health() -> dict:
    """Liveness only; touches nothing."""
    return {"status": "healthy"}


@router.get("/health/ready", summary="Readiness check")
async def readiness(db: Annotated[Database, Depends(get_database)]) -> dict:
    """Ready once the database answers and the users/messages tables exist."""
    checks = {}

    try:
        with Timer() as t:
            await db.ping()
        checks["database"] = {"status": "healthy", "latency_ms": t.duration_ms}
    except Exception as e:
        logger.error("Database health check failed", error=str(e))
        checks["database"] = {"status": "unhealthy", "error": str(e)}

    if checks["database"]["status"] == "healthy":
        missing = await db.missing_tables()
        if missing:
            logger.warning("Message schema incomplete", missing_tables=missing)
        checks["schema"] = {
            "status": "unhealthy" if missing else "healthy",
            "missing_tables": missing,
        }

    all_healthy = all(c.get("status") == "healthy" for c in checks.values())

    return {
        "status": "ready" if all_healthy else "degraded",
        "checks": checks,
    }
