"""
Liveness and readiness endpoints.
"""

import time
from datetime import datetime, timezone

import structlog
from fastapi import APIRouter, Depends

from voltstream import __version__
from voltstream.api.dependencies import get_database
from voltstream.api.models import ComponentHealth, HealthResponse, ReadinessResponse
from voltstream.storage.database import Database

router = APIRouter()
logger = structlog.get_logger(__name__)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


async def _check_database(db: Database) -> ComponentHealth:
    """Check database connectivity and measure latency."""
    start = time.perf_counter()
    try:
        healthy = await db.health_check()
        latency_ms = (time.perf_counter() - start) * 1000
        return ComponentHealth(
            status="healthy" if healthy else "unhealthy",
            latency_ms=round(latency_ms, 2),
        )
    except Exception as e:
        latency_ms = (time.perf_counter() - start) * 1000
        return ComponentHealth(
            status="unhealthy",
            latency_ms=round(latency_ms, 2),
            details={"error": str(e)},
        )


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness probe",
    description="Reports healthy whenever the process can serve requests.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        timestamp=_now_iso(),
        service="voltstream-feedback",
        version=__version__,
    )


@router.get(
    "/health/ready",
    response_model=ReadinessResponse,
    summary="Readiness probe",
    description="Checks that the database is reachable.",
)
async def readiness_check(
    db: Database = Depends(get_database),
) -> ReadinessResponse:
    db_health = await _check_database(db)
    if db_health.status != "healthy":
        logger.warning("Database unhealthy", details=db_health.details)

    return ReadinessResponse(
        status=db_health.status,
        timestamp=_now_iso(),
        components={"database": db_health},
    )
