"""Health Probes — liveness and readiness for container orchestration.

Invariants:
    - GET /health/ answers 200 whenever the process can serve requests
    - GET /health/ready answers 503 until the database responds
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from pursuit import __version__
from pursuit.infrastructure import database

router = APIRouter(prefix="/api/v1/health", tags=["health"])


async def _database_ok() -> bool:
    manager = database.db_manager
    return manager is not None and await manager.health_check()


@router.get("/", status_code=status.HTTP_200_OK)
async def liveness():
    return {"status": "healthy", "service": "pursuit-filters-api", "version": __version__}


@router.get("/ready")
async def readiness():
    """503 with a reason while the database is unreachable."""
    if not await _database_ok():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "checks": {"database": "unavailable"}},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
