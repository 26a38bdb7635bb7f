"""Health check endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pixsearch.db.utils import check_database_health
from pixsearch.dependencies import get_db
from pixsearch.schemas import HealthCheckResponse

router = APIRouter()


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(db: AsyncSession = Depends(get_db)):
    """Return service health status.

    Only the database is probed; the image provider is not called so the
    health check never spends API quota.
    """
    db_health = await check_database_health(db)
    db_status = "ok" if db_health["healthy"] else f"error: {db_health['error']}"

    services = {"database": db_status}
    overall_status = "ok" if all(s == "ok" for s in services.values()) else "degraded"

    return HealthCheckResponse(
        status=overall_status,
        database=db_status,
        services=services,
    )
