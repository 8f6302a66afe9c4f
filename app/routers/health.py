"""
Liveness and readiness endpoints.

``/health`` answers without touching the store; ``/health/db`` counts the
department and staff tables and answers 503 when the store is unreachable.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.logging import logger
from app.db.session import get_db
from app.models import Department, Staff
from app.schemas.health import ServiceHealth, StoreHealth

router = APIRouter()


@router.get("", response_model=ServiceHealth)
async def service_health() -> ServiceHealth:
    return ServiceHealth(
        status="ok",
        version=settings.api.version,
        environment=settings.environment.value,
    )


@router.get(
    "/db",
    response_model=StoreHealth,
    responses={status.HTTP_503_SERVICE_UNAVAILABLE: {"model": StoreHealth}},
)
async def store_health(db: AsyncSession = Depends(get_db)):
    """Report whether the store answers and how many records it holds."""
    dialect = db.get_bind().dialect.name
    try:
        department_count = await db.scalar(select(func.count(Department.id)))
        staff_count = await db.scalar(select(func.count(Staff.id)))
    except SQLAlchemyError as e:
        logger.error(f"Store health check failed on {dialect}: {e}")
        unavailable = StoreHealth(status="unavailable", dialect=dialect)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=unavailable.model_dump(by_alias=True),
        )

    return StoreHealth(
        status="ok",
        dialect=dialect,
        department_count=department_count,
        staff_count=staff_count,
    )
