from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.db import get_db
from app.core.errors import DatabaseError

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    summary="Service health check",
    description="Reports that the service is running. Does not touch the database.",
    response_description="Service status",
)
def health():
    return {
        "status": "ok",
        "service": settings.app_name,
        "environment": settings.environment,
    }


@router.get(
    "/health/db",
    summary="Database health check",
    description=(
        "Runs `SELECT 1` against the configured database. A 500 here usually means "
        "the database is unreachable or `DATABASE_URL` is wrong."
    ),
    response_description="Database connection status",
)
async def health_db(db: AsyncSession = Depends(get_db)):
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        raise DatabaseError(f"Database unavailable: {e}") from e
    return {"status": "ok", "db": "ok"}
