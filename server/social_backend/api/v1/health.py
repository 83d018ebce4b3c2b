"""Health check endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, status
from sqlalchemy import text

from social_backend.db.data_source import DataSource
from social_backend.db.session import get_data_source

router = APIRouter()


async def check_database(data_source: DataSource) -> dict[str, Any]:
    """Check database connectivity."""
    try:
        async with data_source.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return {"status": "healthy", "message": "Database connection successful"}
    except Exception as e:
        return {"status": "unhealthy", "message": str(e)}


async def check_migrations(data_source: DataSource) -> dict[str, Any]:
    """Report the migration revision recorded in the database."""
    try:
        revision = await data_source.current_revision()
        return {
            "status": "healthy",
            "revision": revision,
            "discovered": len(data_source.discover_migrations()),
        }
    except Exception as e:
        return {"status": "unhealthy", "message": str(e)}


@router.get("", status_code=status.HTTP_200_OK)
async def health_check() -> dict[str, str]:
    """Simple health check endpoint."""
    return {"status": "healthy"}


@router.get("/detailed", status_code=status.HTTP_200_OK)
async def detailed_health_check(
    data_source: Annotated[DataSource, Depends(get_data_source)],
) -> dict[str, Any]:
    """Detailed health check with component status."""
    db_status = await check_database(data_source)
    migrations_status = await check_migrations(data_source)

    all_healthy = db_status["status"] == "healthy" and migrations_status["status"] == "healthy"

    return {
        "status": "healthy" if all_healthy else "degraded",
        "components": {
            "database": db_status,
            "migrations": migrations_status,
        },
    }
