"""Operational endpoints: liveness with a database probe."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text

from src.tasktracker.core.db import get_session
from src.tasktracker.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", include_in_schema=False)
async def health() -> JSONResponse:
    """Report 200 when the database answers, 503 otherwise."""
    try:
        async with get_session() as session:
            await session.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("Database probe failed", error=str(e))
        return JSONResponse(
            content={"status": "unhealthy", "database": f"unhealthy: {e}"},
            status_code=503,
        )

    return JSONResponse(content={"status": "healthy", "database": "healthy"})
