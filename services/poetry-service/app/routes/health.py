"""
Health Routes
"""

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import PlainTextResponse
import logging

from app.utils.dependencies import DatabaseDep
from app.utils.database import DATABASE_ERRORS

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def root():
    return "Dead Poets API is running..."


@router.get("/health")
async def health_check(request: Request):
    """Service health check"""
    settings = request.app.state.settings
    return {
        "status": "healthy",
        "service": "poetry-service",
        "version": settings.version
    }


@router.get("/health/database")
async def database_health_check(db: DatabaseDep):
    """Database connection health check"""
    try:
        await db.ping()
    except (RuntimeError, *DATABASE_ERRORS) as e:
        logger.error(f"Database health check failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database connection failed"
        )

    return {
        "status": "healthy",
        "database": "connected"
    }
