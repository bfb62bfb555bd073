"""Health check endpoints."""
import logging

from fastapi import APIRouter, Request

from ..core.database import health_check_db

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
async def health_check(request: Request):
    """Basic health check"""
    settings = request.app.state.settings
    return {
        "status": "healthy",
        "service": "Dojo API",
        "version": settings.app_version,
        "environment": settings.environment,
    }


@router.get("/db")
async def database_health(request: Request):
    """Database connectivity check"""
    healthy = await health_check_db(request.app.state.engine)
    if not healthy:
        logger.warning("Database health check reported unhealthy")
    return {
        "status": "healthy" if healthy else "unhealthy",
        "database": request.app.state.engine.dialect.name,
    }
