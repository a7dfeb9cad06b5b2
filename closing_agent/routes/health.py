"""Health check endpoints."""

from fastapi import APIRouter

from closing_agent.core.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    """Liveness probe."""
    return {"status": "ok"}


@router.get("/health/info")
def service_info():
    """Service name and environment."""
    return {"name": settings.APP_NAME, "env": settings.APP_ENV}
