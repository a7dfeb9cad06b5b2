"""API routes package."""

from closing_agent.routes.documents import router as documents_router
from closing_agent.routes.health import router as health_router
from closing_agent.routes.timeline import router as timeline_router

__all__ = ["documents_router", "health_router", "timeline_router"]
