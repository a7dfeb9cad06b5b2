"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from closing_agent.core.config import settings
from closing_agent.core.logging import setup_logging
from closing_agent.routes import documents_router, health_router, timeline_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging on startup."""
    setup_logging()
    logger.info("Starting %s (%s)", settings.APP_NAME, settings.APP_ENV)
    yield


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# Register routers
app.include_router(health_router)
app.include_router(timeline_router)
app.include_router(documents_router)
