"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from lease_tracker.core.config import settings
from lease_tracker.core.logging import setup_logging
from lease_tracker.routes import contracts_router, dashboard_router, health_router, upload_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging on startup."""
    setup_logging()
    logger.info(
        "Starting %s (%s, persistence=%s)",
        settings.APP_NAME,
        settings.APP_ENV,
        settings.PERSISTENCE_BACKEND,
    )
    yield


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# Register routers
app.include_router(health_router)
app.include_router(contracts_router)
app.include_router(dashboard_router)
app.include_router(upload_router)
