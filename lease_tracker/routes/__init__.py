"""API routes package."""

from lease_tracker.routes.contracts import router as contracts_router
from lease_tracker.routes.dashboard import router as dashboard_router
from lease_tracker.routes.health import router as health_router
from lease_tracker.routes.upload import router as upload_router

__all__ = ["contracts_router", "dashboard_router", "health_router", "upload_router"]
