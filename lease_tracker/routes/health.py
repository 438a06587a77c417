"""Health check endpoints."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from lease_tracker.core.config import settings
from lease_tracker.deps import get_store
from lease_tracker.store.contract_store import ContractStore
from lease_tracker.store.contracts import PersistenceError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    """Liveness probe."""
    return {"status": "ok"}


@router.get("/health/ready")
def readiness_check(store: ContractStore = Depends(get_store)):
    """Readiness probe - checks the persistence backend."""
    checks = {"backend": settings.PERSISTENCE_BACKEND}
    all_ok = True

    ping = getattr(store.persistence, "ping", None)
    if ping is None:
        checks["persistence"] = "ok"
    else:
        try:
            ping()
            checks["persistence"] = "ok"
        except PersistenceError as e:
            logger.warning("Readiness check failed: %s", e)
            checks["persistence"] = f"error: {e}"
            all_ok = False

    checks["contracts"] = len(store.all())

    return JSONResponse(
        status_code=200 if all_ok else 503,
        content={"status": "ok" if all_ok else "degraded", "checks": checks},
    )
