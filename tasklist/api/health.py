# tasklist/api/health.py
"""
Health check endpoints.
"""
from datetime import datetime, timezone
from fastapi import APIRouter

from tasklist import __version__
from tasklist import db
from tasklist.core.config import settings

router = APIRouter(tags=["Health"])


@router.get("/healthz")
async def healthz():
    """Simple health check."""
    return {"ok": True, "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/api/health")
async def api_health():
    """API health check, including the store backend in use."""
    payload = {
        "status": "healthy",
        "version": __version__,
        "store": settings.store.backend,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    if settings.store.backend == "mongo":
        payload["database"] = "connected" if db.is_connected() else "disconnected"
        if db.connection_error():
            payload["databaseError"] = db.connection_error()
    return payload
