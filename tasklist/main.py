# tasklist/main.py
"""
Task list service - FastAPI application.
"""
import asyncio
import uvicorn
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

# Rate limiting
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from tasklist import __version__
from tasklist.core.config import settings
from tasklist.core.exceptions import StoreError, ValidationError
from tasklist.core.logging import log, log_section
from tasklist.lib.monitoring import record_failure, register_monitoring
from tasklist.services.expiry import run_expiry_sweeper
from tasklist.store import build_store


# ---------------------------------------------------------------------------
# LIFESPAN
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the store and start the retention sweep; undo both on shutdown."""
    log_section("STARTUP", f"Task list service starting (store={settings.store.backend})")

    if settings.store.backend == "mongo":
        from tasklist.db import connect_db
        await connect_db()

    app.state.store = build_store(settings)
    sweeper = asyncio.create_task(
        run_expiry_sweeper(
            app.state.store,
            interval_seconds=settings.expiry.sweep_interval_seconds,
            retention_seconds=settings.expiry.retention_seconds,
        )
    )

    try:
        yield
    finally:
        log("STARTUP", "Shutting down...")
        sweeper.cancel()
        try:
            await sweeper
        except asyncio.CancelledError:
            pass
        if settings.store.backend == "mongo":
            from tasklist.db import disconnect_db
            await disconnect_db()


# ---------------------------------------------------------------------------
# APP INITIALIZATION
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Task List",
    version=__version__,
    lifespan=lifespan,
)

register_monitoring(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)
log("STARTUP", f"Rate limiting enabled: {settings.rate_limit}")


# ---------------------------------------------------------------------------
# ERROR HANDLERS
# ---------------------------------------------------------------------------

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    log("TASKS", f"{request.method} {request.url.path} failed: {exc.message}")
    record_failure(exc.operation)
    return JSONResponse(status_code=500, content={"error": "Internal storage error"})


# ---------------------------------------------------------------------------
# API ROUTES
# ---------------------------------------------------------------------------

from tasklist.api import health, tasks

app.include_router(health.router)
app.include_router(tasks.router)

for route in app.routes:
    if hasattr(route, "path") and hasattr(route, "methods"):
        log("ROUTES", f"{', '.join(sorted(route.methods))} {route.path}")


# ---------------------------------------------------------------------------
# RUN
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    uvicorn.run("tasklist.main:app", host="0.0.0.0", port=settings.port)
