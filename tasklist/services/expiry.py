# tasklist/services/expiry.py
"""
Retention sweep.

A small polling loop, started once per process, that removes every task
older than the retention window. It runs on its own schedule and never
coordinates with request handlers: a task may vanish between a list and a
later update, which then sees "not found".
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone

from tasklist.core.exceptions import StoreError
from tasklist.core.logging import log
from tasklist.lib.monitoring import record_expired
from tasklist.store.base import TaskStore


async def sweep_expired(
    store: TaskStore,
    retention_seconds: float,
    now: datetime | None = None,
) -> int:
    """Delete tasks whose created_at is older than now - retention. Returns the count."""
    now = now or datetime.now(timezone.utc)
    cutoff = now - timedelta(seconds=retention_seconds)
    removed = await store.purge_expired(cutoff)
    record_expired(removed)
    if removed:
        log("EXPIRY", f"Removed {removed} expired task(s) created before {cutoff.isoformat()}")
    return removed


async def run_expiry_sweeper(
    store: TaskStore,
    *,
    interval_seconds: float,
    retention_seconds: float,
) -> None:
    """Sweep forever until cancelled. A failed pass is logged and retried next tick."""
    log("EXPIRY", f"Sweeper started (every {interval_seconds}s, retention {retention_seconds}s)")
    try:
        while True:
            try:
                await sweep_expired(store, retention_seconds)
            except StoreError as e:
                log("EXPIRY", f"Sweep failed: {e.message}")
            await asyncio.sleep(interval_seconds)
    finally:
        log("EXPIRY", "Sweeper stopped")
