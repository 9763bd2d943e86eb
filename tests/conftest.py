# tests/conftest.py
"""
Shared pytest fixtures for the task list service.

Provides:
- A fresh in-memory store per test (with a controllable clock)
- A TaskService over that store
- An httpx AsyncClient wired to the app with the store overridden
- A MongoDB-backed store, only when MONGO_TEST_URI is set
"""
import os

os.environ.setdefault("TASK_STORE", "memory")
os.environ.setdefault("RATE_LIMIT", "10000/minute")

from datetime import datetime, timezone

import pytest
from faker import Faker
from httpx import AsyncClient, ASGITransport

from tasklist.api.tasks import get_task_store
from tasklist.main import app
from tasklist.services.task_service import TaskService
from tasklist.store.memory import InMemoryTaskStore

fake = Faker()


class FrozenClock:
    """Clock the in-memory store reads created_at from; tests move it by hand."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


# ═══════════════════════════════════════════════════════
# FIXTURES - Store / Service
# ═══════════════════════════════════════════════════════

@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
def clock():
    return FrozenClock(datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def store(clock):
    return InMemoryTaskStore(clock=clock)


@pytest.fixture
def service(store):
    return TaskService(store)


@pytest.fixture
def owner_id():
    return f"user-{fake.uuid4()}"


# ═══════════════════════════════════════════════════════
# FIXTURES - HTTP
# ═══════════════════════════════════════════════════════

@pytest.fixture
async def async_client(store):
    """Async HTTP client for testing FastAPI endpoints."""
    app.dependency_overrides[get_task_store] = lambda: store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
async def client(async_client):
    """Alias for async_client - use either name in tests."""
    return async_client


# ═══════════════════════════════════════════════════════
# FIXTURES - MongoDB (optional)
# ═══════════════════════════════════════════════════════

@pytest.fixture
async def mongo_store():
    uri = os.getenv("MONGO_TEST_URI")
    if not uri:
        pytest.skip("MONGO_TEST_URI not set")

    from tasklist.db import connect_db, disconnect_db
    from tasklist.store.beanie_store import BeanieTaskStore, TaskDocument

    await connect_db(uri)
    await TaskDocument.find_all().delete()
    yield BeanieTaskStore()
    await TaskDocument.find_all().delete()
    await disconnect_db()
