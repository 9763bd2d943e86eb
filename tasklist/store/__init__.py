# tasklist/store/__init__.py
"""
Storage adapters and the factory that picks one from settings.
"""
from tasklist.core.config import Settings
from tasklist.store.base import TaskStore
from tasklist.store.memory import InMemoryTaskStore


def build_store(config: Settings) -> TaskStore:
    """Return the TaskStore named by TASK_STORE ("mongo" or "memory")."""
    backend = config.store.backend
    if backend == "memory":
        return InMemoryTaskStore()
    if backend == "mongo":
        from tasklist.store.beanie_store import BeanieTaskStore
        return BeanieTaskStore()
    raise ValueError(f"Unknown TASK_STORE backend: {backend!r}")


__all__ = ["TaskStore", "InMemoryTaskStore", "build_store"]
