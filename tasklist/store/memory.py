# tasklist/store/memory.py
"""
Process-local TaskStore.

Used when TASK_STORE=memory and by the test-suite. Records live in an
insertion-ordered dict, so equal ranks come back in creation order.
Every operation yields to the event loop once before touching state, the
same place a driver round-trip would suspend the caller.
"""
import asyncio
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from bson import ObjectId

from tasklist.core.exceptions import TaskNotFoundError
from tasklist.core.logging import log
from tasklist.models.task import Task


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryTaskStore:
    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._tasks: Dict[str, Task] = {}
        self._clock = clock or _utcnow

    async def list_by_owner(self, owner_id: str) -> List[Task]:
        await asyncio.sleep(0)
        owned = [t for t in self._tasks.values() if t.owner_id == owner_id]
        # sorted() is stable: ties keep insertion order
        return [t.model_copy() for t in sorted(owned, key=lambda t: t.rank)]

    async def count_by_owner(self, owner_id: str) -> int:
        await asyncio.sleep(0)
        return sum(1 for t in self._tasks.values() if t.owner_id == owner_id)

    async def get(self, task_id: str) -> Task:
        await asyncio.sleep(0)
        task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task.model_copy()

    async def insert(self, task: Task) -> Task:
        await asyncio.sleep(0)
        stored = task.model_copy(update={
            "id": str(ObjectId()),
            "created_at": task.created_at or self._clock(),
        })
        self._tasks[stored.id] = stored
        log("STORE", f"Inserted task {stored.id} for owner {stored.owner_id} at rank {stored.rank}")
        return stored.model_copy()

    async def update(self, task_id: str, fields: Dict[str, Any]) -> Task:
        await asyncio.sleep(0)
        current = self._tasks.get(task_id)
        if current is None:
            raise TaskNotFoundError(task_id)
        merged = current.model_copy(update=fields)
        self._tasks[task_id] = merged
        log("STORE", f"Updated task {task_id}", fields)
        return merged.model_copy()

    async def delete(self, task_id: str) -> None:
        await asyncio.sleep(0)
        if self._tasks.pop(task_id, None) is None:
            raise TaskNotFoundError(task_id)
        log("STORE", f"Deleted task {task_id}")

    async def purge_expired(self, cutoff: datetime) -> int:
        await asyncio.sleep(0)
        expired = [tid for tid, t in self._tasks.items() if t.created_at < cutoff]
        for tid in expired:
            del self._tasks[tid]
        return len(expired)

    def __len__(self) -> int:
        return len(self._tasks)
