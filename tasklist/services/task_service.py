# tasklist/services/task_service.py
"""
Ordering engine.

Owns the rank rules for one owner's list:
- create appends at the end: rank = number of tasks the owner has right now
- update and batch reorder overwrite ranks verbatim
- delete and expiry remove records without renumbering the survivors

None of this is transactional. Create reads the count and inserts in two
separate store calls, so concurrent creates for one owner can receive the
same rank. Batch reorder fires every update at once and does not roll back
the ones that succeeded when another fails.
"""
import asyncio
from typing import Any, Dict, Iterable, List, Optional

from tasklist.core.config import settings
from tasklist.core.exceptions import TaskNotFoundError, ValidationError
from tasklist.core.logging import log
from tasklist.models.task import ReorderItem, Task, TaskCreate
from tasklist.store.base import TaskStore

NULLABLE_FIELDS = {"due_at"}


def _blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


class TaskService:
    def __init__(self, store: TaskStore):
        self.store = store

    async def list_tasks(self, owner_id: Optional[str]) -> List[Task]:
        if _blank(owner_id):
            raise ValidationError("ownerId", "Missing ownerId")
        return await self.store.list_by_owner(owner_id)

    async def get_task(self, task_id: str) -> Task:
        return await self.store.get(task_id)

    async def create_task(self, payload: TaskCreate) -> Task:
        if _blank(payload.title):
            raise ValidationError("title", "Missing title")
        if _blank(payload.owner_id):
            raise ValidationError("ownerId", "Missing ownerId")

        defaults = settings.defaults
        # Read-then-write with no isolation: a concurrent create for the same
        # owner may read the same count and tie on rank
        rank = await self.store.count_by_owner(payload.owner_id)

        task = Task(
            title=payload.title,
            owner_id=payload.owner_id,
            due_at=payload.due_at,
            priority=defaults.priority if payload.priority is None else payload.priority,
            category=defaults.category if payload.category is None else payload.category,
            done=defaults.done,
            rank=rank,
        )
        created = await self.store.insert(task)
        log("TASKS", f"Created task {created.id} for {created.owner_id} at rank {created.rank}")
        return created

    async def update_task(self, task_id: str, fields: Dict[str, Any]) -> Task:
        for name, value in fields.items():
            if name in NULLABLE_FIELDS:
                continue
            if value is None or (name == "title" and _blank(value)):
                raise ValidationError(name, f"{name} cannot be blank")
        if not fields:
            return await self.store.get(task_id)
        return await self.store.update(task_id, fields)

    async def reorder_tasks(self, items: Iterable[ReorderItem]) -> int:
        """
        Overwrite the rank of every listed task concurrently.

        Ranks are taken as given: no check for gaps, duplicates or mixed
        owners. Every update is awaited before returning. If any failed, the first
        failure is raised and the updates that landed stay applied.
        """
        items = list(items)
        results = await asyncio.gather(
            *(self.store.update(item.id, {"rank": item.rank}) for item in items),
            return_exceptions=True,
        )
        failures = [r for r in results if isinstance(r, BaseException)]
        if failures:
            log("TASKS", f"Reorder: {len(items) - len(failures)} of {len(items)} updates applied")
            raise failures[0]
        log("TASKS", f"Reordered {len(items)} tasks")
        return len(items)

    async def delete_task(self, task_id: str) -> bool:
        """Remove a task. Returns False when it was already gone."""
        try:
            await self.store.delete(task_id)
        except TaskNotFoundError:
            log("TASKS", f"Delete of unknown task {task_id} ignored")
            return False
        return True
