# tasklist/store/base.py
"""
Storage port.

The ordering engine depends on this Protocol instead of a concrete backend.
Adapters translate their driver failures into StoreError and missing ids into
TaskNotFoundError so callers see one error vocabulary.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Protocol

from tasklist.models.task import Task


class TaskStore(Protocol):
    async def list_by_owner(self, owner_id: str) -> List[Task]: ...
    async def count_by_owner(self, owner_id: str) -> int: ...
    async def get(self, task_id: str) -> Task: ...
    async def insert(self, task: Task) -> Task: ...
    async def update(self, task_id: str, fields: Dict[str, Any]) -> Task: ...
    async def delete(self, task_id: str) -> None: ...

    # Expiry sweep
    async def purge_expired(self, cutoff: datetime) -> int: ...
