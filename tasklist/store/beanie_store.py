# tasklist/store/beanie_store.py
"""
MongoDB TaskStore backed by Beanie.

Expiry is enforced by MongoDB itself through a TTL index on `created_at`;
`purge_expired` issues the same deletion explicitly for the background sweep.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from beanie import Document, PydanticObjectId, UpdateResponse
from beanie.odm.operators.update.general import Set
from bson.errors import InvalidId
from pydantic import Field
from pymongo import ASCENDING, IndexModel
from pymongo.errors import PyMongoError

from tasklist.core.config import settings
from tasklist.core.exceptions import StoreError, TaskNotFoundError
from tasklist.core.logging import log
from tasklist.models.task import Task


class TaskDocument(Document):
    title: str
    done: bool = Field(default_factory=lambda: settings.defaults.done)
    owner_id: str
    due_at: Optional[datetime] = None
    priority: str = Field(default_factory=lambda: settings.defaults.priority)
    category: str = Field(default_factory=lambda: settings.defaults.category)
    rank: int = Field(default_factory=lambda: settings.defaults.rank)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Settings:
        name = "tasks"
        indexes = [
            IndexModel([("owner_id", ASCENDING), ("rank", ASCENDING)], name="owner_rank"),
            IndexModel(
                [("created_at", ASCENDING)],
                name="created_at_ttl",
                expireAfterSeconds=settings.expiry.retention_seconds,
            ),
        ]

    def to_task(self) -> Task:
        return Task(
            id=str(self.id),
            title=self.title,
            done=self.done,
            owner_id=self.owner_id,
            due_at=self.due_at,
            priority=self.priority,
            category=self.category,
            rank=self.rank,
            created_at=self.created_at,
        )


def _object_id(task_id: str) -> PydanticObjectId:
    try:
        return PydanticObjectId(task_id)
    except (InvalidId, TypeError):
        raise TaskNotFoundError(task_id)


class BeanieTaskStore:
    async def list_by_owner(self, owner_id: str) -> List[Task]:
        try:
            docs = await TaskDocument.find(TaskDocument.owner_id == owner_id).sort(
                +TaskDocument.rank
            ).to_list()
        except PyMongoError as e:
            raise StoreError("list_by_owner", str(e))
        return [doc.to_task() for doc in docs]

    async def count_by_owner(self, owner_id: str) -> int:
        try:
            return await TaskDocument.find(TaskDocument.owner_id == owner_id).count()
        except PyMongoError as e:
            raise StoreError("count_by_owner", str(e))

    async def get(self, task_id: str) -> Task:
        oid = _object_id(task_id)
        try:
            doc = await TaskDocument.get(oid)
        except PyMongoError as e:
            raise StoreError("get", str(e))
        if doc is None:
            raise TaskNotFoundError(task_id)
        return doc.to_task()

    async def insert(self, task: Task) -> Task:
        doc = TaskDocument(
            title=task.title,
            done=task.done,
            owner_id=task.owner_id,
            due_at=task.due_at,
            priority=task.priority,
            category=task.category,
            rank=task.rank,
            created_at=task.created_at or datetime.now(timezone.utc),
        )
        try:
            await doc.insert()
        except PyMongoError as e:
            raise StoreError("insert", str(e))
        log("STORE", f"Inserted task {doc.id} for owner {doc.owner_id} at rank {doc.rank}")
        return doc.to_task()

    async def update(self, task_id: str, fields: Dict[str, Any]) -> Task:
        oid = _object_id(task_id)
        try:
            # One findOneAndUpdate: a record swept since the caller listed it
            # is simply not matched
            doc = await TaskDocument.find_one({"_id": oid}).update(
                Set(fields), response_type=UpdateResponse.NEW_DOCUMENT
            )
        except PyMongoError as e:
            raise StoreError("update", str(e))
        if doc is None:
            raise TaskNotFoundError(task_id)
        log("STORE", f"Updated task {task_id}", fields)
        return doc.to_task()

    async def delete(self, task_id: str) -> None:
        oid = _object_id(task_id)
        try:
            result = await TaskDocument.find_one(TaskDocument.id == oid).delete()
        except PyMongoError as e:
            raise StoreError("delete", str(e))
        if result is None or result.deleted_count == 0:
            raise TaskNotFoundError(task_id)
        log("STORE", f"Deleted task {task_id}")

    async def purge_expired(self, cutoff: datetime) -> int:
        try:
            result = await TaskDocument.find(TaskDocument.created_at < cutoff).delete()
        except PyMongoError as e:
            raise StoreError("purge_expired", str(e))
        return result.deleted_count if result else 0
