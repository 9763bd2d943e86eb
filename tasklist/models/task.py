from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from tasklist.core.config import settings


class Task(BaseModel):
    """
    A single entry in one owner's list.

    `rank` orders tasks within an owner. It is assigned once on create and
    never compacted, so an owner's ranks may contain gaps and ties.
    """

    id: Optional[str] = None
    title: str = Field(..., min_length=1)
    done: bool = Field(default_factory=lambda: settings.defaults.done)
    owner_id: str = Field(..., min_length=1, alias="ownerId")
    due_at: Optional[datetime] = Field(default=None, alias="dueAt")
    priority: str = Field(default_factory=lambda: settings.defaults.priority)
    category: str = Field(default_factory=lambda: settings.defaults.category)
    rank: int = Field(default_factory=lambda: settings.defaults.rank, ge=0)
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    model_config = ConfigDict(populate_by_name=True)


class TaskCreate(BaseModel):
    # Required fields are checked by TaskService so a missing one is a 400, not a 422
    title: Optional[str] = None
    owner_id: Optional[str] = Field(default=None, alias="ownerId")
    due_at: Optional[datetime] = Field(default=None, alias="dueAt")
    priority: Optional[str] = None
    category: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class TaskUpdate(BaseModel):
    title: Optional[str] = None
    done: Optional[bool] = None
    due_at: Optional[datetime] = Field(default=None, alias="dueAt")
    priority: Optional[str] = None
    category: Optional[str] = None
    rank: Optional[int] = Field(default=None, ge=0, validation_alias=AliasChoices("rank", "orden"))

    model_config = ConfigDict(populate_by_name=True)


class ReorderItem(BaseModel):
    id: str = Field(..., validation_alias=AliasChoices("id", "_id"))
    rank: int = Field(..., ge=0, validation_alias=AliasChoices("rank", "orden"))


class ReorderRequest(BaseModel):
    tasks: List[ReorderItem] = Field(default_factory=list)


class MessageResponse(BaseModel):
    message: str


__all__ = ["Task", "TaskCreate", "TaskUpdate", "ReorderItem", "ReorderRequest", "MessageResponse"]
