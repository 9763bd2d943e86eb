# tasklist/models/__init__.py
from .task import Task, TaskCreate, TaskUpdate, ReorderItem, ReorderRequest, MessageResponse

__all__ = ["Task", "TaskCreate", "TaskUpdate", "ReorderItem", "ReorderRequest", "MessageResponse"]
