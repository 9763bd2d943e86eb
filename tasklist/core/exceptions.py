# tasklist/core/exceptions.py
"""
Custom exceptions for the application.
"""
from typing import Optional, Dict, Any


class TaskListError(Exception):
    """Base exception for all task list errors."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(TaskListError):
    """A required input field is missing or blank."""
    def __init__(self, field_name: str, message: Optional[str] = None):
        super().__init__(message or f"Missing {field_name}", {"field": field_name})
        self.field_name = field_name


class TaskNotFoundError(TaskListError):
    """Referenced task id does not exist (or has already expired)."""
    def __init__(self, task_id: str):
        super().__init__(f"Task {task_id} not found", {"task_id": task_id})
        self.task_id = task_id


class StoreError(TaskListError):
    """Underlying persistence failure."""
    def __init__(self, operation: str, message: str):
        super().__init__(
            f"Store error during {operation}: {message}",
            {"operation": operation}
        )
        self.operation = operation
