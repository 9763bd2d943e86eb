# tasklist/services/__init__.py
from .task_service import TaskService
from .expiry import sweep_expired, run_expiry_sweeper

__all__ = ["TaskService", "sweep_expired", "run_expiry_sweeper"]
