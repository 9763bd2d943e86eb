# tasklist/api/__init__.py
"""
API module - All route handlers.
"""
from . import health, tasks

__all__ = [
    "health",
    "tasks",
]
