# tasklist/api/tasks.py
"""
Task list routes.

Update, reorder and delete catch every failure at this boundary and answer
with a static message; the cause is only logged. Not-found on update is the
one failure surfaced distinctly (404).
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, status
from starlette.responses import JSONResponse

from tasklist.core.exceptions import TaskNotFoundError, ValidationError
from tasklist.core.logging import log
from tasklist.lib.monitoring import record_failure
from tasklist.models.task import MessageResponse, ReorderRequest, Task, TaskCreate, TaskUpdate
from tasklist.services.task_service import TaskService
from tasklist.store.base import TaskStore

router = APIRouter(prefix="/tasks", tags=["Tasks"])


def get_task_store(request: Request) -> TaskStore:
    return request.app.state.store


def get_task_service(store: TaskStore = Depends(get_task_store)) -> TaskService:
    return TaskService(store)


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get("", response_model=List[Task])
async def list_tasks(
    owner_id: Optional[str] = Query(None, alias="ownerId"),
    service: TaskService = Depends(get_task_service),
):
    """All tasks of one owner, ascending by rank."""
    return await service.list_tasks(owner_id)


@router.post("", response_model=Task)
async def create_task(payload: TaskCreate, service: TaskService = Depends(get_task_service)):
    """Create a task at the end of the owner's list."""
    return await service.create_task(payload)


@router.put("/reorder", response_model=MessageResponse)
async def reorder_tasks(payload: ReorderRequest, service: TaskService = Depends(get_task_service)):
    """Apply a drag-and-drop reorder: one rank overwrite per listed task."""
    try:
        await service.reorder_tasks(payload.tasks)
    except Exception as e:
        log("TASKS", f"Reorder of {len(payload.tasks)} tasks failed: {e}")
        record_failure("reorder")
        return error_response("Error reordering tasks", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return MessageResponse(message="Order updated")


@router.get("/{task_id}", response_model=Task)
async def get_task(task_id: str, service: TaskService = Depends(get_task_service)):
    try:
        return await service.get_task(task_id)
    except TaskNotFoundError:
        return error_response("Task not found", status.HTTP_404_NOT_FOUND)


@router.put("/{task_id}", response_model=Task)
async def update_task(
    task_id: str,
    payload: TaskUpdate,
    service: TaskService = Depends(get_task_service),
):
    """Merge the given fields into the task and return the result."""
    try:
        return await service.update_task(task_id, payload.model_dump(exclude_unset=True))
    except TaskNotFoundError:
        log("TASKS", f"Update of unknown task {task_id}")
        return error_response("Task not found", status.HTTP_404_NOT_FOUND)
    except ValidationError as e:
        return error_response(e.message, status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        log("TASKS", f"Update of {task_id} failed: {e}")
        record_failure("update")
        return error_response("Error updating task", status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.delete("/{task_id}", response_model=MessageResponse)
async def delete_task(task_id: str, service: TaskService = Depends(get_task_service)):
    try:
        await service.delete_task(task_id)
    except Exception as e:
        log("TASKS", f"Delete of {task_id} failed: {e}")
        record_failure("delete")
        return error_response("Error deleting task", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return MessageResponse(message="Task deleted")
