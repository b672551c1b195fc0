"""Scheduling router for form tasks assigned to field workers."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from fieldform.database import get_task_store
from fieldform.models.task import Task, TaskStatus
from fieldform.models.user import User
from fieldform.schemas.task import TaskCreate, TaskUpdate
from fieldform.services.auth import require_permission
from fieldform.stores import TaskStore

router = APIRouter()


@router.get("", response_model=List[Task])
async def list_tasks(
    status_filter: Optional[TaskStatus] = Query(None, alias="status"),
    assigned_to: Optional[str] = Query(None, alias="assignedTo"),
    tasks: TaskStore = Depends(get_task_store)
):
    """List tasks, newest first."""
    return tasks.get_all(status=status_filter, assigned_to=assigned_to)


@router.post("", response_model=Task, status_code=status.HTTP_201_CREATED)
async def create_task(
    task_data: TaskCreate,
    tasks: TaskStore = Depends(get_task_store),
    current_user: User = Depends(require_permission("tasks", "create"))
):
    """Schedule a new task."""
    return tasks.create({**task_data.model_dump(), "status": TaskStatus.PENDING})


@router.get("/{task_id}", response_model=Task)
async def get_task(
    task_id: str,
    tasks: TaskStore = Depends(get_task_store)
):
    """Get a task by ID."""
    task = tasks.get(task_id)
    if not task:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found"
        )
    return task


@router.put("/{task_id}", response_model=Task)
async def update_task(
    task_id: str,
    update_data: TaskUpdate,
    tasks: TaskStore = Depends(get_task_store),
    current_user: User = Depends(require_permission("tasks", "update"))
):
    """Update a task. Any status may move to any other."""
    task = tasks.update(task_id, update_data.model_dump(exclude_unset=True))
    if not task:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found"
        )
    return task


@router.delete("/{task_id}")
async def delete_task(
    task_id: str,
    tasks: TaskStore = Depends(get_task_store),
    current_user: User = Depends(require_permission("tasks", "delete"))
):
    """Delete a task."""
    if not tasks.delete(task_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found"
        )
    return {"message": "Task deleted successfully"}
