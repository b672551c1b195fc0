"""Scheduling task request schemas."""

from typing import Optional

from pydantic import Field

from fieldform.models.base import CamelModel
from fieldform.models.task import TaskStatus, TaskPriority


class TaskCreate(CamelModel):
    """Schema for scheduling a new task. New tasks start as pending."""
    form_id: str = Field(..., min_length=1)
    form_name: str = Field(..., min_length=1)
    assigned_to: str = Field(..., min_length=1)
    due_date: str = Field(..., min_length=1)
    location: Optional[str] = None
    priority: TaskPriority = TaskPriority.MEDIUM


class TaskUpdate(CamelModel):
    """Schema for a partial task update."""
    form_id: Optional[str] = None
    form_name: Optional[str] = None
    assigned_to: Optional[str] = None
    due_date: Optional[str] = None
    status: Optional[TaskStatus] = None
    location: Optional[str] = None
    priority: Optional[TaskPriority] = None
