"""Scheduled task model."""

from datetime import datetime
from typing import Optional
from enum import Enum as PyEnum

from fieldform.models.base import Record


class TaskStatus(str, PyEnum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class TaskPriority(str, PyEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Task(Record):
    """A form assigned to a field worker with a due date."""
    id: str
    form_id: str
    form_name: str
    assigned_to: str
    due_date: str
    status: TaskStatus = TaskStatus.PENDING
    location: Optional[str] = None
    priority: TaskPriority = TaskPriority.MEDIUM
    created_at: datetime
