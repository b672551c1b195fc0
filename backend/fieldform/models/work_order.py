"""Work order model."""

from datetime import datetime
from typing import Optional, List
from enum import Enum as PyEnum

from fieldform.models.base import Record


class WorkOrderStatus(str, PyEnum):
    """Work order lifecycle states. Any state may move to any other."""
    DRAFT = "draft"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class WorkOrderPriority(str, PyEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class WorkOrder(Record):
    """
    A unit of field work tied to a form.
    
    ``completed_at`` is stamped the first time the order moves into
    ``completed`` and is never cleared afterwards. ``notes`` entries are
    prefixed with the ISO timestamp at which they were added.
    """
    id: str
    form_id: str
    form_name: str
    title: str
    description: Optional[str] = None
    assigned_to: str
    created_by: str
    status: WorkOrderStatus = WorkOrderStatus.DRAFT
    priority: WorkOrderPriority = WorkOrderPriority.MEDIUM
    due_date: str
    location: Optional[str] = None
    submission_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    completed_at: Optional[datetime] = None
    notes: Optional[List[str]] = None
