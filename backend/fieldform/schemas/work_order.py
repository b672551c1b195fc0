"""Work order request schemas."""

from typing import Optional, List

from pydantic import Field

from fieldform.models.base import CamelModel
from fieldform.models.work_order import WorkOrderStatus, WorkOrderPriority


class WorkOrderCreate(CamelModel):
    """Schema for creating a work order. New orders start as drafts."""
    form_id: str = Field(..., min_length=1)
    form_name: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    assigned_to: str = Field(..., min_length=1)
    created_by: Optional[str] = None
    priority: WorkOrderPriority = WorkOrderPriority.MEDIUM
    due_date: str = Field(..., min_length=1)
    location: Optional[str] = None


class WorkOrderUpdate(CamelModel):
    """Schema for a partial work order update."""
    form_id: Optional[str] = None
    form_name: Optional[str] = None
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    assigned_to: Optional[str] = None
    status: Optional[WorkOrderStatus] = None
    priority: Optional[WorkOrderPriority] = None
    due_date: Optional[str] = None
    location: Optional[str] = None
    submission_id: Optional[str] = None
    notes: Optional[List[str]] = None


class NoteCreate(CamelModel):
    note: str = Field(..., min_length=1)
