"""Work order router."""

import logging
from typing import List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, status

from fieldform.database import get_notifier, get_work_order_store
from fieldform.models.user import User
from fieldform.models.work_order import WorkOrder, WorkOrderStatus
from fieldform.schemas.work_order import WorkOrderCreate, WorkOrderUpdate, NoteCreate
from fieldform.services.auth import require_permission
from fieldform.services.notifications import NotificationService
from fieldform.stores import WorkOrderStore

logger = logging.getLogger(__name__)

router = APIRouter()


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Work order not found"
    )


@router.get("", response_model=List[WorkOrder])
async def list_work_orders(
    status_filter: Optional[WorkOrderStatus] = Query(None, alias="status"),
    assigned_to: Optional[str] = Query(None, alias="assignedTo"),
    work_orders: WorkOrderStore = Depends(get_work_order_store)
):
    """List work orders, newest first."""
    return work_orders.get_all(status=status_filter, assigned_to=assigned_to)


@router.post("", response_model=WorkOrder, status_code=status.HTTP_201_CREATED)
async def create_work_order(
    order_data: WorkOrderCreate,
    work_orders: WorkOrderStore = Depends(get_work_order_store),
    current_user: User = Depends(require_permission("work-orders", "create"))
):
    """Create a work order as a draft."""
    values = order_data.model_dump()
    values["created_by"] = order_data.created_by or current_user.email
    values["status"] = WorkOrderStatus.DRAFT
    return work_orders.create(values)


@router.get("/{work_order_id}", response_model=WorkOrder)
async def get_work_order(
    work_order_id: str,
    work_orders: WorkOrderStore = Depends(get_work_order_store)
):
    """Get a work order by ID."""
    work_order = work_orders.get(work_order_id)
    if not work_order:
        raise _not_found()
    return work_order


@router.put("/{work_order_id}", response_model=WorkOrder)
async def update_work_order(
    work_order_id: str,
    update_data: WorkOrderUpdate,
    background_tasks: BackgroundTasks,
    work_orders: WorkOrderStore = Depends(get_work_order_store),
    notifier: NotificationService = Depends(get_notifier),
    current_user: User = Depends(require_permission("work-orders", "update"))
):
    """Update a work order, notifying the assignee when it becomes assigned."""
    existing = work_orders.get(work_order_id)
    if not existing:
        raise _not_found()
    
    updated = work_orders.update(work_order_id, update_data.model_dump(exclude_unset=True))
    if not updated:
        raise _not_found()
    
    if existing.status != WorkOrderStatus.ASSIGNED and updated.status == WorkOrderStatus.ASSIGNED:
        logger.info("Work order %s assigned to %s", updated.id, updated.assigned_to)
        background_tasks.add_task(notifier.notify_assignment, updated)
    
    return updated


@router.delete("/{work_order_id}")
async def delete_work_order(
    work_order_id: str,
    work_orders: WorkOrderStore = Depends(get_work_order_store),
    current_user: User = Depends(require_permission("work-orders", "delete"))
):
    """Delete a work order (admin only)."""
    if not work_orders.delete(work_order_id):
        raise _not_found()
    return {"message": "Work order deleted successfully"}


@router.post("/{work_order_id}/notes", response_model=WorkOrder)
async def add_note(
    work_order_id: str,
    note_data: NoteCreate,
    work_orders: WorkOrderStore = Depends(get_work_order_store),
    current_user: User = Depends(require_permission("work-orders", "update"))
):
    """Append a timestamped note to a work order."""
    work_order = work_orders.add_note(work_order_id, note_data.note)
    if not work_order:
        raise _not_found()
    return work_order
