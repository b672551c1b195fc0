"""Work order store."""

from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from fieldform.models.base import isoformat
from fieldform.models.work_order import WorkOrder, WorkOrderStatus
from fieldform.stores.base import InMemoryStore


class WorkOrderStore(InMemoryStore[WorkOrder]):
    """Work orders, listed newest first."""
    
    record_type = WorkOrder
    prefix = "wo"
    
    def _creation_stamps(self, values: Mapping[str, Any], now: datetime) -> Dict[str, Any]:
        return {"created_at": now, "updated_at": now}
    
    def _update_stamps(
        self, existing: WorkOrder, changes: Mapping[str, Any], now: datetime
    ) -> Dict[str, Any]:
        stamps: Dict[str, Any] = {"updated_at": now}
        # completed_at is a one-way stamp: set on entering completed, never cleared.
        entering_completed = (
            changes.get("status") == WorkOrderStatus.COMPLETED
            and existing.status != WorkOrderStatus.COMPLETED
        )
        stamps["completed_at"] = now if entering_completed else existing.completed_at
        return stamps
    
    def _sort(self, records: List[WorkOrder]) -> List[WorkOrder]:
        return self._newest_first(records, "created_at")
    
    def get_all(
        self,
        status: Optional[str] = None,
        assigned_to: Optional[str] = None,
        **filters: Any,
    ) -> List[WorkOrder]:
        return super().get_all(status=status, assigned_to=assigned_to, **filters)
    
    def add_note(self, record_id: str, note: str) -> Optional[WorkOrder]:
        """Append a timestamped note. Returns None if the order does not exist."""
        existing = self.get(record_id)
        if existing is None:
            return None
        
        notes = list(existing.notes or [])
        notes.append(f"{isoformat(self._clock())}: {note}")
        return self.update(record_id, {"notes": notes})
