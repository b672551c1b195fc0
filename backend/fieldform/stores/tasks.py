"""Scheduling task store."""

from datetime import datetime
from typing import Any, Dict, List, Mapping

from fieldform.models.task import Task
from fieldform.stores.base import InMemoryStore


class TaskStore(InMemoryStore[Task]):
    """Tasks, listed newest first. Status changes are unconstrained."""
    
    record_type = Task
    prefix = "task"
    
    def _creation_stamps(self, values: Mapping[str, Any], now: datetime) -> Dict[str, Any]:
        return {"created_at": now}
    
    def _sort(self, records: List[Task]) -> List[Task]:
        return self._newest_first(records, "created_at")
