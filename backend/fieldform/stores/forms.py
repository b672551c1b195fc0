"""Form definition store."""

from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Sequence

from pydantic import BaseModel

from fieldform.models.form import Form
from fieldform.stores.base import InMemoryStore


def reindex_fields(fields: Sequence[Any]) -> List[Dict[str, Any]]:
    """
    Give fields dense, unique ``order`` values 0..n-1.
    
    Fields are ordered by their supplied ``order``; a field without one
    takes its list position. Ties keep list order.
    """
    items = []
    for index, field in enumerate(fields):
        item = field.model_dump() if isinstance(field, BaseModel) else dict(field)
        order = item.get("order")
        items.append(((index if order is None else order, index), item))
    
    items.sort(key=lambda pair: pair[0])
    
    result = []
    for position, (_, item) in enumerate(items):
        item["order"] = position
        result.append(item)
    return result


class FormStore(InMemoryStore[Form]):
    """Forms and templates, listed in insertion order."""
    
    record_type = Form
    prefix = "form"
    
    def _prepare(self, values: Dict[str, Any]) -> Dict[str, Any]:
        if values.get("fields") is not None:
            values["fields"] = reindex_fields(values["fields"])
        return values
    
    def _creation_stamps(self, values: Mapping[str, Any], now: datetime) -> Dict[str, Any]:
        return {"created_at": now, "updated_at": now}
    
    def _update_stamps(self, existing: Form, changes: Mapping[str, Any], now: datetime) -> Dict[str, Any]:
        return {"updated_at": now}
    
    def get_all(self, user_id: Optional[str] = None, **filters: Any) -> List[Form]:
        """All forms, or only those owned by ``user_id``."""
        return super().get_all(user_id=user_id, **filters)
    
    def get_templates(self) -> List[Form]:
        """Forms flagged as templates."""
        return super().get_all(is_template=True)
