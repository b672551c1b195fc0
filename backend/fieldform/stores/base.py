"""Generic in-memory keyed store and identifier generators."""

import itertools
import logging
import uuid
from datetime import datetime
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from fieldform.models.base import Record, utcnow

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)


class SequentialIdGenerator:
    """Produces ``{prefix}-1``, ``{prefix}-2``, ... for a single store."""
    
    def __init__(self, prefix: str, start: int = 1):
        self.prefix = prefix
        self._counter = itertools.count(start)
    
    def __call__(self) -> str:
        return f"{self.prefix}-{next(self._counter)}"


class UuidIdGenerator:
    """Produces ``{prefix}-<hex uuid4>`` identifiers."""
    
    def __init__(self, prefix: str):
        self.prefix = prefix
    
    def __call__(self) -> str:
        return f"{self.prefix}-{uuid.uuid4().hex}"


class InMemoryStore(Generic[RecordT]):
    """
    Keyed collection of records owned by a single process.
    
    Absent records are signalled with ``None`` (or ``False`` from
    ``delete``); no operation raises for a missing id. Updates are shallow:
    each key in ``changes`` replaces the stored attribute wholesale.
    """
    
    record_type: Type[RecordT]
    prefix: str
    
    def __init__(
        self,
        id_generator: Optional[Callable[[], str]] = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._records: Dict[str, RecordT] = {}
        self._next_id = id_generator or SequentialIdGenerator(self.prefix)
        self._clock = clock
    
    def __len__(self) -> int:
        return len(self._records)
    
    def _creation_stamps(self, values: Mapping[str, Any], now: datetime) -> Dict[str, Any]:
        """Timestamps written on create."""
        return {}
    
    def _update_stamps(
        self, existing: RecordT, changes: Mapping[str, Any], now: datetime
    ) -> Dict[str, Any]:
        """Timestamps written on update."""
        return {}
    
    def _prepare(self, values: Dict[str, Any]) -> Dict[str, Any]:
        """Normalise incoming values before validation."""
        return values
    
    def _sort(self, records: List[RecordT]) -> List[RecordT]:
        """Default listing order: insertion order."""
        return records
    
    def _nullable(self, attribute: str) -> bool:
        field = self.record_type.model_fields.get(attribute)
        return field is not None and not field.is_required() and field.default is None
    
    def _newest_first(self, records: List[RecordT], attribute: str) -> List[RecordT]:
        # Ties on the timestamp fall back to the later insertion first.
        indexed = sorted(
            enumerate(records),
            key=lambda pair: (getattr(pair[1], attribute), pair[0]),
            reverse=True,
        )
        return [record for _, record in indexed]
    
    def create(self, values: Mapping[str, Any]) -> RecordT:
        """Store a new record, assigning its id and timestamps."""
        now = self._clock()
        data = self._prepare(dict(values))
        data.update(self._creation_stamps(data, now))
        data["id"] = self._next_id()
        record = self.record_type.model_validate(data)
        self._records[record.id] = record
        logger.debug("Created %s %s", self.record_type.__name__, record.id)
        return record
    
    def get(self, record_id: str) -> Optional[RecordT]:
        """Get a record by id."""
        return self._records.get(record_id)
    
    def get_all(self, **filters: Any) -> List[RecordT]:
        """
        List records, narrowed by attribute equality.
        
        Filters whose value is ``None`` are ignored.
        """
        records = list(self._records.values())
        for attribute, expected in filters.items():
            if expected is None:
                continue
            records = [r for r in records if getattr(r, attribute) == expected]
        return self._sort(records)
    
    def update(self, record_id: str, changes: Mapping[str, Any]) -> Optional[RecordT]:
        """Merge ``changes`` into a record. Returns None if it does not exist."""
        existing = self._records.get(record_id)
        if existing is None:
            return None
        
        # A null for an attribute the record cannot hold leaves it unchanged.
        changes = {
            key: value for key, value in changes.items()
            if value is not None or self._nullable(key)
        }
        
        now = self._clock()
        data = existing.model_dump()
        data.update(self._prepare(dict(changes)))
        data.update(self._update_stamps(existing, changes, now))
        data["id"] = existing.id
        
        updated = self.record_type.model_validate(data)
        self._records[record_id] = updated
        logger.debug("Updated %s %s (%s)", self.record_type.__name__, record_id, ", ".join(changes))
        return updated
    
    def delete(self, record_id: str) -> bool:
        """Remove a record. Returns False if it did not exist."""
        if self._records.pop(record_id, None) is None:
            return False
        logger.debug("Deleted %s %s", self.record_type.__name__, record_id)
        return True
