"""Submission store."""

from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from fieldform.models.submission import Submission
from fieldform.stores.base import InMemoryStore


class SubmissionStore(InMemoryStore[Submission]):
    """
    Submissions, listed newest first by ``submitted_at``.
    
    Submissions are write-once; there is no status transition
    helper here.
    """
    
    record_type = Submission
    prefix = "submission"
    
    def _creation_stamps(self, values: Mapping[str, Any], now: datetime) -> Dict[str, Any]:
        return {"submitted_at": values.get("submitted_at") or now}
    
    def _sort(self, records: List[Submission]) -> List[Submission]:
        return self._newest_first(records, "submitted_at")
    
    def search_submissions(self, query: str) -> List[Submission]:
        """Case-insensitive substring match on form name, submitter and location, newest first."""
        needle = query.lower()
        return self._sort([
            s for s in self._records.values()
            if needle in s.form_name.lower()
            or needle in s.submitted_by.lower()
            or (s.location is not None and needle in s.location.lower())
        ])
    
    def filter_submissions(
        self,
        status: Optional[str] = None,
        form_id: Optional[str] = None,
    ) -> List[Submission]:
        """Submissions matching the given status and form, newest first."""
        return self.get_all(status=status, form_id=form_id)
