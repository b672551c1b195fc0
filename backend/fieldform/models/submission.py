"""Form submission model."""

from datetime import datetime
from typing import Optional, List, Dict, Any
from enum import Enum as PyEnum

from fieldform.models.base import Record


class SubmissionStatus(str, PyEnum):
    """Review state of a submission."""
    COMPLETED = "completed"
    PENDING = "pending"
    FLAGGED = "flagged"


class Submission(Record):
    """A filled-in form. Created once and never modified."""
    id: str
    form_id: str
    form_name: str
    submitted_by: str
    submitted_at: datetime
    status: SubmissionStatus = SubmissionStatus.COMPLETED
    location: Optional[str] = None
    data: Dict[str, Any] = {}
    images: Optional[List[str]] = None
    signature: Optional[str] = None
