"""Submission request schemas."""

from typing import Optional, List, Dict, Any

from pydantic import Field

from fieldform.models.base import CamelModel


class SubmissionCreate(CamelModel):
    """
    Schema for submitting a completed form.
    
    ``form_name`` defaults to the form's current name and ``submitted_by``
    to the signed-in user's name.
    """
    form_id: str = Field(..., min_length=1)
    form_name: Optional[str] = None
    submitted_by: Optional[str] = None
    location: Optional[str] = None
    data: Dict[str, Any]
    images: Optional[List[str]] = None
    signature: Optional[str] = None
