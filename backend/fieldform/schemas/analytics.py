"""Analytics response schemas."""

from typing import List

from fieldform.models.base import CamelModel


class FormSubmissionCount(CamelModel):
    form_id: str
    name: str
    submissions: int


class DailySubmissionCount(CamelModel):
    date: str
    submissions: int


class SubmitterCount(CamelModel):
    name: str
    submissions: int


class AnalyticsSummary(CamelModel):
    """Dashboard figures computed over every stored submission."""
    total_submissions: int
    completed_submissions: int
    pending_submissions: int
    flagged_submissions: int
    total_forms: int
    submissions_by_form: List[FormSubmissionCount]
    submissions_over_time: List[DailySubmissionCount]
    top_submitters: List[SubmitterCount]
