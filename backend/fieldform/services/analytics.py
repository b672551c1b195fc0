"""Submission analytics for the dashboard."""

from collections import Counter
from datetime import datetime, timedelta
from typing import Optional

from fieldform.models.base import utcnow
from fieldform.models.submission import SubmissionStatus
from fieldform.schemas.analytics import (
    AnalyticsSummary,
    DailySubmissionCount,
    FormSubmissionCount,
    SubmitterCount,
)
from fieldform.stores import Stores


class AnalyticsService:
    """Service for aggregate submission statistics."""
    
    @staticmethod
    def get_summary(
        stores: Stores,
        days: int = 7,
        top: int = 5,
        now: Optional[datetime] = None,
    ) -> AnalyticsSummary:
        now = now or utcnow()
        submissions = stores.submissions.get_all()
        forms = [form for form in stores.forms.get_all() if not form.is_template]
        
        statuses = Counter(s.status for s in submissions)
        per_form = Counter(s.form_id for s in submissions)
        per_day = Counter(s.submitted_at.date().isoformat() for s in submissions)
        submitters = Counter(s.submitted_by for s in submissions)
        
        window = [(now - timedelta(days=offset)).date().isoformat() for offset in range(days - 1, -1, -1)]
        
        return AnalyticsSummary(
            total_submissions=len(submissions),
            completed_submissions=statuses[SubmissionStatus.COMPLETED],
            pending_submissions=statuses[SubmissionStatus.PENDING],
            flagged_submissions=statuses[SubmissionStatus.FLAGGED],
            total_forms=len(forms),
            submissions_by_form=[
                FormSubmissionCount(form_id=form.id, name=form.name, submissions=per_form[form.id])
                for form in forms
            ],
            submissions_over_time=[
                DailySubmissionCount(date=day, submissions=per_day[day]) for day in window
            ],
            top_submitters=[
                SubmitterCount(name=name, submissions=count)
                for name, count in submitters.most_common(top)
            ],
        )
