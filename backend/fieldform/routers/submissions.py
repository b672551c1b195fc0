"""Submission router."""

from typing import List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, status

from fieldform.database import get_form_store, get_notifier, get_submission_store
from fieldform.models.submission import Submission, SubmissionStatus
from fieldform.models.user import User
from fieldform.schemas.submission import SubmissionCreate
from fieldform.services.auth import require_permission
from fieldform.services.notifications import NotificationService
from fieldform.services.submissions import SubmissionService
from fieldform.stores import FormStore, SubmissionStore

router = APIRouter()


@router.get("", response_model=List[Submission])
async def list_submissions(
    form_id: Optional[str] = Query(None, alias="formId"),
    status_filter: Optional[SubmissionStatus] = Query(None, alias="status"),
    search: Optional[str] = None,
    submissions: SubmissionStore = Depends(get_submission_store)
):
    """List submissions, either by free-text ``search`` or by status/form filters."""
    if search:
        return submissions.search_submissions(search)
    return submissions.filter_submissions(status=status_filter, form_id=form_id)


@router.post("", response_model=Submission, status_code=status.HTTP_201_CREATED)
async def create_submission(
    submission_data: SubmissionCreate,
    background_tasks: BackgroundTasks,
    forms: FormStore = Depends(get_form_store),
    submissions: SubmissionStore = Depends(get_submission_store),
    notifier: NotificationService = Depends(get_notifier),
    current_user: User = Depends(require_permission("submissions", "create"))
):
    """Submit answers for a form."""
    form = forms.get(submission_data.form_id)
    if not form:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Form not found"
        )
    
    submission = SubmissionService.create_submission(submissions, form, current_user, submission_data)
    background_tasks.add_task(notifier.notify_submission, submission)
    return submission


@router.get("/{submission_id}", response_model=Submission)
async def get_submission(
    submission_id: str,
    submissions: SubmissionStore = Depends(get_submission_store)
):
    """Get a submission by ID."""
    submission = submissions.get(submission_id)
    if not submission:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Submission not found"
        )
    return submission


@router.delete("/{submission_id}")
async def delete_submission(
    submission_id: str,
    submissions: SubmissionStore = Depends(get_submission_store),
    current_user: User = Depends(require_permission("submissions", "delete"))
):
    """Delete a submission (admin only)."""
    if not submissions.delete(submission_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Submission not found"
        )
    return {"message": "Submission deleted successfully"}
