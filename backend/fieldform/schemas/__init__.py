"""Pydantic schemas for request/response validation."""

from fieldform.schemas.user import (
    UserCreate,
    UserLogin,
    UserResponse,
    AuthResponse,
)
from fieldform.schemas.form import (
    FormFieldCreate,
    FormCreate,
    FormUpdate,
    FormEvaluationRequest,
    FormEvaluationResponse,
)
from fieldform.schemas.submission import SubmissionCreate
from fieldform.schemas.task import TaskCreate, TaskUpdate
from fieldform.schemas.work_order import WorkOrderCreate, WorkOrderUpdate, NoteCreate
from fieldform.schemas.analytics import (
    AnalyticsSummary,
    FormSubmissionCount,
    DailySubmissionCount,
    SubmitterCount,
)

__all__ = [
    # User
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    # Form
    "FormFieldCreate",
    "FormCreate",
    "FormUpdate",
    "FormEvaluationRequest",
    "FormEvaluationResponse",
    # Submission
    "SubmissionCreate",
    # Scheduling
    "TaskCreate",
    "TaskUpdate",
    # Work orders
    "WorkOrderCreate",
    "WorkOrderUpdate",
    "NoteCreate",
    # Analytics
    "AnalyticsSummary",
    "FormSubmissionCount",
    "DailySubmissionCount",
    "SubmitterCount",
]
