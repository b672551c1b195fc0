"""Record models for the FieldForm in-memory stores."""

from fieldform.models.base import CamelModel, Record, utcnow, isoformat
from fieldform.models.form import Form, FormField, ConditionalRule, FieldType, RuleOperator
from fieldform.models.submission import Submission, SubmissionStatus
from fieldform.models.task import Task, TaskStatus, TaskPriority
from fieldform.models.work_order import WorkOrder, WorkOrderStatus, WorkOrderPriority
from fieldform.models.user import User, UserRole

__all__ = [
    "CamelModel",
    "Record",
    "utcnow",
    "isoformat",
    "Form",
    "FormField",
    "ConditionalRule",
    "FieldType",
    "RuleOperator",
    "Submission",
    "SubmissionStatus",
    "Task",
    "TaskStatus",
    "TaskPriority",
    "WorkOrder",
    "WorkOrderStatus",
    "WorkOrderPriority",
    "User",
    "UserRole",
]
