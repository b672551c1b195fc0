"""E-mail notifications for assignments and new submissions."""

import logging
from datetime import datetime
from typing import Optional

from fieldform.config import Settings
from fieldform.models.base import CamelModel
from fieldform.models.submission import Submission
from fieldform.models.work_order import WorkOrder

logger = logging.getLogger(__name__)


class EmailMessage(CamelModel):
    to: str
    subject: str
    html: str
    text: Optional[str] = None


def _display_date(value: str) -> str:
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).strftime("%Y-%m-%d %H:%M")
    except ValueError:
        return value


def work_order_assignment_email(work_order: WorkOrder) -> EmailMessage:
    due = _display_date(work_order.due_date)
    location = f"<li><strong>Location:</strong> {work_order.location}</li>" if work_order.location else ""
    return EmailMessage(
        to=work_order.assigned_to,
        subject=f"New Work Order Assigned: {work_order.title}",
        html=(
            "<h2>New Work Order Assigned</h2>"
            "<p>You have been assigned a new work order:</p>"
            "<ul>"
            f"<li><strong>Title:</strong> {work_order.title}</li>"
            f"<li><strong>Form:</strong> {work_order.form_name}</li>"
            f"<li><strong>Due Date:</strong> {due}</li>"
            f"{location}"
            "</ul>"
            "<p>Please complete this work order by the due date.</p>"
        ),
        text=f"New Work Order: {work_order.title}\nForm: {work_order.form_name}\nDue: {due}",
    )


def submission_received_email(recipient: str, submission: Submission) -> EmailMessage:
    submitted = submission.submitted_at.strftime("%Y-%m-%d %H:%M")
    return EmailMessage(
        to=recipient,
        subject=f"New Submission: {submission.form_name}",
        html=(
            "<h2>New Form Submission</h2>"
            "<p>A new submission has been received:</p>"
            "<ul>"
            f"<li><strong>Form:</strong> {submission.form_name}</li>"
            f"<li><strong>Submitted by:</strong> {submission.submitted_by}</li>"
            f"<li><strong>Date:</strong> {submitted}</li>"
            "</ul>"
            "<p>Please review the submission in your dashboard.</p>"
        ),
        text=(
            f"New Submission: {submission.form_name}\n"
            f"Submitted by: {submission.submitted_by}\nDate: {submitted}"
        ),
    )


class NotificationService:
    """
    Delivers e-mail notifications.
    
    Delivery is a log line; there is no mail transport configured. Sends run
    as background tasks after the response and never raise.
    """
    
    def __init__(self, settings: Settings):
        self.sender = settings.email_sender
        self.recipient = settings.notification_recipient
    
    def deliver(self, message: EmailMessage) -> None:
        logger.info("Email from %s to %s: %s", self.sender, message.to, message.subject)
    
    def send(self, message: EmailMessage) -> bool:
        try:
            self.deliver(message)
        except Exception:
            logger.exception("Failed to send email notification to %s", message.to)
            return False
        return True
    
    def notify_assignment(self, work_order: WorkOrder) -> bool:
        return self.send(work_order_assignment_email(work_order))
    
    def notify_submission(self, submission: Submission) -> bool:
        return self.send(submission_received_email(self.recipient, submission))
