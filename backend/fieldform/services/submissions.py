"""Submission service: typed validation of answers against a form."""

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status
from pydantic import EmailStr, TypeAdapter, ValidationError

from fieldform.models.form import FieldType, Form, FormField
from fieldform.models.submission import Submission, SubmissionStatus
from fieldform.models.user import User
from fieldform.schemas.submission import SubmissionCreate
from fieldform.services.conditional import evaluate_calculation, should_show_field
from fieldform.stores.submissions import SubmissionStore

logger = logging.getLogger(__name__)

_TEXT_TYPES = {FieldType.TEXT, FieldType.TEXTAREA, FieldType.PHONE}
_CHOICE_TYPES = {FieldType.RADIO, FieldType.SELECT}

_email = TypeAdapter(EmailStr)
_date = TypeAdapter(date)


def _is_blank(value: Any) -> bool:
    return value is None or value == "" or value == []


def _string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _check_value(field: FormField, value: Any) -> Optional[str]:
    """Return an error message if ``value`` does not suit ``field``."""
    if field.type in _TEXT_TYPES:
        if not isinstance(value, str):
            return "must be a string"
    
    elif field.type == FieldType.EMAIL:
        if not isinstance(value, str):
            return "must be a string"
        try:
            _email.validate_python(value)
        except ValidationError:
            return "must be a valid e-mail address"
    
    elif field.type == FieldType.DATE:
        if not isinstance(value, str):
            return "must be an ISO date string"
        try:
            _date.validate_python(value)
        except ValidationError:
            return "must be an ISO date string"
    
    elif field.type in _CHOICE_TYPES:
        if not isinstance(value, str):
            return "must be a string"
        if field.options and value not in field.options:
            return f"must be one of: {', '.join(field.options)}"
    
    elif field.type == FieldType.CHECKBOX:
        if not _string_list(value):
            return "must be a list of strings"
        if field.options:
            unknown = [item for item in value if item not in field.options]
            if unknown:
                return f"has unknown options: {', '.join(unknown)}"
    
    elif field.type == FieldType.IMAGE:
        if not _string_list(value):
            return "must be a list of image URLs"
    
    elif field.type == FieldType.SIGNATURE:
        if not isinstance(value, str) or not value.startswith("data:image/"):
            return "must be an image data URL"
    
    return None


class SubmissionService:
    """Service for accepting form submissions."""
    
    @staticmethod
    def validate_data(form: Form, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Check submitted answers against the form's fields.
        
        Hidden fields are not required. Calculated fields are recomputed
        and their results replace whatever the client sent; a formula that
        cannot be evaluated stores 0 rather than rejecting the answers. All
        other problems are reported together as a 422.
        """
        errors: List[Dict[str, str]] = []
        fields = {field.id: field for field in form.fields}
        
        for key in data:
            if key not in fields:
                errors.append({"field": key, "message": "is not a field of this form"})
        
        cleaned = {key: value for key, value in data.items() if key in fields}
        
        for field in form.fields:
            if field.calculation:
                continue
            value = cleaned.get(field.id)
            if _is_blank(value):
                if field.required and should_show_field(field, cleaned):
                    errors.append({"field": field.id, "message": "is required"})
                continue
            message = _check_value(field, value)
            if message:
                errors.append({"field": field.id, "message": message})
        
        calculated = {
            field.id: evaluate_calculation(field.calculation, cleaned)
            for field in form.fields
            if field.calculation
        }
        
        if errors:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=errors
            )
        
        cleaned.update(calculated)
        return cleaned
    
    @staticmethod
    def create_submission(
        submissions: SubmissionStore,
        form: Form,
        user: User,
        submission_data: SubmissionCreate,
    ) -> Submission:
        """Validate and store a submission. Submissions always start completed."""
        data = SubmissionService.validate_data(form, submission_data.data)
        submission = submissions.create({
            "form_id": form.id,
            "form_name": submission_data.form_name or form.name,
            "submitted_by": submission_data.submitted_by or user.name,
            "status": SubmissionStatus.COMPLETED,
            "location": submission_data.location,
            "data": data,
            "images": submission_data.images,
            "signature": submission_data.signature,
        })
        logger.info("Accepted submission %s for form %s", submission.id, form.id)
        return submission
