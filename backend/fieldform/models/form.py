"""Form definition models."""

from datetime import datetime
from typing import Optional, List, Union
from enum import Enum as PyEnum

from fieldform.models.base import Record


class FieldType(str, PyEnum):
    """Input types a form field can render as."""
    TEXT = "text"
    EMAIL = "email"
    PHONE = "phone"
    DATE = "date"
    TEXTAREA = "textarea"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    SELECT = "select"
    IMAGE = "image"
    SIGNATURE = "signature"


class RuleOperator(str, PyEnum):
    """Comparison operators for conditional rules."""
    EQUALS = "equals"
    NOT_EQUALS = "not-equals"
    CONTAINS = "contains"
    GREATER_THAN = "greater-than"
    LESS_THAN = "less-than"


class ConditionalRule(Record):
    """Show the owning field only when another field's value matches."""
    field_id: str
    operator: RuleOperator
    value: Union[bool, int, float, str]


class FormField(Record):
    """A single input within a form."""
    id: str
    type: FieldType
    label: str
    placeholder: Optional[str] = None
    required: bool = False
    options: Optional[List[str]] = None
    order: int
    conditional_rules: Optional[List[ConditionalRule]] = None
    calculation: Optional[str] = None


class Form(Record):
    """
    A form definition.
    
    Templates are ordinary forms with ``is_template`` set; forms built from
    a template keep its id in ``template_id``.
    """
    id: str
    name: str
    description: Optional[str] = None
    fields: List[FormField] = []
    user_id: Optional[str] = None
    template_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    is_template: bool = False
    category: Optional[str] = None
    
    def get_field(self, field_id: str) -> Optional[FormField]:
        for field in self.fields:
            if field.id == field_id:
                return field
        return None
