"""Form definition request/response schemas."""

from typing import Optional, List, Dict, Any

from pydantic import Field, field_validator, model_validator

from fieldform.models.base import CamelModel
from fieldform.models.form import ConditionalRule, FieldType
from fieldform.services.conditional import parse_formula


class FormFieldCreate(CamelModel):
    """A field as sent by the form builder. ``order`` may be omitted."""
    id: str = Field(..., min_length=1)
    type: FieldType
    label: str
    placeholder: Optional[str] = None
    required: bool = False
    options: Optional[List[str]] = None
    order: Optional[int] = None
    conditional_rules: Optional[List[ConditionalRule]] = None
    calculation: Optional[str] = None
    
    @field_validator("calculation")
    @classmethod
    def calculation_must_parse(cls, value: Optional[str]) -> Optional[str]:
        if value:
            parse_formula(value)
        return value
    
    @model_validator(mode="after")
    def rules_must_not_reference_self(self) -> "FormFieldCreate":
        for rule in self.conditional_rules or []:
            if rule.field_id == self.id:
                raise ValueError(f"Field '{self.id}' has a conditional rule on itself")
        return self


def _check_fields(fields: Optional[List[FormFieldCreate]]) -> Optional[List[FormFieldCreate]]:
    if fields is None:
        return fields
    
    ids = [field.id for field in fields]
    duplicates = sorted({field_id for field_id in ids if ids.count(field_id) > 1})
    if duplicates:
        raise ValueError(f"Duplicate field ids: {', '.join(duplicates)}")
    
    known = set(ids)
    for field in fields:
        for rule in field.conditional_rules or []:
            if rule.field_id not in known:
                raise ValueError(
                    f"Field '{field.id}' has a rule on unknown field '{rule.field_id}'"
                )
    return fields


class FormCreate(CamelModel):
    """Schema for creating a form or template."""
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    fields: List[FormFieldCreate]
    user_id: Optional[str] = None
    template_id: Optional[str] = None
    category: Optional[str] = None
    is_template: bool = False
    
    @field_validator("fields")
    @classmethod
    def fields_must_be_consistent(cls, value):
        return _check_fields(value)


class FormUpdate(CamelModel):
    """Schema for a partial form update. ``fields`` replaces the whole list."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    fields: Optional[List[FormFieldCreate]] = None
    category: Optional[str] = None
    is_template: Optional[bool] = None
    template_id: Optional[str] = None
    
    @field_validator("fields")
    @classmethod
    def fields_must_be_consistent(cls, value):
        return _check_fields(value)


class FormEvaluationRequest(CamelModel):
    """In-progress answers to run the conditional logic against."""
    data: Dict[str, Any] = {}


class FormEvaluationResponse(CamelModel):
    """Visible fields (in display order) and calculated values."""
    visible_fields: List[str]
    calculations: Dict[str, float]
    errors: Dict[str, str] = {}
