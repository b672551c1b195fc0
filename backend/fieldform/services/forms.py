"""Form definition service."""

from typing import Optional, Dict, Any

from fieldform.models.form import Form
from fieldform.models.user import User
from fieldform.schemas.form import FormCreate, FormUpdate, FormEvaluationResponse
from fieldform.services.conditional import calculate_fields, get_visible_fields
from fieldform.stores.forms import FormStore


class FormService:
    """Service for form definitions and their conditional logic."""
    
    @staticmethod
    def create_form(forms: FormStore, user: User, form_data: FormCreate) -> Form:
        """Create a form owned by ``form_data.user_id`` or, failing that, the caller."""
        values = form_data.model_dump()
        values["user_id"] = form_data.user_id or user.id
        return forms.create(values)
    
    @staticmethod
    def update_form(forms: FormStore, form_id: str, update_data: FormUpdate) -> Optional[Form]:
        """Apply only the attributes the client actually sent."""
        return forms.update(form_id, update_data.model_dump(exclude_unset=True))
    
    @staticmethod
    def evaluate_form(form: Form, data: Dict[str, Any]) -> FormEvaluationResponse:
        """Run the conditional logic engine over in-progress answers."""
        ordered = sorted(form.fields, key=lambda field: field.order)
        visible = get_visible_fields(ordered, data)
        values, errors = calculate_fields(visible, data)
        return FormEvaluationResponse(
            visible_fields=[field.id for field in visible],
            calculations=values,
            errors=errors,
        )
