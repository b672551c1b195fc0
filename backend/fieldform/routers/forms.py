"""Form definition router."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from fieldform.database import get_form_store
from fieldform.models.form import Form
from fieldform.models.user import User
from fieldform.schemas.form import (
    FormCreate,
    FormUpdate,
    FormEvaluationRequest,
    FormEvaluationResponse,
)
from fieldform.services.auth import require_permission
from fieldform.services.forms import FormService
from fieldform.stores import FormStore

router = APIRouter()


def _get_or_404(forms: FormStore, form_id: str) -> Form:
    form = forms.get(form_id)
    if not form:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Form not found"
        )
    return form


@router.get("", response_model=List[Form])
async def list_forms(
    user_id: Optional[str] = Query(None, alias="userId"),
    templates: bool = False,
    forms: FormStore = Depends(get_form_store)
):
    """
    List forms.
    
    - ``templates=true`` returns only templates
    - ``userId`` narrows the list to one owner
    """
    if templates:
        return forms.get_templates()
    return forms.get_all(user_id=user_id)


@router.post("", response_model=Form, status_code=status.HTTP_201_CREATED)
async def create_form(
    form_data: FormCreate,
    forms: FormStore = Depends(get_form_store),
    current_user: User = Depends(require_permission("forms", "create"))
):
    """Create a new form or template."""
    return FormService.create_form(forms, current_user, form_data)


@router.get("/{form_id}", response_model=Form)
async def get_form(
    form_id: str,
    forms: FormStore = Depends(get_form_store)
):
    """Get a form by ID."""
    return _get_or_404(forms, form_id)


@router.put("/{form_id}", response_model=Form)
async def update_form(
    form_id: str,
    update_data: FormUpdate,
    forms: FormStore = Depends(get_form_store),
    current_user: User = Depends(require_permission("forms", "update"))
):
    """Update a form. A supplied field list replaces the existing one."""
    form = FormService.update_form(forms, form_id, update_data)
    if not form:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Form not found"
        )
    return form


@router.delete("/{form_id}")
async def delete_form(
    form_id: str,
    forms: FormStore = Depends(get_form_store),
    current_user: User = Depends(require_permission("forms", "delete"))
):
    """Delete a form. Its submissions and work orders are left in place."""
    if not forms.delete(form_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Form not found"
        )
    return {"message": "Form deleted successfully"}


@router.post("/{form_id}/evaluate", response_model=FormEvaluationResponse)
async def evaluate_form(
    form_id: str,
    request_data: FormEvaluationRequest,
    forms: FormStore = Depends(get_form_store)
):
    """Compute visible fields and calculated values for in-progress answers."""
    form = _get_or_404(forms, form_id)
    return FormService.evaluate_form(form, request_data.data)
