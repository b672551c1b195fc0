"""Built-in form templates seeded at startup."""

import logging
from typing import Any, Dict, List

from fieldform.stores.forms import FormStore

logger = logging.getLogger(__name__)


TEMPLATES: List[Dict[str, Any]] = [
    {
        "name": "Safety Inspection",
        "description": "Comprehensive safety inspection form for workplace and site assessments",
        "category": "Safety",
        "fields": [
            {"id": "inspector", "type": "text", "label": "Inspector Name", "required": True, "placeholder": "Enter your name"},
            {"id": "email", "type": "email", "label": "Email Address", "required": True, "placeholder": "your.email@company.com"},
            {"id": "date", "type": "date", "label": "Inspection Date", "required": True},
            {"id": "location", "type": "text", "label": "Site Location", "required": True, "placeholder": "e.g., Building A - Floor 3"},
            {"id": "safety-equipment", "type": "radio", "label": "Safety Equipment Present?", "required": True, "options": ["Yes", "No", "Partially"]},
            {"id": "hazards", "type": "textarea", "label": "Hazards Identified", "placeholder": "Describe any hazards or concerns..."},
            {"id": "checklist", "type": "checkbox", "label": "Safety Checklist", "options": ["Fire Extinguishers", "Emergency Exits", "First Aid Kit", "Safety Signage"]},
            {"id": "rating", "type": "select", "label": "Overall Safety Rating", "required": True, "options": ["Excellent", "Good", "Fair", "Poor"]},
            {"id": "photo", "type": "image", "label": "Upload Photo (Optional)"},
            {"id": "signature", "type": "signature", "label": "Inspector Signature", "required": True},
        ],
    },
    {
        "name": "Work Order",
        "description": "Track maintenance and repair tasks with detailed work order forms",
        "category": "Maintenance",
        "fields": [
            {"id": "technician", "type": "text", "label": "Technician Name", "required": True},
            {"id": "work-date", "type": "date", "label": "Work Date", "required": True},
            {"id": "work-type", "type": "select", "label": "Work Type", "required": True, "options": ["Repair", "Maintenance", "Installation", "Inspection"]},
            {"id": "description", "type": "textarea", "label": "Work Description", "required": True},
            {"id": "parts", "type": "textarea", "label": "Parts Used"},
            {"id": "hours", "type": "text", "label": "Hours Worked", "required": True, "placeholder": "e.g., 2.5"},
            {"id": "photo", "type": "image", "label": "Before/After Photos"},
            {"id": "signature", "type": "signature", "label": "Customer Signature", "required": True},
        ],
    },
    {
        "name": "Daily Report",
        "description": "Document daily activities, progress, and site conditions",
        "category": "Reports",
        "fields": [
            {"id": "reporter", "type": "text", "label": "Reporter Name", "required": True},
            {"id": "date", "type": "date", "label": "Report Date", "required": True},
            {"id": "location", "type": "text", "label": "Site Location", "required": True},
            {"id": "activities", "type": "textarea", "label": "Activities Completed", "required": True},
            {"id": "progress", "type": "textarea", "label": "Progress Notes"},
            {"id": "issues", "type": "textarea", "label": "Issues Encountered"},
            {"id": "next-steps", "type": "textarea", "label": "Next Steps"},
            {"id": "photo", "type": "image", "label": "Progress Photos"},
        ],
    },
]


def seed_templates(forms: FormStore) -> None:
    """Load the built-in templates into an empty form store."""
    for template in TEMPLATES:
        forms.create({**template, "is_template": True})
    logger.info("Seeded %d form templates", len(TEMPLATES))
