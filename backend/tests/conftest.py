# tests/conftest.py - Shared test fixtures
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from fieldform.config import Settings
from fieldform.main import create_app

SESSION_COOKIE = "fieldform-session"


class FakeClock:
    """Deterministic clock for the stores."""

    def __init__(self, start=None):
        self.now = start or datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def settings():
    return Settings(seed_templates=True, log_level="WARNING", id_strategy="sequential")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest_asyncio.fixture
async def client(app):
    """HTTP test client bound to a freshly built application"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def sign_up(client):
    """Register a user with the given role and return headers carrying their session"""

    async def _sign_up(role="field-worker", email=None, name=None, password="secret-pass"):
        resp = await client.post(
            "/api/auth/register",
            json={
                "email": email or f"{role}@example.com",
                "password": password,
                "name": name or f"{role.title()} User",
                "role": role,
            },
        )
        assert resp.status_code == 200, resp.text
        token = resp.cookies.get(SESSION_COOKIE)
        assert token
        # Tests pass the session explicitly; keep the client's jar empty.
        client.cookies.clear()
        return {"Cookie": f"{SESSION_COOKIE}={token}"}

    return _sign_up


@pytest_asyncio.fixture
async def admin_headers(sign_up):
    return await sign_up("admin")


@pytest_asyncio.fixture
async def manager_headers(sign_up):
    return await sign_up("manager")


@pytest_asyncio.fixture
async def worker_headers(sign_up):
    return await sign_up("field-worker")


@pytest_asyncio.fixture
async def viewer_headers(sign_up):
    return await sign_up("viewer")


INSPECTION_FORM = {
    "name": "Pump Inspection",
    "description": "Monthly pump check",
    "category": "Maintenance",
    "fields": [
        {"id": "hours", "type": "text", "label": "Hours", "required": True},
        {"id": "rate", "type": "text", "label": "Rate"},
        {
            "id": "total",
            "type": "text",
            "label": "Total",
            "calculation": "field['hours'] * field['rate']",
        },
        {"id": "issue", "type": "radio", "label": "Issue found?", "required": True, "options": ["Yes", "No"]},
        {
            "id": "details",
            "type": "textarea",
            "label": "Details",
            "required": True,
            "conditionalRules": [{"fieldId": "issue", "operator": "equals", "value": "Yes"}],
        },
        {"id": "checks", "type": "checkbox", "label": "Checks", "options": ["Seals", "Bearings"]},
        {"id": "contact", "type": "email", "label": "Contact"},
        {"id": "visited", "type": "date", "label": "Visit date"},
        {"id": "signature", "type": "signature", "label": "Signature"},
    ],
}


@pytest.fixture
def inspection_form_payload():
    return {**INSPECTION_FORM, "fields": [dict(f) for f in INSPECTION_FORM["fields"]]}


@pytest_asyncio.fixture
async def inspection_form(client, manager_headers, inspection_form_payload):
    resp = await client.post("/api/forms", json=inspection_form_payload, headers=manager_headers)
    assert resp.status_code == 201, resp.text
    return resp.json()
