# tests/test_submissions.py - Submission router tests
import pytest
from httpx import AsyncClient

SIGNATURE = "data:image/png;base64,iVBORw0KGgo="


@pytest.mark.asyncio
async def test_create_submission(client: AsyncClient, worker_headers, inspection_form):
    resp = await client.post(
        "/api/submissions",
        json={
            "formId": inspection_form["id"],
            "location": "Pump house 2",
            "data": {
                "hours": "2",
                "rate": "3",
                "issue": "No",
                "checks": ["Seals"],
                "contact": "ops@example.com",
                "visited": "2024-03-01",
                "signature": SIGNATURE,
            },
        },
        headers=worker_headers,
    )
    assert resp.status_code == 201, resp.text
    submission = resp.json()
    assert submission["id"] == "submission-1"
    assert submission["formName"] == "Pump Inspection"
    assert submission["submittedBy"] == "Field-Worker User"
    assert submission["status"] == "completed"
    assert submission["data"]["total"] == 6
    assert "submittedAt" in submission

    resp = await client.get(f"/api/submissions/{submission['id']}")
    assert resp.status_code == 200
    assert resp.json() == submission


@pytest.mark.asyncio
async def test_submission_reports_every_problem(client: AsyncClient, worker_headers, inspection_form):
    resp = await client.post(
        "/api/submissions",
        json={
            "formId": inspection_form["id"],
            "data": {
                "issue": "Maybe",
                "checks": ["Gaskets"],
                "contact": "not-an-email",
                "visited": "yesterday",
                "signature": "scribble",
                "extra": 1,
            },
        },
        headers=worker_headers,
    )
    assert resp.status_code == 422
    problems = {item["field"]: item["message"] for item in resp.json()["detail"]}
    assert set(problems) == {"extra", "hours", "issue", "checks", "contact", "visited", "signature"}
    assert problems["hours"] == "is required"


@pytest.mark.asyncio
async def test_hidden_fields_are_not_required(client: AsyncClient, worker_headers, inspection_form):
    payload = {"formId": inspection_form["id"], "data": {"hours": "1", "issue": "Yes"}}
    resp = await client.post("/api/submissions", json=payload, headers=worker_headers)
    assert resp.status_code == 422
    assert [item["field"] for item in resp.json()["detail"]] == ["details"]

    payload["data"]["details"] = "Seal leaking"
    resp = await client.post("/api/submissions", json=payload, headers=worker_headers)
    assert resp.status_code == 201


@pytest.mark.asyncio
async def test_submission_for_missing_form(client: AsyncClient, worker_headers):
    resp = await client.post(
        "/api/submissions",
        json={"formId": "form-999", "data": {}},
        headers=worker_headers,
    )
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_viewer_cannot_submit(client: AsyncClient, viewer_headers, inspection_form):
    resp = await client.post(
        "/api/submissions",
        json={"formId": inspection_form["id"], "data": {"hours": "1", "issue": "No"}},
        headers=viewer_headers,
    )
    assert resp.status_code == 403


@pytest.mark.asyncio
async def test_list_search_and_filter(client: AsyncClient, app, worker_headers, inspection_form):
    for location in ["North yard", "South yard"]:
        resp = await client.post(
            "/api/submissions",
            json={
                "formId": inspection_form["id"],
                "location": location,
                "data": {"hours": "1", "issue": "No"},
            },
            headers=worker_headers,
        )
        assert resp.status_code == 201

    resp = await client.get("/api/submissions")
    assert [s["id"] for s in resp.json()] == ["submission-2", "submission-1"]

    resp = await client.get("/api/submissions", params={"search": "north"})
    assert [s["location"] for s in resp.json()] == ["North yard"]

    resp = await client.get("/api/submissions", params={"status": "flagged"})
    assert resp.json() == []

    resp = await client.get("/api/submissions", params={"formId": inspection_form["id"], "status": "completed"})
    assert len(resp.json()) == 2

    resp = await client.get("/api/submissions", params={"status": "archived"})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_get_missing_submission(client: AsyncClient):
    resp = await client.get("/api/submissions/submission-42")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Submission not found"


@pytest.mark.asyncio
async def test_delete_submission(client: AsyncClient, admin_headers, worker_headers, inspection_form):
    resp = await client.post(
        "/api/submissions",
        json={"formId": inspection_form["id"], "data": {"hours": "1", "issue": "No"}},
        headers=worker_headers,
    )
    submission_id = resp.json()["id"]

    resp = await client.delete(f"/api/submissions/{submission_id}", headers=worker_headers)
    assert resp.status_code == 403

    resp = await client.delete(f"/api/submissions/{submission_id}", headers=admin_headers)
    assert resp.status_code == 200

    resp = await client.delete(f"/api/submissions/{submission_id}", headers=admin_headers)
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_calculations_tolerate_loose_answers(client: AsyncClient, worker_headers, inspection_form):
    resp = await client.post(
        "/api/submissions",
        json={
            "formId": inspection_form["id"],
            "data": {"hours": "about 3", "rate": "$10", "issue": "No"},
        },
        headers=worker_headers,
    )
    assert resp.status_code == 201, resp.text
    assert resp.json()["data"]["total"] == 30


@pytest.mark.asyncio
async def test_failed_calculation_is_stored_as_zero(client: AsyncClient, worker_headers, inspection_form):
    resp = await client.post(
        "/api/submissions",
        json={
            "formId": inspection_form["id"],
            "data": {"hours": "n/a", "rate": "10", "issue": "No", "total": 99},
        },
        headers=worker_headers,
    )
    assert resp.status_code == 201, resp.text
    assert resp.json()["data"]["total"] == 0
