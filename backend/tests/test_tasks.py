# tests/test_tasks.py - Scheduling task router tests
import pytest
from httpx import AsyncClient

TASK = {
    "formId": "form-1",
    "formName": "Safety Inspection",
    "assignedTo": "field-worker@example.com",
    "dueDate": "2024-03-15T09:00:00Z",
    "location": "Plant 3",
}


@pytest.mark.asyncio
async def test_create_task_defaults(client: AsyncClient, manager_headers):
    resp = await client.post("/api/scheduling/tasks", json=TASK, headers=manager_headers)
    assert resp.status_code == 201
    task = resp.json()
    assert task["id"] == "task-1"
    assert task["status"] == "pending"
    assert task["priority"] == "medium"
    assert task["assignedTo"] == "field-worker@example.com"


@pytest.mark.asyncio
async def test_create_task_requires_fields(client: AsyncClient, manager_headers):
    resp = await client.post(
        "/api/scheduling/tasks",
        json={"formId": "form-1", "formName": "Safety Inspection"},
        headers=manager_headers,
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_worker_cannot_schedule(client: AsyncClient, worker_headers):
    resp = await client.post("/api/scheduling/tasks", json=TASK, headers=worker_headers)
    assert resp.status_code == 403


@pytest.mark.asyncio
async def test_list_tasks_newest_first(client: AsyncClient, manager_headers):
    for assignee in ["a@example.com", "b@example.com"]:
        await client.post(
            "/api/scheduling/tasks",
            json={**TASK, "assignedTo": assignee, "priority": "high"},
            headers=manager_headers,
        )

    resp = await client.get("/api/scheduling/tasks")
    assert [t["id"] for t in resp.json()] == ["task-2", "task-1"]

    resp = await client.get("/api/scheduling/tasks", params={"assignedTo": "a@example.com"})
    assert [t["id"] for t in resp.json()] == ["task-1"]


@pytest.mark.asyncio
async def test_worker_updates_task_status(client: AsyncClient, manager_headers, worker_headers):
    resp = await client.post("/api/scheduling/tasks", json=TASK, headers=manager_headers)
    task_id = resp.json()["id"]

    for new_status in ["completed", "in-progress"]:
        resp = await client.put(
            f"/api/scheduling/tasks/{task_id}",
            json={"status": new_status},
            headers=worker_headers,
        )
        assert resp.status_code == 200
        assert resp.json()["status"] == new_status
        assert resp.json()["location"] == "Plant 3"

    resp = await client.get("/api/scheduling/tasks", params={"status": "in-progress"})
    assert [t["id"] for t in resp.json()] == [task_id]


@pytest.mark.asyncio
async def test_missing_task(client: AsyncClient, admin_headers):
    assert (await client.get("/api/scheduling/tasks/task-9")).status_code == 404
    resp = await client.put("/api/scheduling/tasks/task-9", json={"status": "completed"}, headers=admin_headers)
    assert resp.status_code == 404
    resp = await client.delete("/api/scheduling/tasks/task-9", headers=admin_headers)
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_delete_task(client: AsyncClient, admin_headers):
    resp = await client.post("/api/scheduling/tasks", json=TASK, headers=admin_headers)
    task_id = resp.json()["id"]

    resp = await client.delete(f"/api/scheduling/tasks/{task_id}", headers=admin_headers)
    assert resp.status_code == 200
    assert (await client.get(f"/api/scheduling/tasks/{task_id}")).status_code == 404


@pytest.mark.asyncio
async def test_null_update_keeps_task_values(client: AsyncClient, manager_headers):
    resp = await client.post("/api/scheduling/tasks", json=TASK, headers=manager_headers)
    task_id = resp.json()["id"]

    resp = await client.put(
        f"/api/scheduling/tasks/{task_id}",
        json={"status": None, "assignedTo": None, "location": None},
        headers=manager_headers,
    )
    assert resp.status_code == 200
    task = resp.json()
    assert task["status"] == "pending"
    assert task["assignedTo"] == "field-worker@example.com"
    assert task["location"] is None
