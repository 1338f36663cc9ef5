import uuid
from datetime import datetime

import pytest


@pytest.fixture(autouse=True)
def fixed_today(monkeypatch, clock):
    monkeypatch.setattr("habit_tracker.services.habit_service.local_now", clock)
    monkeypatch.setattr("habit_tracker.services.completion_service.local_now", clock)
    return clock


@pytest.mark.asyncio
async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_create_and_list_habits(client):
    resp = await client.post("/habits", json={"title": "Drink water", "weekDays": [1, 3, 5]})
    assert resp.status_code == 201
    created = resp.json()
    assert created["title"] == "Drink water"
    assert created["weekDays"] == [1, 3, 5]
    assert datetime.fromisoformat(created["created_at"]) == datetime(2024, 1, 15)
    uuid.UUID(created["id"])

    resp = await client.get("/habits")
    assert resp.status_code == 200
    assert [h["id"] for h in resp.json()] == [created["id"]]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {"title": "", "weekDays": [1]},
        {"title": "Run", "weekDays": [7]},
        {"title": "Run", "weekDays": [-1]},
        {"weekDays": [1]},
    ],
)
async def test_create_habit_rejects_bad_body(client, body):
    resp = await client.post("/habits", json=body)
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_blank_title_is_a_bad_request(client):
    resp = await client.post("/habits", json={"title": "   ", "weekDays": [1]})
    assert resp.status_code == 400
    assert "title" in resp.json()["detail"]


@pytest.mark.asyncio
async def test_day_toggle_and_summary_flow(client):
    habit = (await client.post("/habits", json={"title": "Drink water", "weekDays": [1, 3, 5]})).json()

    resp = await client.get("/day", params={"date": "2024-01-15"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["weekday"] == 1
    assert [h["title"] for h in body["asignedhabits"]] == ["Drink water"]
    assert body["completedHabits"] == []

    resp = await client.patch(f"/habits/{habit['id']}/toggle")
    assert resp.status_code == 200
    assert resp.text == f"Habit {habit['id']} is set to 'completed' on day 15"

    body = (await client.get("/day", params={"date": "2024-01-15T21:10:00"})).json()
    assert body["completedHabits"] == [habit["id"]]

    summary = (await client.get("/summary")).json()
    assert len(summary) == 1
    assert summary[0]["completed"] == 1
    assert summary[0]["amount"] == 1

    resp = await client.patch(f"/habits/{habit['id']}/toggle")
    assert resp.text == f"Habit {habit['id']} is set to 'uncompleted' on day 15"

    body = (await client.get("/day", params={"date": "2024-01-15"})).json()
    assert body["completedHabits"] == []


@pytest.mark.asyncio
async def test_day_before_creation_has_no_due_habits(client):
    await client.post("/habits", json={"title": "Drink water", "weekDays": [0, 1, 2, 3, 4, 5, 6]})

    body = (await client.get("/day", params={"date": "2024-01-14"})).json()
    assert body["weekday"] == 0
    assert body["asignedhabits"] == []


@pytest.mark.asyncio
async def test_toggle_unknown_habit_is_not_found(client):
    resp = await client.patch(f"/habits/{uuid.uuid4()}/toggle")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_toggle_requires_uuid(client):
    resp = await client.patch("/habits/not-a-uuid/toggle")
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_day_requires_valid_date(client):
    resp = await client.get("/day", params={"date": "yesterday-ish"})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_summary_empty(client):
    resp = await client.get("/summary")
    assert resp.status_code == 200
    assert resp.json() == []
