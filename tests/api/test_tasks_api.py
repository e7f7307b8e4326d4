from httpx import AsyncClient

from chacara.main import app
from chacara.services.board import TaskBoard
from chacara.stores import LocalStore


async def _create(client: AsyncClient, **fields) -> dict:
    payload = {"title": "Consertar a cerca", "category": "maintenance"}
    payload.update(fields)
    res = await client.post("/api/v1/tasks", json=payload)
    assert res.status_code == 201, res.text
    return res.json()


async def test_create_dated_task(client: AsyncClient, store: LocalStore):
    data = await _create(client, specific_date="2024-06-20", recurrence="monthly")

    assert data["title"] == "Consertar a cerca"
    assert data["specific_date"] == "2024-06-20"
    assert data["month_reference"] is None
    assert data["recurrence"] == "monthly"
    assert data["urgency"] == "medium"
    assert data["is_completed"] is False
    assert data["id"]
    assert [t.id for t in await store.list_tasks()] == [data["id"]]


async def test_create_seasonal_task(client: AsyncClient):
    data = await _create(client, title="Plantar milho", category="planting", month_reference=8, urgency="high")
    assert data["month_reference"] == 8
    assert data["specific_date"] is None
    assert data["urgency"] == "high"


async def test_create_requires_exactly_one_date_field(client: AsyncClient):
    both = {"title": "x", "specific_date": "2024-06-20", "month_reference": 5}
    neither = {"title": "x"}
    for payload in (both, neither):
        res = await client.post("/api/v1/tasks", json=payload)
        assert res.status_code == 422


async def test_create_validation(client: AsyncClient):
    for payload in (
        {"title": "   ", "month_reference": 1},
        {"title": "x", "month_reference": 12},
        {"title": "x", "month_reference": 1, "category": "irrigation"},
        {"title": "x", "month_reference": 1, "recurrence": "hourly"},
    ):
        res = await client.post("/api/v1/tasks", json=payload)
        assert res.status_code == 422, payload


async def test_list_with_filters(client: AsyncClient):
    await _create(client, title="a", urgency="high", category="animals", month_reference=1)
    await _create(client, title="b", urgency="low", category="animals", month_reference=1)
    await _create(client, title="c", urgency="high", category="planting", month_reference=1)

    res = await client.get("/api/v1/tasks")
    assert {t["title"] for t in res.json()} == {"a", "b", "c"}

    res = await client.get("/api/v1/tasks", params={"urgency": "high"})
    assert {t["title"] for t in res.json()} == {"a", "c"}

    res = await client.get("/api/v1/tasks", params={"urgency": "high", "category": "animals"})
    assert [t["title"] for t in res.json()] == ["a"]

    res = await client.get("/api/v1/tasks", params={"urgency": "urgent"})
    assert res.status_code == 422


async def test_completed_tasks_listed_last(client: AsyncClient):
    first = await _create(client, title="first", month_reference=1)
    await _create(client, title="second", month_reference=1)
    await client.post(f"/api/v1/tasks/{first['id']}/toggle")

    res = await client.get("/api/v1/tasks")
    assert [t["title"] for t in res.json()] == ["second", "first"]


async def test_toggle_twice(client: AsyncClient, store: LocalStore):
    task = await _create(client, specific_date="2024-06-20")

    res = await client.post(f"/api/v1/tasks/{task['id']}/toggle")
    assert res.status_code == 200
    assert res.json()["is_completed"] is True
    [stored] = await store.list_tasks()
    assert stored.is_completed

    res = await client.post(f"/api/v1/tasks/{task['id']}/toggle")
    assert res.json() == task


async def test_set_completion(client: AsyncClient):
    task = await _create(client, specific_date="2024-06-20")

    res = await client.patch(f"/api/v1/tasks/{task['id']}", json={"is_completed": True})
    assert res.status_code == 200
    assert res.json()["is_completed"] is True

    res = await client.get(f"/api/v1/tasks/{task['id']}")
    assert res.json()["is_completed"] is True


async def test_delete(client: AsyncClient, store: LocalStore):
    task = await _create(client, specific_date="2024-06-20")

    res = await client.delete(f"/api/v1/tasks/{task['id']}")
    assert res.status_code == 204
    assert await store.list_tasks() == []

    res = await client.get(f"/api/v1/tasks/{task['id']}")
    assert res.status_code == 404


async def test_unknown_task_returns_404(client: AsyncClient):
    assert (await client.get("/api/v1/tasks/missing")).status_code == 404
    assert (await client.post("/api/v1/tasks/missing/toggle")).status_code == 404
    assert (await client.patch("/api/v1/tasks/missing", json={"is_completed": True})).status_code == 404
    assert (await client.delete("/api/v1/tasks/missing")).status_code == 404


async def test_board_not_loaded_returns_503(client: AsyncClient, store: LocalStore):
    app.state.board = TaskBoard(store)
    res = await client.get("/api/v1/tasks")
    assert res.status_code == 503
