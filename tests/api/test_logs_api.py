from httpx import AsyncClient


async def test_create_log_defaults_to_today(client: AsyncClient):
    res = await client.post("/api/v1/logs", json={"content": "Choveu 15mm à tarde."})
    assert res.status_code == 201
    data = res.json()
    assert data["log_date"] == "2024-06-12"
    assert data["content"] == "Choveu 15mm à tarde."
    assert data["id"]


async def test_create_log_with_date(client: AsyncClient):
    res = await client.post("/api/v1/logs", json={"content": "Geada", "log_date": "2024-06-01"})
    assert res.json()["log_date"] == "2024-06-01"


async def test_empty_log_rejected(client: AsyncClient):
    res = await client.post("/api/v1/logs", json={"content": "  "})
    assert res.status_code == 422


async def test_list_recent_logs(client: AsyncClient):
    for day, text in (("2024-06-01", "a"), ("2024-06-03", "c"), ("2024-06-02", "b")):
        await client.post("/api/v1/logs", json={"content": text, "log_date": day})

    res = await client.get("/api/v1/logs")
    assert [e["content"] for e in res.json()] == ["c", "b", "a"]

    res = await client.get("/api/v1/logs", params={"limit": 2})
    assert [e["content"] for e in res.json()] == ["c", "b"]
