"""API test helpers — login and creation shortcuts over an AsyncClient."""

from httpx import AsyncClient


async def login(client: AsyncClient, username: str) -> dict:
    res = await client.post("/api/session/login", json={"username": username})
    assert res.status_code == 200, res.text
    return res.json()


async def category_id_by_name(client: AsyncClient, name: str) -> str:
    res = await client.get("/api/categories")
    assert res.status_code == 200, res.text
    return next(c["id"] for c in res.json() if c["name"] == name)


async def create_task(client: AsyncClient, category_id: str, **fields) -> dict:
    payload = {"title": "Task", "categoryId": category_id, **fields}
    res = await client.post("/api/tasks", json=payload)
    assert res.status_code == 201, res.text
    return res.json()


async def create_category(
    client: AsyncClient, name: str, color_code: str = "#8B5CF6",
) -> dict:
    res = await client.post(
        "/api/categories", json={"name": name, "colorCode": color_code},
    )
    assert res.status_code == 201, res.text
    return res.json()
