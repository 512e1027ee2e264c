"""
Kind board (category) endpoint tests: creation, uniqueness, and lookup by
id and by name.
"""
import pytest
from httpx import AsyncClient


async def _create_kind_board(client: AsyncClient, name: str) -> dict:
    resp = await client.post("/api/v1/kind-boards", json={"kind_board_name": name})
    assert resp.status_code == 201
    return resp.json()


@pytest.mark.asyncio
async def test_create_kind_board(async_client: AsyncClient):
    kind = await _create_kind_board(async_client, "TEST")
    assert kind["kind_board_name"] == "TEST"
    assert "id" in kind
    assert "created_at" in kind


@pytest.mark.asyncio
async def test_create_duplicate_kind_board_returns_409(async_client: AsyncClient):
    await _create_kind_board(async_client, "TEST")
    resp = await async_client.post("/api/v1/kind-boards", json={"kind_board_name": "TEST"})
    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_create_kind_board_empty_name(async_client: AsyncClient):
    resp = await async_client.post("/api/v1/kind-boards", json={"kind_board_name": ""})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_get_kind_board_by_id(async_client: AsyncClient):
    kind = await _create_kind_board(async_client, "NOTICE")
    resp = await async_client.get(f"/api/v1/kind-boards/{kind['id']}")
    assert resp.status_code == 200
    assert resp.json()["kind_board_name"] == "NOTICE"


@pytest.mark.asyncio
async def test_get_kind_board_zero_id(async_client: AsyncClient):
    await _create_kind_board(async_client, "NOTICE")
    resp = await async_client.get("/api/v1/kind-boards/0")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_get_kind_board_by_name(async_client: AsyncClient):
    kind = await _create_kind_board(async_client, "FREE")
    resp = await async_client.get("/api/v1/kind-boards/by-name/FREE")
    assert resp.status_code == 200
    assert resp.json()["id"] == kind["id"]


@pytest.mark.asyncio
async def test_get_kind_board_by_unknown_name(async_client: AsyncClient):
    resp = await async_client.get("/api/v1/kind-boards/by-name/MISSING")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_list_kind_boards(async_client: AsyncClient):
    for name in ("QNA", "FREE"):
        await _create_kind_board(async_client, name)
    resp = await async_client.get("/api/v1/kind-boards")
    assert resp.status_code == 200
    assert [k["kind_board_name"] for k in resp.json()] == ["FREE", "QNA"]
