"""HTTP tests for the actor endpoints under /api/actor/v1/me."""

import pytest
from httpx import AsyncClient

from tests.integration.fixtures.seed_data import seed_actor, seed_film, seed_film_actor

BASE = "/api/actor/v1/me"


@pytest.mark.asyncio
async def test_create_actor_on_empty_store(client: AsyncClient):
    response = await client.post(f"{BASE}/", json={"first_name": "John", "last_name": "Doe"})

    assert response.status_code == 201
    assert response.json() == {"id": 1, "first_name": "John", "last_name": "Doe"}


@pytest.mark.asyncio
async def test_create_actor_follows_existing_max_id(client: AsyncClient, session_factory):
    await seed_actor(session_factory, 200, "THORA", "TEMPLE")

    response = await client.post(f"{BASE}/", json={"first_name": "John", "last_name": "Doe"})

    assert response.json()["id"] == 201


@pytest.mark.asyncio
async def test_create_then_get(client: AsyncClient):
    created = (await client.post(f"{BASE}/", json={"first_name": "John", "last_name": "Doe"})).json()

    response = await client.get(f"{BASE}/id/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


@pytest.mark.asyncio
async def test_get_missing_actor_returns_404(client: AsyncClient):
    response = await client.get(f"{BASE}/id/999")

    assert response.status_code == 404
    assert response.json() == {"message": "Actor not found"}


@pytest.mark.asyncio
async def test_get_actor_rejects_non_numeric_id(client: AsyncClient):
    response = await client.get(f"{BASE}/id/abc")
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_actors(client: AsyncClient, session_factory):
    assert (await client.get(f"{BASE}/")).json() == []

    await seed_actor(session_factory, 1, "PENELOPE", "GUINESS")
    await seed_actor(session_factory, 2, "NICK", "WAHLBERG")
    response = await client.get(f"{BASE}/")

    assert response.status_code == 200
    assert [a["first_name"] for a in response.json()] == ["PENELOPE", "NICK"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {"first_name": "", "last_name": "Doe"},
        {"first_name": "J" * 46, "last_name": "Doe"},
        {"first_name": "John"},
    ],
)
async def test_create_actor_validation(client: AsyncClient, body: dict):
    response = await client.post(f"{BASE}/", json=body)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_first_name_only(client: AsyncClient, session_factory):
    await seed_actor(session_factory, 1, "John", "Doe")

    response = await client.put(f"{BASE}/id/1", json={"first_name": "Jane"})

    assert response.status_code == 200
    assert response.json() is True
    assert (await client.get(f"{BASE}/id/1")).json() == {
        "id": 1,
        "first_name": "Jane",
        "last_name": "Doe",
    }


@pytest.mark.asyncio
async def test_update_with_empty_body_returns_false(client: AsyncClient, session_factory):
    await seed_actor(session_factory, 1, "John", "Doe")

    response = await client.put(f"{BASE}/id/1", json={})

    assert response.status_code == 200
    assert response.json() is False


@pytest.mark.asyncio
async def test_update_missing_actor_returns_404(client: AsyncClient):
    response = await client.put(f"{BASE}/id/42", json={"first_name": "Jane"})

    assert response.status_code == 404
    assert response.json() == {"message": "Actor not found"}


@pytest.mark.asyncio
async def test_delete_actor_removes_film_links(client: AsyncClient, session_factory):
    await seed_actor(session_factory, 1)
    await seed_film(session_factory, 1)
    await seed_film_actor(session_factory, 1, 1)

    response = await client.delete(f"{BASE}/id/1")

    assert response.status_code == 200
    assert response.json() is True
    assert (await client.get(f"{BASE}/id/1")).status_code == 404
    assert (await client.get("/api/film/v1/me/actor/1")).json() == []


@pytest.mark.asyncio
async def test_delete_missing_actor_returns_404(client: AsyncClient):
    response = await client.delete(f"{BASE}/id/7")

    assert response.status_code == 404
    assert response.json() == {"message": "Actor not found"}


@pytest.mark.asyncio
async def test_actor_films(client: AsyncClient, session_factory):
    await seed_actor(session_factory, 1)
    await seed_film(session_factory, 1, "ACADEMY DINOSAUR")
    await seed_film(session_factory, 2, "ACE GOLDFINGER")
    await seed_film_actor(session_factory, 1, 2)

    response = await client.get(f"{BASE}/id/1/films")

    assert response.status_code == 200
    assert [f["title"] for f in response.json()] == ["ACE GOLDFINGER"]
    assert (await client.get(f"{BASE}/id/2/films")).status_code == 404
