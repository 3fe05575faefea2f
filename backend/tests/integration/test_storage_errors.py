"""Storage failures inside a request: list failures answer 400, others 500.

A failing request must leave the stored rows untouched, including the
film_actor rows removed earlier in the same delete request.
"""

from collections.abc import AsyncIterator, Callable

import pytest
from fastapi import Depends
from httpx import AsyncClient
from sqlalchemy import Delete, Update
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from sakila_api.application.usecases.actor import CreateActorUseCase
from sakila_api.infrastructure.database.datasources import (
    ActorDataSource,
    FilmActorDataSource,
    FilmDataSource,
)
from sakila_api.infrastructure.database.repositories import SQLAlchemyActorRepository
from sakila_api.infrastructure.database.session import get_db_session
from sakila_api.infrastructure.dependencies import get_create_actor_usecase
from sakila_api.main import app
from tests.integration.fixtures.seed_data import seed_actor, seed_film, seed_film_actor

ACTORS = "/api/actor/v1/me"
FILMS = "/api/film/v1/me"


def _failing_session(session_factory, fails: Callable[[object], bool]):
    """Session dependency whose ``execute`` raises for statements matching ``fails``."""

    async def _override() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            execute = session.execute

            async def _execute(statement, *args, **kwargs):
                if fails(statement):
                    raise OperationalError(str(statement), {}, Exception("database is locked"))
                return await execute(statement, *args, **kwargs)

            session.execute = _execute
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    return _override


def _deletes_from(table_name: str) -> Callable[[object], bool]:
    return lambda stmt: isinstance(stmt, Delete) and stmt.table.name == table_name


class StaleMaxIdActorRepository(SQLAlchemyActorRepository):
    """Reports an empty table so the next id collides with an existing row."""

    async def get_max_id(self) -> int:
        return 0


def _stale_create_usecase(session: AsyncSession = Depends(get_db_session)) -> CreateActorUseCase:
    return CreateActorUseCase(StaleMaxIdActorRepository(ActorDataSource(session)))


@pytest.mark.asyncio
async def test_colliding_actor_id_returns_500(client: AsyncClient, session_factory):
    await seed_actor(session_factory, 1)
    app.dependency_overrides[get_create_actor_usecase] = _stale_create_usecase

    response = await client.post(f"{ACTORS}/", json={"first_name": "John", "last_name": "Doe"})

    assert response.status_code == 500
    assert response.json() == {"message": "Actor create failed"}
    listed = (await client.get(f"{ACTORS}/")).json()
    assert [a["first_name"] for a in listed] == ["PENELOPE"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("url", "message"),
    [
        (f"{ACTORS}/", "Actor list not found"),
        (f"{FILMS}/", "Film list not found"),
    ],
)
async def test_unreadable_table_answers_list_not_found(
    client: AsyncClient, session_factory, url: str, message: str
):
    await seed_actor(session_factory, 1)
    await seed_film(session_factory, 1)
    app.dependency_overrides[get_db_session] = _failing_session(session_factory, lambda stmt: True)

    response = await client.get(url)

    assert response.status_code == 400
    assert response.json() == {"message": message}


@pytest.mark.asyncio
async def test_failed_actor_update_returns_500_and_keeps_row(client: AsyncClient, session_factory):
    await seed_actor(session_factory, 1, "PENELOPE", "GUINESS")
    app.dependency_overrides[get_db_session] = _failing_session(
        session_factory, lambda stmt: isinstance(stmt, Update)
    )

    response = await client.put(f"{ACTORS}/id/1", json={"first_name": "Jane"})

    assert response.status_code == 500
    assert response.json() == {"message": "Actor update failed"}
    async with session_factory() as session:
        stored = await ActorDataSource(session).get(actor_id=1)
    assert (stored.first_name, stored.last_name) == ("PENELOPE", "GUINESS")


@pytest.mark.asyncio
async def test_failed_film_update_returns_500_and_keeps_row(client: AsyncClient, session_factory):
    await seed_film(session_factory, 1, "ACADEMY DINOSAUR")
    app.dependency_overrides[get_db_session] = _failing_session(
        session_factory, lambda stmt: isinstance(stmt, Update)
    )

    response = await client.put(f"{FILMS}/id/1", json={"title": "RENAMED"})

    assert response.status_code == 500
    assert response.json() == {"message": "Film update failed"}
    async with session_factory() as session:
        stored = await FilmDataSource(session).get(film_id=1)
    assert stored.title == "ACADEMY DINOSAUR"


@pytest.mark.asyncio
async def test_failed_actor_delete_rolls_back_film_links(client: AsyncClient, session_factory):
    await seed_actor(session_factory, 1)
    await seed_film(session_factory, 1)
    await seed_film(session_factory, 23, "ANACONDA CONFESSIONS")
    await seed_film_actor(session_factory, 1, 1)
    await seed_film_actor(session_factory, 1, 23)
    app.dependency_overrides[get_db_session] = _failing_session(
        session_factory, _deletes_from("actor")
    )

    response = await client.delete(f"{ACTORS}/id/1")

    assert response.status_code == 500
    assert response.json() == {"message": "Actor delete failed"}
    async with session_factory() as session:
        assert await ActorDataSource(session).get(actor_id=1) is not None
        links = await FilmActorDataSource(session).get_by_actor_id(1)
    assert [link.film_id for link in links] == [1, 23]


@pytest.mark.asyncio
async def test_failed_film_delete_rolls_back_actor_links(client: AsyncClient, session_factory):
    await seed_actor(session_factory, 1)
    await seed_film(session_factory, 1)
    await seed_film_actor(session_factory, 1, 1)
    app.dependency_overrides[get_db_session] = _failing_session(
        session_factory, _deletes_from("film")
    )

    response = await client.delete(f"{FILMS}/id/1")

    assert response.status_code == 500
    assert response.json() == {"message": "Film delete failed"}
    async with session_factory() as session:
        assert await FilmDataSource(session).get(film_id=1) is not None
        links = await FilmActorDataSource(session).get_by_actor_id(1)
    assert [link.film_id for link in links] == [1]


@pytest.mark.asyncio
async def test_failed_link_cleanup_reports_the_routed_entity(client: AsyncClient, session_factory):
    await seed_actor(session_factory, 1)
    app.dependency_overrides[get_db_session] = _failing_session(
        session_factory, _deletes_from("film_actor")
    )

    response = await client.delete(f"{ACTORS}/id/1")

    assert response.status_code == 500
    assert response.json() == {"message": "Actor delete failed"}
