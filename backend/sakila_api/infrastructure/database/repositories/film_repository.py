"""Concrete FilmRepository: delegates every call to the film datasource."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from sakila_api.application.interfaces import FilmRepository
from sakila_api.domain.entities import Film
from sakila_api.infrastructure.database.datasources import FilmDataSource


class SQLAlchemyFilmRepository(FilmRepository):
    """Implements the FilmRepository port on top of FilmDataSource."""

    def __init__(self, datasource: FilmDataSource):
        self._datasource = datasource

    async def create(self, film: Film) -> None:
        await self._datasource.create(film)

    async def get(self, film_id: int | None = None, title: str | None = None) -> Film | None:
        return await self._datasource.get(film_id, title)

    async def get_list(self) -> list[Film] | None:
        return await self._datasource.get_list()

    async def get_max_id(self) -> int:
        return await self._datasource.get_max_id()

    async def update(self, film: Film, changes: Mapping[str, Any], last_update: datetime) -> bool:
        return await self._datasource.update(film, changes, last_update)

    async def delete(self, film: Film) -> bool:
        return await self._datasource.delete(film)
