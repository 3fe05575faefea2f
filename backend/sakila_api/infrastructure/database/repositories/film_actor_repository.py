"""Concrete FilmActorRepository: delegates to the film-actor datasource."""

from sakila_api.application.interfaces import FilmActorRepository
from sakila_api.domain.entities import FilmActor
from sakila_api.infrastructure.database.datasources import FilmActorDataSource


class SQLAlchemyFilmActorRepository(FilmActorRepository):
    """Implements the FilmActorRepository port on top of FilmActorDataSource."""

    def __init__(self, datasource: FilmActorDataSource):
        self._datasource = datasource

    async def get_by_actor_id(self, actor_id: int) -> list[FilmActor]:
        return await self._datasource.get_by_actor_id(actor_id)

    async def delete_by_actor_id(self, actor_id: int) -> int:
        return await self._datasource.delete_by_actor_id(actor_id)

    async def delete_by_film_id(self, film_id: int) -> int:
        return await self._datasource.delete_by_film_id(film_id)
