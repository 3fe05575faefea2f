"""Use case: list the film associations of an actor."""

from sakila_api.application.interfaces import FilmActorRepository
from sakila_api.domain.entities import FilmActor


class GetFilmActorByActorIdUseCase:
    def __init__(self, repository: FilmActorRepository):
        self._repository = repository

    async def execute(self, actor_id: int) -> list[FilmActor]:
        return await self._repository.get_by_actor_id(actor_id)
