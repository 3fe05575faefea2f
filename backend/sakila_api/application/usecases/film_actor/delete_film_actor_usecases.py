"""Use cases: drop film/actor associations ahead of deleting either side."""

import logging

from sakila_api.application.interfaces import FilmActorRepository

logger = logging.getLogger(__name__)


class DeleteFilmActorByActorIdUseCase:
    """Removes every film association of one actor."""

    def __init__(self, repository: FilmActorRepository):
        self._repository = repository

    async def execute(self, actor_id: int) -> int:
        removed = await self._repository.delete_by_actor_id(actor_id)
        logger.debug("Removed %d film association(s) of actor %d", removed, actor_id)
        return removed


class DeleteFilmActorByFilmIdUseCase:
    """Removes every actor association of one film."""

    def __init__(self, repository: FilmActorRepository):
        self._repository = repository

    async def execute(self, film_id: int) -> int:
        removed = await self._repository.delete_by_film_id(film_id)
        logger.debug("Removed %d actor association(s) of film %d", removed, film_id)
        return removed
