"""Use case: remove a film."""

import logging

from sakila_api.application.interfaces import FilmRepository
from sakila_api.domain.entities import Film

logger = logging.getLogger(__name__)


class DeleteFilmUseCase:
    def __init__(self, repository: FilmRepository):
        self._repository = repository

    async def execute(self, film: Film) -> bool:
        deleted = await self._repository.delete(film)
        if deleted:
            logger.info("Deleted film %d", film.id)
        return deleted
