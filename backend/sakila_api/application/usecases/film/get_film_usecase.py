"""Use case: look up a single film."""

from sakila_api.application.interfaces import FilmRepository
from sakila_api.domain.entities import Film


class GetFilmUseCase:
    """Resolves one film by id and/or exact title. None means "not found"."""

    def __init__(self, repository: FilmRepository):
        self._repository = repository

    async def execute(self, film_id: int | None = None, title: str | None = None) -> Film | None:
        return await self._repository.get(film_id, title)
