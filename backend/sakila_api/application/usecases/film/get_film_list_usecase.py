"""Use case: list every film."""

from sakila_api.application.interfaces import FilmRepository
from sakila_api.domain.entities import Film


class GetFilmListUseCase:
    def __init__(self, repository: FilmRepository):
        self._repository = repository

    async def execute(self) -> list[Film] | None:
        return await self._repository.get_list()
