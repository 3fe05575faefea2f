"""Use case: list every actor."""

from sakila_api.application.interfaces import ActorRepository
from sakila_api.domain.entities import Actor


class GetActorListUseCase:
    def __init__(self, repository: ActorRepository):
        self._repository = repository

    async def execute(self) -> list[Actor] | None:
        return await self._repository.get_list()
