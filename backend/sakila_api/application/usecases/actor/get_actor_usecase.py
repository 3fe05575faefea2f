"""Use case: look up a single actor."""

from collections.abc import Sequence

from sakila_api.application.interfaces import ActorRepository
from sakila_api.domain.entities import Actor


class GetActorUseCase:
    """Resolves one actor by id and/or name. None means "not found"."""

    def __init__(self, repository: ActorRepository):
        self._repository = repository

    async def execute(
        self,
        actor_id: int | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        relations: Sequence[str] | None = None,
    ) -> Actor | None:
        return await self._repository.get(actor_id, first_name, last_name, relations)
