"""Use case: change an actor's name."""

from datetime import datetime, timezone

from sakila_api.application.interfaces import ActorRepository
from sakila_api.domain.entities import Actor


class UpdateActorUseCase:
    """Partially updates an already-fetched actor.

    Either name may be omitted (None) and is then left untouched. Returns the
    repository's flag rather than the updated entity.
    """

    def __init__(self, repository: ActorRepository):
        self._repository = repository

    async def execute(
        self,
        actor: Actor,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> bool:
        now = datetime.now(timezone.utc)
        return await self._repository.update(actor, first_name, last_name, now)
