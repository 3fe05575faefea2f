"""Use case: remove an actor."""

import logging

from sakila_api.application.interfaces import ActorRepository
from sakila_api.domain.entities import Actor

logger = logging.getLogger(__name__)


class DeleteActorUseCase:
    def __init__(self, repository: ActorRepository):
        self._repository = repository

    async def execute(self, actor: Actor) -> bool:
        deleted = await self._repository.delete(actor)
        if deleted:
            logger.info("Deleted actor %d", actor.id)
        return deleted
