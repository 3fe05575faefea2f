"""Use case: register a new actor."""

import logging
from datetime import datetime, timezone

from sakila_api.application.interfaces import ActorRepository
from sakila_api.domain.entities import Actor

logger = logging.getLogger(__name__)


class CreateActorUseCase:
    """Creates an actor with the next free identifier.

    The identifier is ``max(existing) + 1``, read and inserted as two separate
    statements. Two concurrent creates may pick the same id; the losing insert
    is rejected by the primary key and surfaces as a StorageError.
    """

    def __init__(self, repository: ActorRepository):
        self._repository = repository

    async def execute(self, first_name: str, last_name: str) -> Actor:
        now = datetime.now(timezone.utc)
        max_actor_id = await self._repository.get_max_id()

        actor = Actor(
            id=max_actor_id + 1,
            first_name=first_name,
            last_name=last_name,
            last_update=now,
        )
        await self._repository.create(actor)
        logger.info("Created actor %d (%s)", actor.id, actor.full_name)
        return actor
