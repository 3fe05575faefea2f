"""Concrete ActorRepository: delegates every call to the actor datasource."""

from collections.abc import Sequence
from datetime import datetime

from sakila_api.application.interfaces import ActorRepository
from sakila_api.domain.entities import Actor
from sakila_api.infrastructure.database.datasources import ActorDataSource


class SQLAlchemyActorRepository(ActorRepository):
    """Implements the ActorRepository port on top of ActorDataSource."""

    def __init__(self, datasource: ActorDataSource):
        self._datasource = datasource

    async def create(self, actor: Actor) -> None:
        await self._datasource.create(actor)

    async def get(
        self,
        actor_id: int | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        relations: Sequence[str] | None = None,
    ) -> Actor | None:
        return await self._datasource.get(actor_id, first_name, last_name, relations)

    async def get_list(self) -> list[Actor] | None:
        return await self._datasource.get_list()

    async def get_max_id(self) -> int:
        return await self._datasource.get_max_id()

    async def update(
        self,
        actor: Actor,
        first_name: str | None,
        last_name: str | None,
        last_update: datetime,
    ) -> bool:
        return await self._datasource.update(actor, first_name, last_name, last_update)

    async def delete(self, actor: Actor) -> bool:
        return await self._datasource.delete(actor)
