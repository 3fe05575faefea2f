"""Actor datasource: issues ORM statements against the 'actor' table."""

import logging
from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from sakila_api.domain.entities import Actor
from sakila_api.domain.exceptions import StorageError
from sakila_api.infrastructure.database.datasources.mapping import ensure_utc
from sakila_api.infrastructure.database.datasources.film_datasource import FilmDataSource
from sakila_api.infrastructure.database.models import ActorModel

logger = logging.getLogger(__name__)

_RELATIONS = {
    "films": ActorModel.films,
}


class ActorDataSource:
    """Translates between ActorModel rows and Actor domain entities."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def to_entity(model: ActorModel, with_films: bool = False) -> Actor:
        """Map ORM model → domain entity."""
        return Actor(
            id=model.actor_id,
            first_name=model.first_name,
            last_name=model.last_name,
            last_update=ensure_utc(model.last_update),
            films=[FilmDataSource.to_entity(f) for f in model.films] if with_films else None,
        )

    @staticmethod
    def to_model(entity: Actor) -> ActorModel:
        """Map domain entity → ORM model (for creation)."""
        return ActorModel(
            actor_id=entity.id,
            first_name=entity.first_name,
            last_name=entity.last_name,
            last_update=entity.last_update,
        )

    async def create(self, actor: Actor) -> None:
        self._session.add(self.to_model(actor))
        try:
            await self._session.flush()
        except SQLAlchemyError as e:
            logger.error("Insert of actor %s failed: %s", actor.id, e)
            raise StorageError("create", "Actor", str(e)) from e

    async def get(
        self,
        actor_id: int | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        relations: Sequence[str] | None = None,
    ) -> Actor | None:
        """Return the first actor matching every provided (non-empty) field."""
        stmt = select(ActorModel)

        conditions = []
        if actor_id:
            conditions.append(ActorModel.actor_id == actor_id)
        if first_name:
            conditions.append(ActorModel.first_name == first_name)
        if last_name:
            conditions.append(ActorModel.last_name == last_name)
        if conditions:
            stmt = stmt.where(*conditions)

        requested = list(relations or [])
        for name in requested:
            if name not in _RELATIONS:
                raise ValueError(f"Unknown actor relation: {name}")
            stmt = stmt.options(selectinload(_RELATIONS[name]))

        try:
            result = await self._session.execute(stmt.limit(1))
        except SQLAlchemyError as e:
            raise StorageError("get", "Actor", str(e)) from e
        model = result.scalars().first()
        if model is None:
            return None
        return self.to_entity(model, with_films="films" in requested)

    async def get_list(self) -> list[Actor] | None:
        stmt = select(ActorModel).order_by(ActorModel.actor_id)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError:
            logger.exception("Fetching the actor list failed")
            return None
        return [self.to_entity(row) for row in result.scalars().all()]

    async def get_max_id(self) -> int:
        try:
            max_id = await self._session.scalar(select(func.max(ActorModel.actor_id)))
        except SQLAlchemyError as e:
            raise StorageError("get_max_id", "Actor", str(e)) from e
        return max_id or 0

    async def update(
        self,
        actor: Actor,
        first_name: str | None,
        last_name: str | None,
        last_update: datetime,
    ) -> bool:
        """Apply only the provided fields; returns False when there is nothing to change."""
        data: dict[str, object] = {}
        if first_name is not None:
            data["first_name"] = first_name
        if last_name is not None:
            data["last_name"] = last_name
        if not data:
            return False

        stmt = (
            update(ActorModel)
            .where(ActorModel.actor_id == actor.id)
            .values(**data, last_update=last_update)
        )
        try:
            await self._session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("Update of actor %s failed: %s", actor.id, e)
            raise StorageError("update", "Actor", str(e)) from e
        return True

    async def delete(self, actor: Actor) -> bool:
        stmt = delete(ActorModel).where(ActorModel.actor_id == actor.id)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("Delete of actor %s failed: %s", actor.id, e)
            raise StorageError("delete", "Actor", str(e)) from e
        return result.rowcount > 0
