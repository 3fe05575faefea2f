"""Film-actor datasource: the 'film_actor' join table."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sakila_api.domain.entities import FilmActor
from sakila_api.domain.exceptions import StorageError
from sakila_api.infrastructure.database.datasources.mapping import ensure_utc
from sakila_api.infrastructure.database.models import FilmActorModel

logger = logging.getLogger(__name__)


class FilmActorDataSource:
    """Reads and removes actor/film associations."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def to_entity(model: FilmActorModel) -> FilmActor:
        return FilmActor(
            actor_id=model.actor_id,
            film_id=model.film_id,
            last_update=ensure_utc(model.last_update),
        )

    async def get_by_actor_id(self, actor_id: int) -> list[FilmActor]:
        stmt = (
            select(FilmActorModel)
            .where(FilmActorModel.actor_id == actor_id)
            .order_by(FilmActorModel.film_id)
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError("get_by_actor_id", "FilmActor", str(e)) from e
        return [self.to_entity(row) for row in result.scalars().all()]

    async def delete_by_actor_id(self, actor_id: int) -> int:
        """Remove every association of the actor; returns the number of rows removed."""
        return await self._delete(FilmActorModel.actor_id == actor_id, "delete_by_actor_id")

    async def delete_by_film_id(self, film_id: int) -> int:
        """Remove every association of the film; returns the number of rows removed."""
        return await self._delete(FilmActorModel.film_id == film_id, "delete_by_film_id")

    async def _delete(self, condition, operation: str) -> int:
        try:
            result = await self._session.execute(delete(FilmActorModel).where(condition))
        except SQLAlchemyError as e:
            logger.error("film_actor %s failed: %s", operation, e)
            raise StorageError(operation, "FilmActor", str(e)) from e
        logger.debug("film_actor %s removed %d row(s)", operation, result.rowcount)
        return result.rowcount
