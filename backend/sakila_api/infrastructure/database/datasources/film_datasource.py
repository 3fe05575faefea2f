"""Film datasource: issues ORM statements against the 'film' table."""

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sakila_api.domain.entities import Film, FilmRating, SpecialFeature
from sakila_api.domain.exceptions import StorageError
from sakila_api.infrastructure.database.datasources.mapping import ensure_utc
from sakila_api.infrastructure.database.models import FilmModel

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({
    "title",
    "description",
    "release_year",
    "language_id",
    "rental_duration",
    "rental_rate",
    "length",
    "replacement_cost",
    "rating",
    "special_features",
})

# Columns a client may clear by sending an explicit null
NULLABLE_FIELDS = frozenset({"description", "release_year", "length"})


def _features_to_csv(features: list[SpecialFeature]) -> str | None:
    return ",".join(f.value for f in features) or None


def _csv_to_features(raw: str | None) -> list[SpecialFeature]:
    if not raw:
        return []
    return [SpecialFeature(part) for part in raw.split(",") if part]


class FilmDataSource:
    """Translates between FilmModel rows and Film domain entities."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def to_entity(model: FilmModel) -> Film:
        """Map ORM model → domain entity."""
        return Film(
            id=model.film_id,
            title=model.title,
            description=model.description,
            release_year=model.release_year,
            language_id=model.language_id,
            rental_duration=model.rental_duration,
            rental_rate=model.rental_rate,
            length=model.length,
            replacement_cost=model.replacement_cost,
            rating=FilmRating(model.rating),
            special_features=_csv_to_features(model.special_features),
            last_update=ensure_utc(model.last_update),
        )

    @staticmethod
    def to_model(entity: Film) -> FilmModel:
        """Map domain entity → ORM model (for creation)."""
        return FilmModel(
            film_id=entity.id,
            title=entity.title,
            description=entity.description,
            release_year=entity.release_year,
            language_id=entity.language_id,
            rental_duration=entity.rental_duration,
            rental_rate=entity.rental_rate,
            length=entity.length,
            replacement_cost=entity.replacement_cost,
            rating=entity.rating.value,
            special_features=_features_to_csv(entity.special_features),
            last_update=entity.last_update,
        )

    async def create(self, film: Film) -> None:
        self._session.add(self.to_model(film))
        try:
            await self._session.flush()
        except SQLAlchemyError as e:
            logger.error("Insert of film %s failed: %s", film.id, e)
            raise StorageError("create", "Film", str(e)) from e

    async def get(self, film_id: int | None = None, title: str | None = None) -> Film | None:
        """Return the first film matching every provided (non-empty) field."""
        stmt = select(FilmModel)
        if film_id:
            stmt = stmt.where(FilmModel.film_id == film_id)
        if title:
            stmt = stmt.where(FilmModel.title == title)

        try:
            result = await self._session.execute(stmt.limit(1))
        except SQLAlchemyError as e:
            raise StorageError("get", "Film", str(e)) from e
        model = result.scalars().first()
        return self.to_entity(model) if model else None

    async def get_list(self) -> list[Film] | None:
        try:
            result = await self._session.execute(select(FilmModel).order_by(FilmModel.film_id))
        except SQLAlchemyError:
            logger.exception("Fetching the film list failed")
            return None
        return [self.to_entity(row) for row in result.scalars().all()]

    async def get_max_id(self) -> int:
        try:
            max_id = await self._session.scalar(select(func.max(FilmModel.film_id)))
        except SQLAlchemyError as e:
            raise StorageError("get_max_id", "Film", str(e)) from e
        return max_id or 0

    async def update(
        self,
        film: Film,
        changes: Mapping[str, Any],
        last_update: datetime,
    ) -> bool:
        """Apply only the provided fields; returns False when there is nothing to change.

        A None value means "unspecified" except for NULLABLE_FIELDS, where it
        clears the column.
        """
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields cannot be updated on a film: {sorted(unknown)}")

        data = {
            key: value
            for key, value in changes.items()
            if value is not None or key in NULLABLE_FIELDS
        }
        if not data:
            return False
        if "rating" in data:
            data["rating"] = FilmRating(data["rating"]).value
        if "special_features" in data:
            data["special_features"] = _features_to_csv(
                [SpecialFeature(f) for f in data["special_features"]]
            )

        stmt = (
            update(FilmModel)
            .where(FilmModel.film_id == film.id)
            .values(**data, last_update=last_update)
        )
        try:
            await self._session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("Update of film %s failed: %s", film.id, e)
            raise StorageError("update", "Film", str(e)) from e
        return True

    async def delete(self, film: Film) -> bool:
        stmt = delete(FilmModel).where(FilmModel.film_id == film.id)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("Delete of film %s failed: %s", film.id, e)
            raise StorageError("delete", "Film", str(e)) from e
        return result.rowcount > 0
