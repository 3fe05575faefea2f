"""Use case: add a film to the catalogue."""

import logging
from datetime import datetime, timezone
from typing import Any

from sakila_api.application.interfaces import FilmRepository
from sakila_api.domain.entities import Film

logger = logging.getLogger(__name__)


class CreateFilmUseCase:
    """Creates a film with identifier ``max(existing) + 1``.

    Same allocation scheme as actors: not safe against concurrent creates,
    a colliding insert fails with a StorageError.
    """

    def __init__(self, repository: FilmRepository):
        self._repository = repository

    async def execute(self, title: str, language_id: int, **details: Any) -> Film:
        now = datetime.now(timezone.utc)
        max_film_id = await self._repository.get_max_id()

        film = Film(
            id=max_film_id + 1,
            title=title,
            language_id=language_id,
            last_update=now,
            **details,
        )
        await self._repository.create(film)
        logger.info("Created film %d (%s)", film.id, film.title)
        return film
