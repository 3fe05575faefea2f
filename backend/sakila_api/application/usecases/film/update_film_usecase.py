"""Use case: partially update a film."""

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from sakila_api.application.interfaces import FilmRepository
from sakila_api.domain.entities import Film


class UpdateFilmUseCase:
    def __init__(self, repository: FilmRepository):
        self._repository = repository

    async def execute(self, film: Film, changes: Mapping[str, Any]) -> bool:
        """Only keys present in ``changes`` are written.

        None leaves a column untouched, except on the nullable columns
        (description, release_year, length) where it clears the value.
        """
        now = datetime.now(timezone.utc)
        return await self._repository.update(film, changes, now)
