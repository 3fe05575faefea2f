"""Abstract repository interface (port) for Film persistence."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from sakila_api.domain.entities import Film


class FilmRepository(ABC):
    """Port for film persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def create(self, film: Film) -> None:
        ...

    @abstractmethod
    async def get(self, film_id: int | None = None, title: str | None = None) -> Film | None:
        """Retrieve the first film matching every provided field."""
        ...

    @abstractmethod
    async def get_list(self) -> list[Film] | None:
        ...

    @abstractmethod
    async def get_max_id(self) -> int:
        ...

    @abstractmethod
    async def update(self, film: Film, changes: Mapping[str, Any], last_update: datetime) -> bool:
        """Apply the provided fields only. Returns True if anything changed."""
        ...

    @abstractmethod
    async def delete(self, film: Film) -> bool:
        ...
