"""Abstract repository interface (port) for Actor persistence."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import datetime

from sakila_api.domain.entities import Actor


class ActorRepository(ABC):
    """Port for actor persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def create(self, actor: Actor) -> None:
        """Persist a new actor. The identifier is already set on the entity."""
        ...

    @abstractmethod
    async def get(
        self,
        actor_id: int | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        relations: Sequence[str] | None = None,
    ) -> Actor | None:
        """Retrieve the first actor matching every provided field."""
        ...

    @abstractmethod
    async def get_list(self) -> list[Actor] | None:
        """Retrieve all actors, or None when the store could not be read."""
        ...

    @abstractmethod
    async def get_max_id(self) -> int:
        """Highest actor identifier in use, 0 when there are none."""
        ...

    @abstractmethod
    async def update(
        self,
        actor: Actor,
        first_name: str | None,
        last_name: str | None,
        last_update: datetime,
    ) -> bool:
        """Apply the provided name fields. Returns True if anything changed."""
        ...

    @abstractmethod
    async def delete(self, actor: Actor) -> bool:
        """Delete an actor. Returns True if a row was removed."""
        ...
