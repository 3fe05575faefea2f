"""Abstract repository interface (port) for the film/actor association."""

from abc import ABC, abstractmethod

from sakila_api.domain.entities import FilmActor


class FilmActorRepository(ABC):
    """Port for film-actor persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_actor_id(self, actor_id: int) -> list[FilmActor]:
        """All film associations of one actor."""
        ...

    @abstractmethod
    async def delete_by_actor_id(self, actor_id: int) -> int:
        """Remove all associations of an actor. Returns the number removed."""
        ...

    @abstractmethod
    async def delete_by_film_id(self, film_id: int) -> int:
        """Remove all associations of a film. Returns the number removed."""
        ...
