from .actor_repository import ActorRepository
from .film_repository import FilmRepository
from .film_actor_repository import FilmActorRepository

__all__ = [
    "ActorRepository",
    "FilmRepository",
    "FilmActorRepository",
]
