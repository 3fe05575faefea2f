from .actor_repository import SQLAlchemyActorRepository
from .film_repository import SQLAlchemyFilmRepository
from .film_actor_repository import SQLAlchemyFilmActorRepository

__all__ = [
    "SQLAlchemyActorRepository",
    "SQLAlchemyFilmRepository",
    "SQLAlchemyFilmActorRepository",
]
