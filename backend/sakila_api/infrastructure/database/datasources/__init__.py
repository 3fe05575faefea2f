from .film_datasource import FilmDataSource
from .film_actor_datasource import FilmActorDataSource
from .actor_datasource import ActorDataSource

__all__ = [
    "ActorDataSource",
    "FilmDataSource",
    "FilmActorDataSource",
]
