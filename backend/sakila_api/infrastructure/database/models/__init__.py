from .actor import ActorModel
from .film import FILM_RATINGS, FilmActorModel, FilmModel

__all__ = [
    "ActorModel",
    "FilmModel",
    "FilmActorModel",
    "FILM_RATINGS",
]
