from .actor import Actor
from .film import Film, FilmActor, FilmRating, SpecialFeature

__all__ = [
    "Actor",
    "Film",
    "FilmActor",
    "FilmRating",
    "SpecialFeature",
]
