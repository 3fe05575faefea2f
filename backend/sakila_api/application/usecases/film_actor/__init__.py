from .get_film_actor_by_actor_id_usecase import GetFilmActorByActorIdUseCase
from .delete_film_actor_usecases import (
    DeleteFilmActorByActorIdUseCase,
    DeleteFilmActorByFilmIdUseCase,
)

__all__ = [
    "GetFilmActorByActorIdUseCase",
    "DeleteFilmActorByActorIdUseCase",
    "DeleteFilmActorByFilmIdUseCase",
]
