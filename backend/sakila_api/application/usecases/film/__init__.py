from .get_film_usecase import GetFilmUseCase
from .get_film_list_usecase import GetFilmListUseCase
from .create_film_usecase import CreateFilmUseCase
from .update_film_usecase import UpdateFilmUseCase
from .delete_film_usecase import DeleteFilmUseCase

__all__ = [
    "GetFilmUseCase",
    "GetFilmListUseCase",
    "CreateFilmUseCase",
    "UpdateFilmUseCase",
    "DeleteFilmUseCase",
]
