from .actor import ActorCreate, ActorUpdate, ActorResponse
from .film import FilmCreate, FilmUpdate, FilmResponse, FilmActorResponse
from .common import MessageResponse

__all__ = [
    "ActorCreate",
    "ActorUpdate",
    "ActorResponse",
    "FilmCreate",
    "FilmUpdate",
    "FilmResponse",
    "FilmActorResponse",
    "MessageResponse",
]
