from .get_actor_usecase import GetActorUseCase
from .get_actor_list_usecase import GetActorListUseCase
from .create_actor_usecase import CreateActorUseCase
from .update_actor_usecase import UpdateActorUseCase
from .delete_actor_usecase import DeleteActorUseCase

__all__ = [
    "GetActorUseCase",
    "GetActorListUseCase",
    "CreateActorUseCase",
    "UpdateActorUseCase",
    "DeleteActorUseCase",
]
