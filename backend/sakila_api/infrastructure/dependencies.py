"""FastAPI dependency injection: wires infrastructure to application layer.

Each request gets one AsyncSession; every repository (and therefore every
use case) resolved for that request shares it, so a controller that calls
several use cases runs them in a single transaction.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sakila_api.application.interfaces import (
    ActorRepository,
    FilmActorRepository,
    FilmRepository,
)
from sakila_api.application.usecases.actor import (
    CreateActorUseCase,
    DeleteActorUseCase,
    GetActorListUseCase,
    GetActorUseCase,
    UpdateActorUseCase,
)
from sakila_api.application.usecases.film import (
    CreateFilmUseCase,
    DeleteFilmUseCase,
    GetFilmListUseCase,
    GetFilmUseCase,
    UpdateFilmUseCase,
)
from sakila_api.application.usecases.film_actor import (
    DeleteFilmActorByActorIdUseCase,
    DeleteFilmActorByFilmIdUseCase,
    GetFilmActorByActorIdUseCase,
)
from sakila_api.infrastructure.database.datasources import (
    ActorDataSource,
    FilmActorDataSource,
    FilmDataSource,
)
from sakila_api.infrastructure.database.repositories import (
    SQLAlchemyActorRepository,
    SQLAlchemyFilmActorRepository,
    SQLAlchemyFilmRepository,
)
from sakila_api.infrastructure.database.session import get_db_session


# ── Repositories ─────────────────────────────────────────────────────


def get_actor_repository(
    session: AsyncSession = Depends(get_db_session),
) -> ActorRepository:
    return SQLAlchemyActorRepository(ActorDataSource(session))


def get_film_repository(
    session: AsyncSession = Depends(get_db_session),
) -> FilmRepository:
    return SQLAlchemyFilmRepository(FilmDataSource(session))


def get_film_actor_repository(
    session: AsyncSession = Depends(get_db_session),
) -> FilmActorRepository:
    return SQLAlchemyFilmActorRepository(FilmActorDataSource(session))


# ── Actor use cases ──────────────────────────────────────────────────


def get_get_actor_usecase(
    repository: ActorRepository = Depends(get_actor_repository),
) -> GetActorUseCase:
    return GetActorUseCase(repository)


def get_get_actor_list_usecase(
    repository: ActorRepository = Depends(get_actor_repository),
) -> GetActorListUseCase:
    return GetActorListUseCase(repository)


def get_create_actor_usecase(
    repository: ActorRepository = Depends(get_actor_repository),
) -> CreateActorUseCase:
    return CreateActorUseCase(repository)


def get_update_actor_usecase(
    repository: ActorRepository = Depends(get_actor_repository),
) -> UpdateActorUseCase:
    return UpdateActorUseCase(repository)


def get_delete_actor_usecase(
    repository: ActorRepository = Depends(get_actor_repository),
) -> DeleteActorUseCase:
    return DeleteActorUseCase(repository)


# ── Film use cases ───────────────────────────────────────────────────


def get_get_film_usecase(
    repository: FilmRepository = Depends(get_film_repository),
) -> GetFilmUseCase:
    return GetFilmUseCase(repository)


def get_get_film_list_usecase(
    repository: FilmRepository = Depends(get_film_repository),
) -> GetFilmListUseCase:
    return GetFilmListUseCase(repository)


def get_create_film_usecase(
    repository: FilmRepository = Depends(get_film_repository),
) -> CreateFilmUseCase:
    return CreateFilmUseCase(repository)


def get_update_film_usecase(
    repository: FilmRepository = Depends(get_film_repository),
) -> UpdateFilmUseCase:
    return UpdateFilmUseCase(repository)


def get_delete_film_usecase(
    repository: FilmRepository = Depends(get_film_repository),
) -> DeleteFilmUseCase:
    return DeleteFilmUseCase(repository)


# ── Film-actor use cases ─────────────────────────────────────────────


def get_get_film_actor_by_actor_id_usecase(
    repository: FilmActorRepository = Depends(get_film_actor_repository),
) -> GetFilmActorByActorIdUseCase:
    return GetFilmActorByActorIdUseCase(repository)


def get_delete_film_actor_by_actor_id_usecase(
    repository: FilmActorRepository = Depends(get_film_actor_repository),
) -> DeleteFilmActorByActorIdUseCase:
    return DeleteFilmActorByActorIdUseCase(repository)


def get_delete_film_actor_by_film_id_usecase(
    repository: FilmActorRepository = Depends(get_film_actor_repository),
) -> DeleteFilmActorByFilmIdUseCase:
    return DeleteFilmActorByFilmIdUseCase(repository)
