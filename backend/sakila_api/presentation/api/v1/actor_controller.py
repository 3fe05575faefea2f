"""Actor API controller: CRUD endpoints under /api/actor/v1/me."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import JSONResponse

from sakila_api.application.schemas import (
    ActorCreate,
    ActorResponse,
    ActorUpdate,
    FilmResponse,
    MessageResponse,
)
from sakila_api.application.usecases.actor import (
    CreateActorUseCase,
    DeleteActorUseCase,
    GetActorListUseCase,
    GetActorUseCase,
    UpdateActorUseCase,
)
from sakila_api.application.usecases.film_actor import DeleteFilmActorByActorIdUseCase
from sakila_api.infrastructure.dependencies import (
    get_create_actor_usecase,
    get_delete_actor_usecase,
    get_delete_film_actor_by_actor_id_usecase,
    get_get_actor_list_usecase,
    get_get_actor_usecase,
    get_update_actor_usecase,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/actor/v1/me", tags=["Actor"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse}}


def _actor_not_found() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": "Actor not found"},
    )


@router.get("/id/{actor_id}", response_model=ActorResponse, responses=_NOT_FOUND)
async def get_actor(
    actor_id: int = Path(..., ge=1, description="The ID of the actor"),
    usecase: GetActorUseCase = Depends(get_get_actor_usecase),
) -> dict[str, Any] | JSONResponse:
    """Get an actor by their ID."""
    actor = await usecase.execute(actor_id)
    if actor is None:
        return _actor_not_found()
    return actor.to_json()


@router.get("/id/{actor_id}/films", response_model=list[FilmResponse], responses=_NOT_FOUND)
async def get_actor_films(
    actor_id: int = Path(..., ge=1, description="The ID of the actor"),
    usecase: GetActorUseCase = Depends(get_get_actor_usecase),
) -> list[dict[str, Any]] | JSONResponse:
    """List the films an actor appears in."""
    actor = await usecase.execute(actor_id, relations=["films"])
    if actor is None:
        return _actor_not_found()
    return [film.to_json() for film in actor.films or []]


@router.get(
    "/",
    response_model=list[ActorResponse],
    responses={status.HTTP_400_BAD_REQUEST: {"model": MessageResponse}},
)
async def get_actor_list(
    usecase: GetActorListUseCase = Depends(get_get_actor_list_usecase),
) -> list[dict[str, Any]] | JSONResponse:
    """Get a list of all actors."""
    actors = await usecase.execute()
    if actors is None:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Actor list not found"},
        )
    return [actor.to_json() for actor in actors]


@router.post("/", response_model=ActorResponse, status_code=status.HTTP_201_CREATED)
async def create_actor(
    data: ActorCreate,
    usecase: CreateActorUseCase = Depends(get_create_actor_usecase),
) -> dict[str, Any]:
    """Create a new actor."""
    actor = await usecase.execute(data.first_name, data.last_name)
    return actor.to_json()


@router.put("/id/{actor_id}", response_model=bool, responses=_NOT_FOUND)
async def update_actor(
    data: ActorUpdate,
    actor_id: int = Path(..., ge=1, description="The ID of the actor"),
    get_usecase: GetActorUseCase = Depends(get_get_actor_usecase),
    update_usecase: UpdateActorUseCase = Depends(get_update_actor_usecase),
) -> bool | JSONResponse:
    """Update an actor's first and/or last name."""
    actor = await get_usecase.execute(actor_id)
    if actor is None:
        return _actor_not_found()
    return await update_usecase.execute(actor, data.first_name, data.last_name)


@router.delete("/id/{actor_id}", response_model=bool, responses=_NOT_FOUND)
async def delete_actor(
    actor_id: int = Path(..., ge=1, description="The ID of the actor"),
    get_usecase: GetActorUseCase = Depends(get_get_actor_usecase),
    unlink_usecase: DeleteFilmActorByActorIdUseCase = Depends(
        get_delete_film_actor_by_actor_id_usecase
    ),
    delete_usecase: DeleteActorUseCase = Depends(get_delete_actor_usecase),
) -> bool | JSONResponse:
    """Delete an actor together with their film associations."""
    actor = await get_usecase.execute(actor_id)
    if actor is None:
        return _actor_not_found()
    removed_links = await unlink_usecase.execute(actor.id)
    if removed_links:
        logger.info("Unlinked actor %d from %d film(s)", actor.id, removed_links)
    return await delete_usecase.execute(actor)
