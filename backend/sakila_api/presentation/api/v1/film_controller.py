"""Film API controller: CRUD endpoints under /api/film/v1/me."""

from typing import Any

from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import JSONResponse

from sakila_api.application.schemas import (
    FilmActorResponse,
    FilmCreate,
    FilmResponse,
    FilmUpdate,
    MessageResponse,
)
from sakila_api.application.usecases.film import (
    CreateFilmUseCase,
    DeleteFilmUseCase,
    GetFilmListUseCase,
    GetFilmUseCase,
    UpdateFilmUseCase,
)
from sakila_api.application.usecases.film_actor import (
    DeleteFilmActorByFilmIdUseCase,
    GetFilmActorByActorIdUseCase,
)
from sakila_api.infrastructure.dependencies import (
    get_create_film_usecase,
    get_delete_film_actor_by_film_id_usecase,
    get_delete_film_usecase,
    get_get_film_actor_by_actor_id_usecase,
    get_get_film_list_usecase,
    get_get_film_usecase,
    get_update_film_usecase,
)

router = APIRouter(prefix="/film/v1/me", tags=["Film"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse}}


def _film_not_found() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": "Film not found"},
    )


@router.get("/id/{film_id}", response_model=FilmResponse, responses=_NOT_FOUND)
async def get_film(
    film_id: int = Path(..., ge=1, description="The ID of the film"),
    usecase: GetFilmUseCase = Depends(get_get_film_usecase),
) -> dict[str, Any] | JSONResponse:
    """Get a film by its ID."""
    film = await usecase.execute(film_id)
    if film is None:
        return _film_not_found()
    return film.to_json()


@router.get(
    "/",
    response_model=list[FilmResponse],
    responses={status.HTTP_400_BAD_REQUEST: {"model": MessageResponse}},
)
async def get_film_list(
    usecase: GetFilmListUseCase = Depends(get_get_film_list_usecase),
) -> list[dict[str, Any]] | JSONResponse:
    """Get a list of all films."""
    films = await usecase.execute()
    if films is None:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Film list not found"},
        )
    return [film.to_json() for film in films]


@router.get("/actor/{actor_id}", response_model=list[FilmActorResponse])
async def get_film_actors_by_actor(
    actor_id: int = Path(..., ge=1, description="The ID of the actor"),
    usecase: GetFilmActorByActorIdUseCase = Depends(get_get_film_actor_by_actor_id_usecase),
) -> list[dict[str, Any]]:
    """List the film/actor associations of one actor."""
    links = await usecase.execute(actor_id)
    return [link.to_json() for link in links]


@router.post("/", response_model=FilmResponse, status_code=status.HTTP_201_CREATED)
async def create_film(
    data: FilmCreate,
    usecase: CreateFilmUseCase = Depends(get_create_film_usecase),
) -> dict[str, Any]:
    """Create a new film."""
    details = data.model_dump(exclude={"title", "language_id"})
    film = await usecase.execute(data.title, data.language_id, **details)
    return film.to_json()


@router.put("/id/{film_id}", response_model=bool, responses=_NOT_FOUND)
async def update_film(
    data: FilmUpdate,
    film_id: int = Path(..., ge=1, description="The ID of the film"),
    get_usecase: GetFilmUseCase = Depends(get_get_film_usecase),
    update_usecase: UpdateFilmUseCase = Depends(get_update_film_usecase),
) -> bool | JSONResponse:
    """Update the provided fields of a film."""
    film = await get_usecase.execute(film_id)
    if film is None:
        return _film_not_found()
    return await update_usecase.execute(film, data.model_dump(exclude_unset=True))


@router.delete("/id/{film_id}", response_model=bool, responses=_NOT_FOUND)
async def delete_film(
    film_id: int = Path(..., ge=1, description="The ID of the film"),
    get_usecase: GetFilmUseCase = Depends(get_get_film_usecase),
    unlink_usecase: DeleteFilmActorByFilmIdUseCase = Depends(
        get_delete_film_actor_by_film_id_usecase
    ),
    delete_usecase: DeleteFilmUseCase = Depends(get_delete_film_usecase),
) -> bool | JSONResponse:
    """Delete a film together with its actor associations."""
    film = await get_usecase.execute(film_id)
    if film is None:
        return _film_not_found()
    await unlink_usecase.execute(film.id)
    return await delete_usecase.execute(film)
