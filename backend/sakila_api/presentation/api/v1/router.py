"""V1 API router: aggregates all v1 endpoint routers.

Entity controllers carry the version inside their own prefix
(``/actor/v1/me``), so only the health endpoint is mounted under ``/v1``.
"""

from fastapi import APIRouter

from sakila_api.presentation.api.v1.endpoints.health import router as health_router
from sakila_api.presentation.api.v1.actor_controller import router as actor_router
from sakila_api.presentation.api.v1.film_controller import router as film_router

router = APIRouter()
router.include_router(health_router, prefix="/v1")
router.include_router(actor_router)
router.include_router(film_router)
