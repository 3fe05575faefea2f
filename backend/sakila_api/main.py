"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sakila_api.config import get_settings
from sakila_api.domain.exceptions import StorageError
from sakila_api.infrastructure.database import Base, engine
from sakila_api.infrastructure.logging.log_config import setup_logging
from sakila_api.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


async def _create_tables() -> None:
    """Create the actor, film and film_actor tables when they are missing."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: configure logging, optionally create tables."""
    settings = get_settings()
    setup_logging()

    if settings.create_tables_on_startup:
        await _create_tables()

    yield

    await engine.dispose()


_ACTIONS = {"GET": "read", "POST": "create", "PUT": "update", "DELETE": "delete"}


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    """Turn an unhandled storage failure into a 500 with a message body.

    The body names the entity served by the route (its first tag) and the
    action implied by the HTTP method; which datasource call failed is only
    logged.
    """
    logger.error("%s %s → storage failure: %s", request.method, request.url.path, exc)
    route = request.scope.get("route")
    tags = getattr(route, "tags", None)
    entity = str(tags[0]) if tags else "Storage"
    action = _ACTIONS.get(request.method, "operation")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": f"{entity} {action} failed"},
    )


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StorageError, storage_error_handler)
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "sakila_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=(get_settings().app_env == "development"),
    )
