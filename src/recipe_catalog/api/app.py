"""FastAPI application factory."""

import asyncio
import contextlib
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from recipe_catalog.api.recipes import router as recipes_router
from recipe_catalog.app_logging import configure_logging
from recipe_catalog.containers import AppContainer
from recipe_catalog.domain.errors import (
    InvalidInputError,
    RecipeCatalogError,
    RecipeConflictError,
    RecipeNotFoundError,
    RecipeStoreError,
    UnauthorizedError,
)

_ERROR_STATUS: dict[type[RecipeCatalogError], int] = {
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    RecipeConflictError: status.HTTP_400_BAD_REQUEST,
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    RecipeNotFoundError: status.HTTP_404_NOT_FOUND,
    RecipeStoreError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level, container.settings.log_format)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state_container: AppContainer = app.state.container
        service = state_container.catalog_service
        logger.info("Loading recipes from the store")
        await service.reload()
        if state_container.settings.resave_on_startup:
            try:
                await service.resave_all()
            except RecipeStoreError:
                logger.exception("Failed to re-save recipes on startup")
        reload_task = asyncio.create_task(
            service.run_periodic_reload(
                state_container.settings.reload_interval_seconds
            )
        )
        yield
        reload_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await reload_task
        await state_container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(RecipeCatalogError)
    async def handle_catalog_error(
        request: Request, exc: RecipeCatalogError
    ) -> PlainTextResponse:
        status_code = _ERROR_STATUS.get(
            type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        return PlainTextResponse(str(exc), status_code=status_code)

    app.include_router(recipes_router)

    @app.get("/health")
    async def health(request: Request) -> dict[str, str]:
        """Simple health check endpoint with the cache state."""
        state_container: AppContainer = request.app.state.container
        return {
            "status": "ok",
            "cache": state_container.catalog_service.state.value,
        }

    return app
