"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from recipe_tracker.api.ingredients import router as ingredients_router
from recipe_tracker.api.recipes import router as recipes_router
from recipe_tracker.api.serializers import serialize_unit
from recipe_tracker.app_logging import configure_logging
from recipe_tracker.config import parse_allowed_origins
from recipe_tracker.containers import AppContainer
from recipe_tracker.domain.units import Unit
from recipe_tracker.errors import (
    IncompatibleUnitsError,
    IngredientNotAccessibleError,
    NotFoundError,
    PersistenceError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(logging.DEBUG if container.settings.debug else logging.INFO)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Recipe Tracker")
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.cors_allowed_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(ingredients_router)
    app.include_router(recipes_router)

    @app.exception_handler(NotFoundError)
    async def not_found(_request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc)}
        )

    @app.exception_handler(IngredientNotAccessibleError)
    @app.exception_handler(IncompatibleUnitsError)
    async def unprocessable(_request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"error": str(exc)},
        )

    @app.exception_handler(PersistenceError)
    async def persistence_failed(
        request: Request, exc: PersistenceError
    ) -> JSONResponse:
        logger.error("Persistence failure on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/units")
    async def units() -> dict[str, object]:
        """Return supported units with their group and base magnitude."""
        return {"units": [serialize_unit(unit) for unit in Unit]}

    return app
