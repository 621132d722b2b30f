"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator, Awaitable
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status

from fatsecret_nutrition.api.models import (
    AutocompleteRequest,
    FoodDetailsRequest,
    SearchNutritionRequest,
)
from fatsecret_nutrition.app_logging import configure_logging
from fatsecret_nutrition.containers import AppContainer
from fatsecret_nutrition.domain.errors import InternalError, InvalidArgumentError

_logger = logging.getLogger(__name__)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/fatsecret/search")
    async def search_nutrition(
        body: SearchNutritionRequest, request: Request
    ) -> dict[str, object]:
        """Search nutrition data by food name."""
        operations = request.app.state.container.operations
        return await _run(operations.search_nutrition(body.food_name))

    @app.post("/fatsecret/food")
    async def food_details(
        body: FoodDetailsRequest, request: Request
    ) -> dict[str, object]:
        """Return details for a FatSecret food id."""
        operations = request.app.state.container.operations
        return await _run(operations.get_food_details(body.food_id))

    @app.post("/fatsecret/autocomplete")
    async def autocomplete(
        body: AutocompleteRequest, request: Request
    ) -> dict[str, object]:
        """Return autocomplete suggestions for a partial query."""
        operations = request.app.state.container.operations
        return await _run(
            operations.autocomplete(body.query, body.max_results, body.region)
        )

    return app


async def _run(operation: Awaitable[dict[str, object]]) -> dict[str, object]:
    """Await an operation and translate its errors to HTTP errors."""
    try:
        return await operation
    except InvalidArgumentError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail={"message": str(exc)}
        ) from exc
    except InternalError as exc:
        _logger.warning("Operation failed: %s (%s)", exc.message, exc.details)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": exc.message, "details": exc.details},
        ) from exc
