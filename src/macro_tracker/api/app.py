"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request

from macro_tracker.api.forms import router as forms_router
from macro_tracker.api.models import ActivityLevelResponse, FoodItemResponse
from macro_tracker.app_logging import configure_logging
from macro_tracker.containers import AppContainer
from macro_tracker.domain.profile import ACTIVITY_LEVELS


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Macro Tracker")
    app.state.container = container

    app.include_router(forms_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/foods")
    async def list_foods(request: Request) -> list[FoodItemResponse]:
        """Return the reference food table in display order."""
        state_container: AppContainer = request.app.state.container
        food_table = state_container.food_table
        foods = []
        for name in food_table.names():
            food = food_table.get(name)
            foods.append(
                FoodItemResponse(
                    name=name,
                    protein_g=food.protein_g,
                    carbs_g=food.carbs_g,
                    fat_g=food.fat_g,
                    calories=food.calories,
                )
            )
        return foods

    @app.get("/activity-levels")
    async def list_activity_levels() -> list[ActivityLevelResponse]:
        """Return the selectable activity multipliers."""
        return [
            ActivityLevelResponse(label=level.label, factor=level.factor)
            for level in ACTIVITY_LEVELS
        ]

    logger.info(
        "Macro tracker app created: environment=%s foods=%s",
        container.settings.environment,
        len(container.food_table.names()),
    )
    return app
