"""Dependency container wiring for the application."""

from dataclasses import dataclass

from macro_tracker.adapters.in_memory_form_repository import InMemoryFormRepository
from macro_tracker.adapters.json_food_table import load_food_table
from macro_tracker.config import Settings
from macro_tracker.services.food_table import FoodTable, StaticFoodTable
from macro_tracker.services.sessions import FormSessionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_table: FoodTable
    form_session_service: FormSessionService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    if resolved_settings.food_table_path:
        food_table: FoodTable = load_food_table(resolved_settings.food_table_path)
    else:
        food_table = StaticFoodTable()
    form_session_service = FormSessionService(
        repository=InMemoryFormRepository(),
        food_table=food_table,
    )
    return AppContainer(
        settings=resolved_settings,
        food_table=food_table,
        form_session_service=form_session_service,
    )
