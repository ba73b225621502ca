"""Shared test fixtures."""

import pytest

from macro_tracker.adapters.in_memory_form_repository import InMemoryFormRepository
from macro_tracker.config import Settings
from macro_tracker.containers import AppContainer
from macro_tracker.services.food_table import StaticFoodTable
from macro_tracker.services.form import MacroForm
from macro_tracker.services.sessions import FormSessionService

EGG = "Egg (1 large)"
CHICKEN = "Chicken Breast (100g)"
RICE = "Brown Rice (100g)"


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", log_level="DEBUG")


@pytest.fixture
def food_table() -> StaticFoodTable:
    return StaticFoodTable()


@pytest.fixture
def form_repository() -> InMemoryFormRepository:
    return InMemoryFormRepository()


@pytest.fixture
def form(food_table: StaticFoodTable) -> MacroForm:
    return MacroForm(food_table=food_table)


@pytest.fixture
def container(
    settings: Settings,
    food_table: StaticFoodTable,
    form_repository: InMemoryFormRepository,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        food_table=food_table,
        form_session_service=FormSessionService(
            repository=form_repository,
            food_table=food_table,
        ),
    )
