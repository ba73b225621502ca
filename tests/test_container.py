"""Tests for container wiring."""

import json

from macro_tracker.config import Settings
from macro_tracker.containers import build_container


def test_build_container_uses_default_food_table(settings) -> None:
    container = build_container(settings)

    assert container.form_session_service is not None
    assert "Egg (1 large)" in container.food_table.names()


def test_build_container_loads_food_table_file(tmp_path) -> None:
    path = tmp_path / "foods.json"
    path.write_text(
        json.dumps(
            {"Tofu (100g)": {"protein": 8, "carbs": 2, "fat": 4.8, "calories": 76}}
        ),
        encoding="utf-8",
    )

    container = build_container(Settings(food_table_path=str(path)))

    assert container.food_table.names() == ["Tofu (100g)"]
    form = container.form_session_service.mount()
    assert form.food_table is container.food_table
