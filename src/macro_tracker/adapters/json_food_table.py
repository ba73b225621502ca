"""Load a reference food table from a JSON file."""

import logging
from pathlib import Path

from pydantic import BaseModel, RootModel, ValidationError

from macro_tracker.domain.nutrition import FoodItem
from macro_tracker.services.food_table import StaticFoodTable

_logger = logging.getLogger(__name__)


class FoodEntryModel(BaseModel):
    """One food entry in the table file."""

    protein: float
    carbs: float
    fat: float
    calories: float


class FoodTableModel(RootModel[dict[str, FoodEntryModel]]):
    """Mapping of food name to nutrition per serving."""


def load_food_table(path: str | Path) -> StaticFoodTable:
    """Read a ``{name: {protein, carbs, fat, calories}}`` food table file."""
    try:
        raw = Path(path).read_text(encoding="utf-8")
        parsed = FoodTableModel.model_validate_json(raw)
    except (OSError, UnicodeDecodeError, ValidationError) as exc:
        raise RuntimeError(f"Invalid food table file: {path}") from exc
    if not parsed.root:
        raise RuntimeError(f"Food table file has no entries: {path}")
    foods = {
        name: FoodItem(
            protein_g=entry.protein,
            carbs_g=entry.carbs,
            fat_g=entry.fat,
            calories=entry.calories,
        )
        for name, entry in parsed.root.items()
    }
    _logger.info("Loaded food table: path=%s foods=%s", path, len(foods))
    return StaticFoodTable(foods)
