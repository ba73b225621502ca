"""Reference table of foods available to the form."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol

from macro_tracker.domain.errors import UnknownFoodError
from macro_tracker.domain.nutrition import FoodItem

DEFAULT_FOODS: Mapping[str, FoodItem] = MappingProxyType(
    {
        "Chicken Breast (100g)": FoodItem(
            protein_g=31, carbs_g=0, fat_g=3.6, calories=165
        ),
        "Brown Rice (100g)": FoodItem(
            protein_g=2.6, carbs_g=23, fat_g=0.9, calories=111
        ),
        "Broccoli (100g)": FoodItem(protein_g=2.8, carbs_g=7, fat_g=0.4, calories=34),
        "Avocado (100g)": FoodItem(protein_g=2, carbs_g=9, fat_g=15, calories=160),
        "Egg (1 large)": FoodItem(protein_g=6, carbs_g=0.6, fat_g=5, calories=78),
    }
)


class FoodTable(Protocol):
    """Lookup interface for reference foods."""

    def get(self, name: str) -> FoodItem:
        """Return the food for a name or raise UnknownFoodError."""

    def names(self) -> list[str]:
        """Return food names in display order."""

    def __contains__(self, name: object) -> bool:
        """Return True when the name is in the table."""


@dataclass(frozen=True)
class StaticFoodTable(FoodTable):
    """Immutable in-memory food table."""

    foods: Mapping[str, FoodItem] = field(default_factory=lambda: DEFAULT_FOODS)

    def __post_init__(self) -> None:
        object.__setattr__(self, "foods", MappingProxyType(dict(self.foods)))

    def get(self, name: str) -> FoodItem:
        """Return the food for a name or raise UnknownFoodError."""
        try:
            return self.foods[name]
        except KeyError:
            raise UnknownFoodError(name) from None

    def names(self) -> list[str]:
        """Return food names in insertion order."""
        return list(self.foods)

    def items(self) -> list[tuple[str, FoodItem]]:
        """Return (name, food) pairs in insertion order."""
        return list(self.foods.items())

    def __contains__(self, name: object) -> bool:
        return name in self.foods
