"""Ordered log of foods eaten and their running totals."""

from dataclasses import dataclass, field

from macro_tracker.domain.errors import FoodLogIndexError, UnknownFoodError
from macro_tracker.domain.nutrition import FoodLogEntry, MacroTotals
from macro_tracker.services.food_table import FoodTable


@dataclass
class FoodLog:
    """Food names in the order they were added, repeats allowed."""

    food_table: FoodTable
    names: list[str] = field(default_factory=list)

    def add(self, name: str) -> bool:
        """Append a food name; empty names are ignored.

        Returns True when the log changed. Names missing from the table raise
        UnknownFoodError and leave the log untouched.
        """
        if not name:
            return False
        if name not in self.food_table:
            raise UnknownFoodError(name)
        self.names.append(name)
        return True

    def remove(self, index: int) -> str:
        """Remove and return the entry at index."""
        if not 0 <= index < len(self.names):
            raise FoodLogIndexError(index, len(self.names))
        return self.names.pop(index)

    def entries(self) -> list[FoodLogEntry]:
        """Return the log with per-entry calories."""
        return [
            FoodLogEntry(
                index=index, name=name, calories=self.food_table.get(name).calories
            )
            for index, name in enumerate(self.names)
        ]

    def totals(self) -> MacroTotals:
        """Sum macros across every logged entry."""
        return _sum_totals(self.food_table, self.names)

    def __len__(self) -> int:
        return len(self.names)


def _sum_totals(food_table: FoodTable, names: list[str]) -> MacroTotals:
    total = MacroTotals()
    for name in names:
        food = food_table.get(name)
        total = MacroTotals(
            protein_g=total.protein_g + food.protein_g,
            carbs_g=total.carbs_g + food.carbs_g,
            fat_g=total.fat_g + food.fat_g,
            calories=total.calories + food.calories,
        )
    return total
