"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FoodItem:
    """Macronutrient profile for one serving of a reference food."""

    protein_g: float
    carbs_g: float
    fat_g: float
    calories: float


@dataclass(frozen=True)
class MacroTotals:
    """Accumulated macros for a food log."""

    protein_g: float = 0
    carbs_g: float = 0
    fat_g: float = 0
    calories: float = 0


@dataclass(frozen=True)
class MacroTargets:
    """Daily gram targets derived from a calorie target and a macro split."""

    protein_g: int
    carbs_g: int
    fat_g: int


@dataclass(frozen=True)
class FoodLogEntry:
    """A logged food at a position in the log."""

    index: int
    name: str
    calories: float
