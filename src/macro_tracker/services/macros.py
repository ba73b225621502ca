"""Macro gram targets from a calorie target and a percentage split."""

from macro_tracker.domain.nutrition import MacroTargets
from macro_tracker.domain.profile import MacroSplit
from macro_tracker.services.numbers import parse_decimal, round_half_up

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9
SPLIT_TOTAL = 100


def calculate_targets(split: MacroSplit, calories: int | None) -> MacroTargets | None:
    """Return gram targets, or None when the split or calories are unusable.

    The three percentages must sum to exactly 100.
    """
    if calories is None:
        return None
    protein = parse_decimal(split.protein)
    carbs = parse_decimal(split.carbs)
    fat = parse_decimal(split.fat)
    if protein is None or carbs is None or fat is None:
        return None
    if protein + carbs + fat != SPLIT_TOTAL:
        return None
    return MacroTargets(
        protein_g=round_half_up(calories * (protein / 100) / PROTEIN_KCAL_PER_G),
        carbs_g=round_half_up(calories * (carbs / 100) / CARBS_KCAL_PER_G),
        fat_g=round_half_up(calories * (fat / 100) / FAT_KCAL_PER_G),
    )
