"""Snapshot models for a mounted form."""

from dataclasses import dataclass
from uuid import UUID

from macro_tracker.domain.nutrition import FoodLogEntry, MacroTargets, MacroTotals
from macro_tracker.domain.profile import MacroSplit, UserProfile


@dataclass(frozen=True)
class FormState:
    """Everything the rendering layer needs to draw a form."""

    form_id: UUID
    profile: UserProfile
    macro_split: MacroSplit
    selected_food: str
    food_log: list[FoodLogEntry]
    calories: int | None
    totals: MacroTotals
    targets: MacroTargets | None
