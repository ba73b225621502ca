"""Form controller holding the tracker's editable state."""

import logging
from dataclasses import dataclass, field, replace
from uuid import UUID, uuid4

from macro_tracker.domain.errors import UnknownFoodError
from macro_tracker.domain.forms import FormState
from macro_tracker.domain.nutrition import MacroTargets, MacroTotals
from macro_tracker.domain.profile import (
    MacroSplit,
    UserProfile,
    is_activity_factor,
)
from macro_tracker.services.calories import calories_for_profile
from macro_tracker.services.food_log import FoodLog
from macro_tracker.services.food_table import FoodTable
from macro_tracker.services.macros import calculate_targets

_logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("weight", "height", "age", "activity")
MACRO_FIELDS = ("protein", "carbs", "fat")


@dataclass
class MacroForm:
    """State of one macro tracker screen.

    Input handlers mutate a single cell each; totals and targets are derived
    on every read.
    """

    food_table: FoodTable
    id: UUID = field(default_factory=uuid4)
    profile: UserProfile = field(default_factory=UserProfile)
    macro_split: MacroSplit = field(default_factory=MacroSplit)
    selected_food: str = ""
    calories: int | None = None
    food_log: FoodLog = field(init=False)

    def __post_init__(self) -> None:
        self.food_log = FoodLog(self.food_table)

    def set_profile_field(self, name: str, value: str) -> None:
        """Store a raw edit for weight, height, age or activity."""
        self.update_profile({name: value})

    def update_profile(self, values: dict[str, str]) -> None:
        """Store several profile edits; nothing is stored if any is rejected."""
        for name, value in values.items():
            if name not in PROFILE_FIELDS:
                raise ValueError(f"Unknown profile field: {name}")
            if name == "activity" and not is_activity_factor(value):
                raise ValueError(f"Unsupported activity factor: {value}")
        for name, value in values.items():
            setattr(self.profile, name, value)

    def set_macro_field(self, name: str, value: str) -> None:
        """Store a raw edit for the protein, carbs or fat percentage."""
        if name not in MACRO_FIELDS:
            raise ValueError(f"Unknown macro field: {name}")
        setattr(self.macro_split, name, value)

    def calculate(self) -> int | None:
        """Compute the calorie target from the profile.

        Unparsable biometrics leave the previous target in place.
        """
        calories = calories_for_profile(self.profile)
        if calories is None:
            _logger.debug("Calorie calculation skipped: form=%s", self.id)
            return self.calories
        self.calories = calories
        return calories

    def select_food(self, name: str) -> None:
        """Select a food to add next; an empty name clears the selection."""
        if name and name not in self.food_table:
            raise UnknownFoodError(name)
        self.selected_food = name

    def add_selected_food(self) -> bool:
        """Append the selected food to the log and clear the selection."""
        if not self.food_log.add(self.selected_food):
            return False
        self.selected_food = ""
        return True

    def remove_food(self, index: int) -> str:
        """Remove the log entry at index and return its name."""
        return self.food_log.remove(index)

    def totals(self) -> MacroTotals:
        """Return the macros summed over the food log."""
        return self.food_log.totals()

    def targets(self) -> MacroTargets | None:
        """Return gram targets, or None when they cannot be computed."""
        return calculate_targets(self.macro_split, self.calories)

    def snapshot(self) -> FormState:
        """Return an immutable view of the current state."""
        return FormState(
            form_id=self.id,
            profile=replace(self.profile),
            macro_split=replace(self.macro_split),
            selected_food=self.selected_food,
            food_log=self.food_log.entries(),
            calories=self.calories,
            totals=self.totals(),
            targets=self.targets(),
        )
