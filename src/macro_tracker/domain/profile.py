"""Domain models for the user's form inputs."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ActivityLevel:
    """Selectable activity multiplier."""

    label: str
    factor: str


ACTIVITY_LEVELS: tuple[ActivityLevel, ...] = (
    ActivityLevel(label="Sedentary", factor="1.2"),
    ActivityLevel(label="Lightly Active", factor="1.375"),
    ActivityLevel(label="Moderately Active", factor="1.55"),
    ActivityLevel(label="Very Active", factor="1.725"),
)

DEFAULT_ACTIVITY = ACTIVITY_LEVELS[0].factor


@dataclass
class UserProfile:
    """Biometrics as typed into the form.

    Values are kept as raw strings; they are only parsed when the calorie
    target is calculated.
    """

    weight: str = ""
    height: str = ""
    age: str = ""
    activity: str = DEFAULT_ACTIVITY


@dataclass
class MacroSplit:
    """Protein/carbs/fat percentages as typed into the form."""

    protein: str = "30"
    carbs: str = "40"
    fat: str = "30"


def is_activity_factor(value: str) -> bool:
    """Return True when value is one of the selectable activity factors."""
    return any(level.factor == value for level in ACTIVITY_LEVELS)
