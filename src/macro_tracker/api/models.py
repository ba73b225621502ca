"""Pydantic models for the form API."""

from uuid import UUID

from pydantic import BaseModel

from macro_tracker.domain.forms import FormState


class ProfileUpdate(BaseModel):
    """Partial edit of the user's biometrics."""

    weight: str | None = None
    height: str | None = None
    age: str | None = None
    activity: str | None = None


class MacroSplitUpdate(BaseModel):
    """Partial edit of the macro percentage split."""

    protein: str | None = None
    carbs: str | None = None
    fat: str | None = None


class SelectionUpdate(BaseModel):
    """Food picker selection; an empty string clears it."""

    food: str = ""


class FoodItemResponse(BaseModel):
    name: str
    protein_g: float
    carbs_g: float
    fat_g: float
    calories: float


class ActivityLevelResponse(BaseModel):
    label: str
    factor: str


class ProfileResponse(BaseModel):
    weight: str
    height: str
    age: str
    activity: str


class MacroSplitResponse(BaseModel):
    protein: str
    carbs: str
    fat: str


class FoodLogEntryResponse(BaseModel):
    index: int
    name: str
    calories: float


class TotalsResponse(BaseModel):
    protein_g: float
    carbs_g: float
    fat_g: float
    calories: float


class TargetsResponse(BaseModel):
    protein_g: int
    carbs_g: int
    fat_g: int


class FormStateResponse(BaseModel):
    """Full form state with derived totals and targets."""

    id: UUID
    profile: ProfileResponse
    macro_split: MacroSplitResponse
    selected_food: str
    food_log: list[FoodLogEntryResponse]
    calories: int | None
    totals: TotalsResponse
    targets: TargetsResponse | None

    @classmethod
    def from_state(cls, state: FormState) -> "FormStateResponse":
        """Build a response from a form snapshot."""
        targets = state.targets
        return cls(
            id=state.form_id,
            profile=ProfileResponse(
                weight=state.profile.weight,
                height=state.profile.height,
                age=state.profile.age,
                activity=state.profile.activity,
            ),
            macro_split=MacroSplitResponse(
                protein=state.macro_split.protein,
                carbs=state.macro_split.carbs,
                fat=state.macro_split.fat,
            ),
            selected_food=state.selected_food,
            food_log=[
                FoodLogEntryResponse(
                    index=entry.index, name=entry.name, calories=entry.calories
                )
                for entry in state.food_log
            ],
            calories=state.calories,
            totals=TotalsResponse(
                protein_g=state.totals.protein_g,
                carbs_g=state.totals.carbs_g,
                fat_g=state.totals.fat_g,
                calories=state.totals.calories,
            ),
            targets=(
                TargetsResponse(
                    protein_g=targets.protein_g,
                    carbs_g=targets.carbs_g,
                    fat_g=targets.fat_g,
                )
                if targets
                else None
            ),
        )
