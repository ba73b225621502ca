"""Form endpoints driven by the rendering layer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import PlainTextResponse

from macro_tracker.api.models import (
    FormStateResponse,
    MacroSplitUpdate,
    ProfileUpdate,
    SelectionUpdate,
)
from macro_tracker.domain.errors import FoodLogIndexError, UnknownFoodError
from macro_tracker.services.form import MacroForm  # noqa: TC001

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer
    from macro_tracker.domain.forms import FormState

router = APIRouter(prefix="/forms", tags=["forms"])

_logger = logging.getLogger(__name__)

_UNPROCESSABLE = 422


def get_form(form_id: UUID, request: Request) -> MacroForm:
    """Resolve a mounted form or respond with 404."""
    container: AppContainer = request.app.state.container
    form = container.form_session_service.get(form_id)
    if form is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Form not found"
        )
    return form


@router.post("", status_code=status.HTTP_201_CREATED)
async def mount_form(request: Request) -> FormStateResponse:
    """Create a form with default values."""
    container: AppContainer = request.app.state.container
    form = container.form_session_service.mount()
    return FormStateResponse.from_state(form.snapshot())


@router.get("/{form_id}")
async def read_form(form: MacroForm = Depends(get_form)) -> FormStateResponse:
    """Return the form state with derived totals and targets."""
    return FormStateResponse.from_state(form.snapshot())


@router.delete("/{form_id}", status_code=status.HTTP_204_NO_CONTENT)
async def unmount_form(form_id: UUID, request: Request) -> Response:
    """Discard a form."""
    container: AppContainer = request.app.state.container
    if not container.form_session_service.unmount(form_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Form not found"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{form_id}/profile")
async def update_profile(
    update: ProfileUpdate, form: MacroForm = Depends(get_form)
) -> FormStateResponse:
    """Apply edits to weight, height, age or activity."""
    try:
        form.update_profile(update.model_dump(exclude_none=True))
    except ValueError as exc:
        _logger.warning("Rejected profile edit: form=%s error=%s", form.id, exc)
        raise HTTPException(
            status_code=_UNPROCESSABLE, detail=str(exc)
        ) from exc
    return FormStateResponse.from_state(form.snapshot())


@router.patch("/{form_id}/macro-split")
async def update_macro_split(
    update: MacroSplitUpdate, form: MacroForm = Depends(get_form)
) -> FormStateResponse:
    """Apply edits to the macro percentages."""
    for name, value in update.model_dump(exclude_none=True).items():
        form.set_macro_field(name, value)
    return FormStateResponse.from_state(form.snapshot())


@router.post("/{form_id}/calculate")
async def calculate_calories(
    form: MacroForm = Depends(get_form),
) -> FormStateResponse:
    """Compute the calorie target; unparsable biometrics change nothing."""
    form.calculate()
    return FormStateResponse.from_state(form.snapshot())


@router.put("/{form_id}/selection")
async def select_food(
    selection: SelectionUpdate, form: MacroForm = Depends(get_form)
) -> FormStateResponse:
    """Set the food picker selection."""
    try:
        form.select_food(selection.food)
    except UnknownFoodError as exc:
        raise HTTPException(
            status_code=_UNPROCESSABLE, detail=str(exc)
        ) from exc
    return FormStateResponse.from_state(form.snapshot())


@router.post("/{form_id}/foods")
async def add_food(form: MacroForm = Depends(get_form)) -> FormStateResponse:
    """Log the selected food; no selection is a no-op."""
    try:
        form.add_selected_food()
    except UnknownFoodError as exc:
        raise HTTPException(
            status_code=_UNPROCESSABLE, detail=str(exc)
        ) from exc
    return FormStateResponse.from_state(form.snapshot())


@router.delete("/{form_id}/foods/{index}")
async def remove_food(
    index: int, form: MacroForm = Depends(get_form)
) -> FormStateResponse:
    """Remove a logged food by position."""
    try:
        form.remove_food(index)
    except FoodLogIndexError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    return FormStateResponse.from_state(form.snapshot())


@router.get("/{form_id}/summary", response_class=PlainTextResponse)
async def form_summary(form: MacroForm = Depends(get_form)) -> PlainTextResponse:
    """Render the form as plain text."""
    return PlainTextResponse(format_form_summary(form.snapshot()))


def format_form_summary(state: FormState) -> str:
    """Render calories, the food log, totals and targets as text."""
    lines = ["Macro Tracker"]
    if state.calories:
        lines.append(f"Target Calories: {state.calories}")
    if state.food_log:
        lines.append("")
        lines.append("Food")
        lines.extend(
            f"- {entry.name} ({_format_number(entry.calories)} kcal)"
            for entry in state.food_log
        )
    totals = state.totals
    lines.extend(
        [
            "",
            "Totals",
            f"Calories: {_format_number(totals.calories)}",
            f"Protein: {_format_number(totals.protein_g)}g",
            f"Carbs: {_format_number(totals.carbs_g)}g",
            f"Fat: {_format_number(totals.fat_g)}g",
        ]
    )
    if state.targets:
        lines.extend(
            [
                "",
                "Macro Targets",
                f"Protein: {state.targets.protein_g}g",
                f"Carbs: {state.targets.carbs_g}g",
                f"Fat: {state.targets.fat_g}g",
            ]
        )
    return "\n".join(lines)


def _format_number(value: float) -> str:
    return f"{round(value, 2):.10g}"
