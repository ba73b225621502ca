"""Mount and unmount lifecycle for tracker forms."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from macro_tracker.services.food_table import FoodTable
from macro_tracker.services.form import MacroForm

_logger = logging.getLogger(__name__)


class FormRepository(Protocol):
    """Storage interface for mounted forms."""

    def save(self, form: MacroForm) -> None:
        """Store a form under its id."""

    def get(self, form_id: UUID) -> MacroForm | None:
        """Return a form by id, if mounted."""

    def delete(self, form_id: UUID) -> bool:
        """Drop a form and return True when it existed."""


@dataclass
class FormSessionService:
    """Application service creating and discarding forms."""

    repository: FormRepository
    food_table: FoodTable

    def mount(self) -> MacroForm:
        """Create a form with default values."""
        form = MacroForm(food_table=self.food_table)
        self.repository.save(form)
        _logger.info("Form mounted: form=%s", form.id)
        return form

    def get(self, form_id: UUID) -> MacroForm | None:
        """Return a mounted form."""
        return self.repository.get(form_id)

    def unmount(self, form_id: UUID) -> bool:
        """Discard a form; unknown ids are ignored."""
        removed = self.repository.delete(form_id)
        if removed:
            _logger.info("Form unmounted: form=%s", form_id)
        return removed
