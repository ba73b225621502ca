"""In-memory storage for mounted forms."""

from dataclasses import dataclass, field
from uuid import UUID

from macro_tracker.services.form import MacroForm
from macro_tracker.services.sessions import FormRepository


@dataclass
class InMemoryFormRepository(FormRepository):
    """Keeps forms for the lifetime of the process."""

    forms: dict[UUID, MacroForm] = field(default_factory=dict)

    def save(self, form: MacroForm) -> None:
        """Store a form under its id."""
        self.forms[form.id] = form

    def get(self, form_id: UUID) -> MacroForm | None:
        """Return a form by id, if mounted."""
        return self.forms.get(form_id)

    def delete(self, form_id: UUID) -> bool:
        """Drop a form and return True when it existed."""
        return self.forms.pop(form_id, None) is not None
