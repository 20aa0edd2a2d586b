"""State container for the form and preview screens.

The form has two screens and one record slot. `FormFlow` makes that state
explicit: each transition returns a new flow, and illegal transitions raise
`InvalidTransitionError`. Web handlers rebuild a flow from the posted form
fields on every request, so there is no shared mutable state.
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum

from resume_form.app.api.routes.route_logic.contact_validation import (
    validate_contact_record,
)
from resume_form.app.models.contact import ContactRecord

log = logging.getLogger(__name__)


class FlowState(str, Enum):
    """The screen currently shown."""

    EDITING = "editing"
    PREVIEWING = "previewing"


class InvalidTransitionError(RuntimeError):
    """Raised when an action is not allowed in the current state."""


@dataclass(frozen=True)
class FormFlow:
    """Editing/previewing state plus the record being worked on.

    Attributes:
        state (FlowState): The screen currently shown.
        record (ContactRecord): The record being edited or previewed.
        errors (dict[str, str]): Inline validation errors from the last
            validation pass, keyed by field name.
        validated (bool): Whether `record` went through validation since it
            was last replaced.

    """

    state: FlowState = FlowState.EDITING
    record: ContactRecord = field(default_factory=ContactRecord)
    errors: dict[str, str] = field(default_factory=dict)
    validated: bool = False

    @property
    def exportable(self) -> bool:
        """True when the current record passed validation."""
        return self.validated and not self.errors

    def _require(self, state: FlowState, action: str) -> None:
        if self.state is not state:
            _msg = f"Cannot {action} while {self.state.value}"
            log.error(_msg)
            raise InvalidTransitionError(_msg)

    def _validated(self, record: ContactRecord | None) -> "FormFlow":
        record = self.record if record is None else record
        return replace(
            self,
            record=record,
            errors=validate_contact_record(record),
            validated=True,
        )

    def edit(self, field_name: str, value: str) -> "FormFlow":
        """Overwrite one field while editing.

        The error shown for that field is cleared, the rest are kept until
        the next validation pass.
        """
        self._require(FlowState.EDITING, "edit")
        errors = {k: v for k, v in self.errors.items() if k != field_name}
        return replace(
            self,
            record=self.record.with_field(field_name, value),
            errors=errors,
            validated=False,
        )

    def view(self, record: ContactRecord | None = None) -> "FormFlow":
        """Move to the preview when the record is valid.

        Args:
            record (ContactRecord | None): A replacement record, or None to
                use the record already held.

        Returns:
            FormFlow: A previewing flow on success, otherwise an editing flow
                carrying the validation errors.

        Raises:
            InvalidTransitionError: If the flow is not editing.

        """
        self._require(FlowState.EDITING, "view")
        flow = self._validated(record)
        if flow.errors:
            _msg = f"view blocked by errors on {sorted(flow.errors)}"
            log.debug(_msg)
            return flow
        return replace(flow, state=FlowState.PREVIEWING)

    def submit(self, record: ContactRecord | None = None) -> "FormFlow":
        """Validate for a direct export without leaving the form.

        The caller exports `record` when the returned flow is `exportable`.
        """
        self._require(FlowState.EDITING, "submit")
        return self._validated(record)

    def back(self) -> "FormFlow":
        """Return from the preview to the form, keeping the record."""
        self._require(FlowState.PREVIEWING, "go back")
        return replace(self, state=FlowState.EDITING, errors={})

    def download(self) -> ContactRecord:
        """Return the previewed record for export."""
        self._require(FlowState.PREVIEWING, "download")
        return self.record
