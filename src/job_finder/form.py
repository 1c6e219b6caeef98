import asyncio
import logging
from enum import StrEnum

from job_finder import config
from job_finder.errors import FormStateError
from job_finder.models import ApplicationForm, ApplicationFormErrors, FormField, Job
from job_finder.validation import validate, validate_field

logger = logging.getLogger(__name__)


class FormPhase(StrEnum):
    IDLE = "idle"
    TOUCHED = "touched"
    SUBMITTING = "submitting"
    SUCCESS = "success"


class ApplicationFormController:
    """
    Interaction state for one job application form.

    Errors only become visible for fields the user has blurred at least once.
    Edits to a touched field re-validate it immediately; edits to an untouched
    field never surface an error. Submitting touches every field first.

    Phases: IDLE -> TOUCHED -> SUBMITTING -> SUCCESS -> IDLE (on acknowledge).
    """

    def __init__(self, job: Job, submit_delay: float | None = None) -> None:
        self.job = job
        self.submit_delay = submit_delay if submit_delay is not None else config.SUBMIT_DELAY
        self.form = ApplicationForm()
        self.errors: ApplicationFormErrors = {}
        self.touched: dict[FormField, bool] = {field: False for field in FormField}
        self.phase = FormPhase.IDLE

    def _require_editable(self, event: str) -> None:
        if self.phase is FormPhase.SUCCESS:
            raise FormStateError(f"Cannot {event} while the form is {self.phase}")

    def _show_error(self, field: FormField) -> None:
        message = validate_field(self.form, field)
        if message is None:
            self.errors.pop(field, None)
        else:
            self.errors[field] = message

    def edit(self, field: FormField, value: str) -> None:
        self._require_editable("edit")
        self.form = self.form.with_value(field, value)
        if self.touched[field]:
            self._show_error(field)

    def blur(self, field: FormField) -> None:
        self._require_editable("blur")
        self.touched[field] = True
        self._show_error(field)
        # an in-flight submission keeps its phase
        if self.phase is not FormPhase.SUBMITTING:
            self.phase = FormPhase.TOUCHED

    async def submit(self) -> bool:
        """
        Validate the whole form and, if it passes, run the simulated submission.
        Returns True once the form has reached the SUCCESS phase.
        Ignored (returns False) while a submission is in flight or unacknowledged.
        """
        if not self.can_submit:
            logger.debug(f"Submit ignored while the form is {self.phase}")
            return False

        self.touched = {field: True for field in FormField}
        self.errors = validate(self.form)
        self.phase = FormPhase.TOUCHED
        if self.errors:
            logger.debug(f"Submit blocked by {len(self.errors)} invalid field(s)")
            return False

        self.phase = FormPhase.SUBMITTING
        await asyncio.sleep(self.submit_delay)
        self.phase = FormPhase.SUCCESS
        logger.info(f"Application submitted for {self.job.title} at {self.job.company_name}")
        return True

    def acknowledge_success(self) -> None:
        """Close the success state and reset the form to its initial, untouched state."""
        if self.phase is not FormPhase.SUCCESS:
            raise FormStateError(f"Nothing to acknowledge while the form is {self.phase}")
        self.form = ApplicationForm()
        self.errors = {}
        self.touched = {field: False for field in FormField}
        self.phase = FormPhase.IDLE

    def error_for(self, field: FormField) -> str | None:
        if not self.touched[field]:
            return None
        return self.errors.get(field)

    @property
    def visible_errors(self) -> ApplicationFormErrors:
        return {field: msg for field, msg in self.errors.items() if self.touched[field]}

    @property
    def has_errors(self) -> bool:
        """Whether the current form would fail validation, shown or not."""
        return bool(validate(self.form))

    @property
    def show_fix_errors_hint(self) -> bool:
        return self.has_errors and any(self.touched.values())

    @property
    def can_submit(self) -> bool:
        return self.phase not in (FormPhase.SUBMITTING, FormPhase.SUCCESS)
