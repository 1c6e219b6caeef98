from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Job(BaseModel):
    """
    Canonical model for a job posting.
    Every field already holds a value of its declared kind; build instances
    from untrusted feed data with `job_finder.normalizer.normalize_job`.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    title: str
    company_name: str
    min_salary: int | float | None = None
    max_salary: int | float | None = None
    salary_currency: str = "$"
    salary_period: str | None = None
    job_type: str | None = None
    location: str | None = None
    remote: bool | None = None
    description: str | None = None
    apply_url: str | None = None
    tags: list[str] = Field(default_factory=list)
    date_posted: str | None = None


class SaveResult(BaseModel):
    """Outcome of saving a job to the registry."""

    model_config = ConfigDict(frozen=True)

    success: bool
    message: str


class FormField(StrEnum):
    NAME = "name"
    EMAIL = "email"
    CONTACT_NUMBER = "contact_number"
    WHY_HIRE = "why_hire"


class ApplicationForm(BaseModel):
    """The four required fields of a job application."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    name: str = ""
    email: str = ""
    contact_number: str = ""
    why_hire: str = ""

    def value_of(self, field: FormField) -> str:
        return getattr(self, field.value)

    def with_value(self, field: FormField, value: str) -> "ApplicationForm":
        """Return a copy of the form with one field replaced."""
        return self.model_copy(update={field.value: value})


# Only failing fields are present.
ApplicationFormErrors = dict[FormField, str]
