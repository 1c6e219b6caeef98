"""
Field-level validation rules for the job application form.

Every field is stripped of surrounding whitespace before it is measured.
Rules run in the order empty -> length -> pattern and only the first
failure per field is reported.
"""

import re

from job_finder.models import ApplicationForm, ApplicationFormErrors, FormField

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 254
WHY_HIRE_MIN_LENGTH = 20
WHY_HIRE_MAX_LENGTH = 1000

NAME_REGEX = re.compile(r"[a-zA-Z\s'-]+")
EMAIL_REGEX = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_REGEX = re.compile(r"\+?[0-9\s\-().]{7,20}")


def text_length(value: str) -> int:
    """Length in UTF-16 code units; characters outside the BMP count twice."""
    return len(value.encode("utf-16-le", "surrogatepass")) // 2


def _validate_name(value: str) -> str | None:
    if not value:
        return "Full name is required."
    if text_length(value) < NAME_MIN_LENGTH:
        return "Name must be at least 2 characters."
    if text_length(value) > NAME_MAX_LENGTH:
        return "Name must be 100 characters or fewer."
    if not NAME_REGEX.fullmatch(value):
        return "Name may only contain letters, spaces, hyphens, and apostrophes."
    return None


def _validate_email(value: str) -> str | None:
    if not value:
        return "Email address is required."
    if text_length(value) > EMAIL_MAX_LENGTH:
        return "Email address is too long."
    if not EMAIL_REGEX.fullmatch(value):
        return "Please enter a valid email address (e.g. user@email.com)."
    return None


def _validate_contact_number(value: str) -> str | None:
    if not value:
        return "Contact number is required."
    if not PHONE_REGEX.fullmatch(value):
        return "Enter a valid phone number (7–20 digits, may include +, spaces, dashes)."
    return None


def _validate_why_hire(value: str) -> str | None:
    if not value:
        return "Please tell us why we should hire you."
    if text_length(value) < WHY_HIRE_MIN_LENGTH:
        return "Please elaborate — minimum 20 characters."
    if text_length(value) > WHY_HIRE_MAX_LENGTH:
        return "Response must be 1000 characters or fewer."
    return None


_RULES = {
    FormField.NAME: _validate_name,
    FormField.EMAIL: _validate_email,
    FormField.CONTACT_NUMBER: _validate_contact_number,
    FormField.WHY_HIRE: _validate_why_hire,
}


def validate_field(form: ApplicationForm, field: FormField) -> str | None:
    """Return the error message for one field, or None if it is valid."""
    return _RULES[field](form.value_of(field).strip())


def validate(form: ApplicationForm) -> ApplicationFormErrors:
    """
    Validate the whole form from scratch.
    Returns a mapping containing only the fields that fail.
    """
    errors: ApplicationFormErrors = {}
    for field in FormField:
        message = validate_field(form, field)
        if message is not None:
            errors[field] = message
    return errors


def is_submittable(form: ApplicationForm) -> bool:
    return not validate(form)
