"""
Conversion of untrusted feed records into canonical `Job` models.

Every field is read through a typed extractor that either returns the raw
value (when it already has the expected kind) or a safe default, so
normalization never fails no matter what the feed sends.
"""

import logging
import uuid
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from job_finder.models import Job

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Untitled"
DEFAULT_COMPANY_NAME = "Unknown Company"
DEFAULT_SALARY_CURRENCY = "$"


def text_or_default(value: Any, default: str) -> str:
    return value if isinstance(value, str) else default


def text_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def number_or_none(value: Any) -> int | float | None:
    # bool is an int subclass but never a salary
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, int):
        try:
            float(value)
        except OverflowError:
            logger.debug(f"Dropping integer too large for a float ({value.bit_length()} bits)")
            return None
    return value


def bool_or_none(value: Any) -> bool | None:
    return value if isinstance(value, bool) else None


def sequence_or_empty(value: Any) -> list[Any]:
    """
    Return the elements of a list or tuple as a new list.
    Strings and mappings are not treated as sequences.
    """
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def _tags(value: Any) -> list[str]:
    return [tag for tag in sequence_or_empty(value) if isinstance(tag, str)]


def new_job_id() -> str:
    """Mint a random identity for a freshly normalized job."""
    return str(uuid.uuid4())


# Job attribute -> (feed key, extractor)
FIELD_EXTRACTORS: dict[str, tuple[str, Callable[[Any], Any]]] = {
    "title": ("title", lambda v: text_or_default(v, DEFAULT_TITLE)),
    "company_name": ("companyName", lambda v: text_or_default(v, DEFAULT_COMPANY_NAME)),
    "min_salary": ("minSalary", number_or_none),
    "max_salary": ("maxSalary", number_or_none),
    "salary_currency": (
        "salaryCurrency",
        lambda v: text_or_default(v, DEFAULT_SALARY_CURRENCY),
    ),
    "salary_period": ("salaryPeriod", text_or_none),
    "job_type": ("jobType", text_or_none),
    "location": ("location", text_or_none),
    "remote": ("remote", bool_or_none),
    "description": ("description", text_or_none),
    "apply_url": ("applyUrl", text_or_none),
    "tags": ("tags", _tags),
    "date_posted": ("datePosted", text_or_none),
}


def normalize_job(raw: Any) -> Job:
    """
    Build a canonical Job from one raw feed record.

    Any identity-like key in the record is ignored; a new id is minted on
    every call. A record that is not a mapping normalizes as if it were empty.
    """
    record: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}

    fields = {attr: extract(record.get(key)) for attr, (key, extract) in FIELD_EXTRACTORS.items()}

    if not isinstance(record.get("title"), str):
        logger.debug(f"Feed record has no usable title, defaulting to '{DEFAULT_TITLE}'")
    if not isinstance(record.get("companyName"), str):
        logger.debug(
            f"Feed record has no usable companyName, defaulting to '{DEFAULT_COMPANY_NAME}'"
        )

    return Job(id=new_job_id(), **fields)


def normalize_jobs(raws: Iterable[Any]) -> list[Job]:
    """Normalize a sequence of raw records, preserving their order."""
    return [normalize_job(raw) for raw in raws]
