import os

import pytest

# Set environment variables for tests before any imports happen
os.environ["JOB_FEED_URL"] = "https://feed.example.com/api/v1"
os.environ["FEED_TIMEOUT"] = "5"
os.environ["FEED_MAX_RETRIES"] = "1"
os.environ["SUBMIT_DELAY"] = "0"

from job_finder.models import ApplicationForm, Job  # noqa: E402
from job_finder.normalizer import normalize_job  # noqa: E402


@pytest.fixture
def sample_raw_record():
    """A complete, well-formed record as the feed returns it."""
    return {
        "title": "Senior Python Developer",
        "companyName": "Tech Corp",
        "minSalary": 90000,
        "maxSalary": 120000,
        "salaryCurrency": "USD",
        "salaryPeriod": "year",
        "jobType": "Full-time",
        "location": "Manila",
        "remote": True,
        "description": "Build backend services.",
        "applyUrl": "https://example.com/apply/1",
        "tags": ["python", "django", "aws"],
        "datePosted": "2026-10-01",
    }


@pytest.fixture
def sample_job(sample_raw_record):
    """A reusable canonical Job built from the sample record."""
    return normalize_job(sample_raw_record)


@pytest.fixture
def sample_jobs():
    """A small job list covering every searchable field."""
    return [
        Job(
            id="job-1",
            title="Frontend Engineer",
            company_name="Pixel Labs",
            location="Cebu",
            job_type="Contract",
            tags=["react", "typescript"],
        ),
        Job(
            id="job-2",
            title="Data Analyst",
            company_name="Numbers Inc",
            location="Remote",
            job_type="Full-time",
            tags=["sql"],
        ),
        Job(id="job-3", title="Office Manager", company_name="Acme"),
    ]


@pytest.fixture
def valid_form():
    return ApplicationForm(
        name="Juan dela Cruz",
        email="juan@email.com",
        contact_number="+63 912 345 6789",
        why_hire="I have five years of backend experience with Python.",
    )
