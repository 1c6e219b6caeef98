import pytest
from pydantic import ValidationError

from job_finder.models import ApplicationForm, FormField, Job, SaveResult


def test_job_defaults():
    """Test that only id, title and company_name are required."""
    job = Job(id="abc", title="Engineer", company_name="Acme")
    assert job.min_salary is None
    assert job.max_salary is None
    assert job.salary_currency == "$"
    assert job.remote is None
    assert job.tags == []


def test_job_accepts_camel_case_aliases():
    """Test that the feed's camelCase keys populate snake_case attributes."""
    job = Job.model_validate(
        {"id": "abc", "title": "Engineer", "companyName": "Acme", "jobType": "Part-time"}
    )
    assert job.company_name == "Acme"
    assert job.job_type == "Part-time"


def test_job_dump_by_alias():
    """Test that dumping by alias reproduces the wire field names."""
    job = Job(id="abc", title="Engineer", company_name="Acme", apply_url="https://x.io")
    dumped = job.model_dump(by_alias=True)
    assert dumped["companyName"] == "Acme"
    assert dumped["applyUrl"] == "https://x.io"
    assert "company_name" not in dumped


def test_job_is_frozen():
    """Test that canonical jobs cannot be mutated after creation."""
    job = Job(id="abc", title="Engineer", company_name="Acme")
    with pytest.raises(ValidationError):
        job.title = "Changed"


def test_missing_required_fields_raises_error():
    with pytest.raises(ValidationError):
        Job(title="Engineer")


def test_save_result_fields():
    result = SaveResult(success=False, message="Job already saved.")
    assert result.success is False
    assert result.message == "Job already saved."


def test_application_form_defaults_to_empty():
    form = ApplicationForm()
    assert all(form.value_of(field) == "" for field in FormField)


def test_application_form_with_value_returns_copy():
    """Test that with_value leaves the original form untouched."""
    form = ApplicationForm()
    updated = form.with_value(FormField.CONTACT_NUMBER, "09171234567")
    assert updated.contact_number == "09171234567"
    assert form.contact_number == ""


def test_application_form_accepts_aliases():
    form = ApplicationForm.model_validate({"contactNumber": "123", "whyHire": "Because"})
    assert form.contact_number == "123"
    assert form.why_hire == "Because"
