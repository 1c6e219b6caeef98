import math

from job_finder.models import Job

NOT_DISCLOSED = "Salary not disclosed"


class JobFormatter:
    """
    Formats Job fields into display labels.
    """

    @staticmethod
    def _has_amount(value: int | float | None) -> bool:
        # Zero and NaN count as "not provided"
        if value is None or value == 0:
            return False
        return not (isinstance(value, float) and math.isnan(value))

    @staticmethod
    def format_amount(value: int | float) -> str:
        """
        Group thousands with commas, keeping at most three decimals.
        e.g. 90000 -> "90,000", 1234.5 -> "1,234.5"
        """
        if isinstance(value, float) and math.isinf(value):
            return "-∞" if value < 0 else "∞"
        if isinstance(value, float) and not value.is_integer():
            return f"{value:,.3f}".rstrip("0").rstrip(".")
        return f"{int(value):,}"

    @classmethod
    def format_salary(cls, job: Job) -> str:
        """
        Build the salary label for a job.
        Uses a range when both bounds are known, "From"/"Up to" for a single
        bound, and the period suffix (e.g. "/year") when one is given.
        """
        has_min = cls._has_amount(job.min_salary)
        has_max = cls._has_amount(job.max_salary)
        if not has_min and not has_max:
            return NOT_DISCLOSED

        currency = job.salary_currency
        period = f"/{job.salary_period}" if job.salary_period else ""

        if has_min and has_max:
            return (
                f"{currency}{cls.format_amount(job.min_salary)} – "
                f"{currency}{cls.format_amount(job.max_salary)}{period}"
            )
        if has_min:
            return f"From {currency}{cls.format_amount(job.min_salary)}{period}"
        return f"Up to {currency}{cls.format_amount(job.max_salary)}{period}"
