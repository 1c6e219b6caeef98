from collections.abc import Sequence

from job_finder.models import Job


class JobSearchFilter:
    """
    Free-text search over canonical jobs.

    A job matches when the query is a case-insensitive substring of its
    title, company name, location, job type, or any of its tags.
    Results keep the input order; there is no ranking.
    """

    @staticmethod
    def normalize_query(query: str) -> str:
        return query.strip().lower()

    @staticmethod
    def _searchable_fields(job: Job) -> list[str]:
        return [
            job.title,
            job.company_name,
            job.location or "",
            job.job_type or "",
            *job.tags,
        ]

    def matches(self, job: Job, query: str) -> bool:
        """Check a single job against an already normalized query."""
        return any(query in text.lower() for text in self._searchable_fields(job))

    def filter(self, jobs: Sequence[Job], query: str) -> Sequence[Job]:
        """
        Return the jobs matching `query`.
        A blank query returns `jobs` itself, not a copy.
        """
        normalized = self.normalize_query(query)
        if not normalized:
            return jobs
        return [job for job in jobs if self.matches(job, normalized)]


_default_filter = JobSearchFilter()


def filter_jobs(jobs: Sequence[Job], query: str) -> Sequence[Job]:
    return _default_filter.filter(jobs, query)
