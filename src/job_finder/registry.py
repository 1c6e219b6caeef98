import logging

from job_finder.models import Job, SaveResult

logger = logging.getLogger(__name__)

ALREADY_SAVED_MESSAGE = "Job already saved."
SAVED_MESSAGE = "Job saved successfully!"


class SavedJobsRegistry:
    """
    In-memory list of the user's saved jobs, deduplicated by job id.
    The most recently saved job comes first. Nothing is persisted; create one
    instance per session and hand it to whoever needs it.
    """

    def __init__(self) -> None:
        self._jobs: list[Job] = []

    @property
    def jobs(self) -> list[Job]:
        """Return a copy of the saved jobs, newest first."""
        return list(self._jobs)

    def save(self, job: Job) -> SaveResult:
        """
        Attempt to save a job.
        Returns an unsuccessful result, leaving the registry untouched, if a
        job with the same id is already saved.
        """
        if self.is_saved(job.id):
            logger.debug(f"Duplicate save skipped: {job.title} ({job.id})")
            return SaveResult(success=False, message=ALREADY_SAVED_MESSAGE)

        self._jobs = [job, *self._jobs]
        logger.info(f"Saved job: {job.title} at {job.company_name}")
        return SaveResult(success=True, message=SAVED_MESSAGE)

    def remove(self, job_id: str) -> None:
        """Remove the job with the given id. Unknown ids are ignored."""
        remaining = [job for job in self._jobs if job.id != job_id]
        if len(remaining) != len(self._jobs):
            logger.info(f"Removed saved job {job_id}")
        self._jobs = remaining

    def is_saved(self, job_id: str) -> bool:
        return any(job.id == job_id for job in self._jobs)

    def __len__(self) -> int:
        return len(self._jobs)

    def __contains__(self, job_id: object) -> bool:
        return isinstance(job_id, str) and self.is_saved(job_id)
