import logging
from collections.abc import Sequence

from job_finder.errors import FeedError
from job_finder.feeds.base import BaseFeedClient
from job_finder.form import ApplicationFormController
from job_finder.models import Job, SaveResult
from job_finder.registry import SavedJobsRegistry
from job_finder.search import filter_jobs

logger = logging.getLogger(__name__)


class JobBoard:
    """
    Session state behind the job list screens.

    Holds the current feed snapshot, the search query and the last feed error,
    and routes save/apply actions to the injected registry. One instance is
    created per app session and shared by reference.
    """

    def __init__(self, feed: BaseFeedClient, registry: SavedJobsRegistry) -> None:
        self.feed = feed
        self.registry = registry
        self.jobs: list[Job] = []
        self.query = ""
        self.error: str | None = None
        self.loading = False

    async def refresh(self) -> bool:
        """
        Reload the feed.
        On success every job is replaced (with new ids) and the error is cleared.
        On failure the error message is stored and the previous jobs are kept.
        """
        self.loading = True
        self.error = None
        try:
            self.jobs = await self.feed.fetch_jobs()
        except FeedError as e:
            logger.error(f"Failed to load jobs: {e.message}")
            self.error = e.message
            return False
        finally:
            self.loading = False

        logger.info(f"Loaded {len(self.jobs)} jobs.")
        return True

    def set_query(self, query: str) -> None:
        self.query = query

    @property
    def visible_jobs(self) -> Sequence[Job]:
        return filter_jobs(self.jobs, self.query)

    @property
    def saved_jobs(self) -> list[Job]:
        return self.registry.jobs

    def save(self, job: Job) -> SaveResult:
        return self.registry.save(job)

    def remove(self, job_id: str) -> None:
        self.registry.remove(job_id)

    def is_saved(self, job_id: str) -> bool:
        return self.registry.is_saved(job_id)

    def start_application(self, job: Job) -> ApplicationFormController:
        return ApplicationFormController(job)
