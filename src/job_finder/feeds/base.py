from abc import ABC, abstractmethod
from typing import Any

from job_finder.errors import FeedEmptyError, FeedFormatError
from job_finder.models import Job
from job_finder.normalizer import normalize_jobs


def extract_records(payload: Any) -> list[Any]:
    """
    Pull the list of raw job records out of a decoded feed response.

    Accepted shapes: a top-level list, or an object holding the list under
    "jobs" or "data". Anything else, or an empty list, is a feed error.
    """
    if isinstance(payload, list):
        records = payload
    elif isinstance(payload, dict) and isinstance(payload.get("jobs"), list):
        records = payload["jobs"]
    elif isinstance(payload, dict) and isinstance(payload.get("data"), list):
        records = payload["data"]
    else:
        raise FeedFormatError()

    if not records:
        raise FeedEmptyError()
    return records


class BaseFeedClient(ABC):
    """
    Abstract base class for job feed clients.
    """

    @abstractmethod
    async def fetch_records(self) -> list[Any]:
        """
        Fetch the feed and return its raw, untrusted job records.
        Raises FeedError on any failure; never returns partial data.
        """
        pass

    async def fetch_jobs(self) -> list[Job]:
        """Fetch the feed and normalize every record into a canonical Job."""
        return normalize_jobs(await self.fetch_records())
