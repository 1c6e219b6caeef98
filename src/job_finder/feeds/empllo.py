import asyncio
import logging
from typing import Any

import httpx

from job_finder import config
from job_finder.errors import (
    FeedConnectionError,
    FeedError,
    FeedFormatError,
    FeedStatusError,
    FeedTimeoutError,
)
from job_finder.feeds.base import BaseFeedClient, extract_records

logger = logging.getLogger(__name__)

INITIAL_BACKOFF = 2  # seconds
USER_AGENT = "JobFinder/0.1"


class EmplloFeedClient(BaseFeedClient):
    """
    Fetches the job listing feed from the empllo.com JSON API.

    Timeouts, connection failures and 5xx responses are retried with
    exponential backoff; everything else fails on the first attempt.
    """

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
    ) -> None:
        self.url = url if url is not None else config.JOB_FEED_URL
        self.timeout = timeout if timeout is not None else config.FEED_TIMEOUT
        self.max_retries = max_retries if max_retries is not None else config.FEED_MAX_RETRIES

    async def fetch_records(self, initial_backoff: float = INITIAL_BACKOFF) -> list[Any]:
        for attempt in range(1, self.max_retries + 1):
            try:
                records = await self._fetch_once()
                logger.info(f"Fetched {len(records)} job records from {self.url}")
                return records
            except (FeedTimeoutError, FeedConnectionError, FeedStatusError) as e:
                retryable = not isinstance(e, FeedStatusError) or e.status_code >= 500
                if not retryable or attempt == self.max_retries:
                    logger.error(f"Feed fetch failed after {attempt} attempt(s): {e}")
                    raise
                backoff = initial_backoff * (2 ** (attempt - 1))
                logger.warning(
                    f"Feed fetch attempt {attempt}/{self.max_retries} failed: {e}. "
                    f"Retrying in {backoff}s..."
                )
                await asyncio.sleep(backoff)
            except FeedError as e:
                logger.error(f"Feed fetch failed: {e}")
                raise

        # max_retries < 1 never enters the loop
        raise FeedConnectionError("An unexpected error occurred.")

    async def _fetch_once(self) -> list[Any]:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                headers={"Accept": "application/json", "User-Agent": USER_AGENT},
            ) as client:
                response = await client.get(self.url)
        except httpx.TimeoutException:
            raise FeedTimeoutError() from None
        except httpx.HTTPError as e:
            raise FeedConnectionError(str(e) or "An unexpected error occurred.") from e
        except httpx.InvalidURL as e:
            # not an HTTPError subclass
            raise FeedConnectionError(f"Invalid feed URL: {e}") from e

        if not response.is_success:
            raise FeedStatusError(response.status_code, response.reason_phrase)

        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type:
            raise FeedFormatError("API did not return JSON. Please check the API endpoint.")

        try:
            payload = response.json()
        except ValueError:
            raise FeedFormatError() from None

        return extract_records(payload)
