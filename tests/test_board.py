from unittest.mock import AsyncMock

import pytest

from job_finder.board import JobBoard
from job_finder.errors import FeedEmptyError, FeedTimeoutError
from job_finder.feeds.base import BaseFeedClient
from job_finder.feeds.empllo import EmplloFeedClient
from job_finder.form import ApplicationFormController, FormPhase
from job_finder.normalizer import normalize_jobs
from job_finder.registry import SavedJobsRegistry

RAW_FEED = [
    {"title": "Frontend Engineer", "companyName": "Pixel Labs", "tags": ["react"]},
    {"title": "Data Analyst", "companyName": "Numbers Inc", "location": "Cebu"},
]


@pytest.fixture
def feed():
    mock_feed = AsyncMock(spec=BaseFeedClient)
    mock_feed.fetch_jobs.side_effect = lambda: normalize_jobs(RAW_FEED)
    return mock_feed


@pytest.fixture
def board(feed):
    return JobBoard(feed=feed, registry=SavedJobsRegistry())


def test_new_board_is_empty(board):
    assert board.jobs == []
    assert board.query == ""
    assert board.error is None
    assert board.loading is False


@pytest.mark.asyncio
async def test_refresh_loads_jobs(board, feed):
    assert await board.refresh() is True

    feed.fetch_jobs.assert_awaited_once()
    assert [job.title for job in board.jobs] == ["Frontend Engineer", "Data Analyst"]
    assert board.error is None
    assert board.loading is False


@pytest.mark.asyncio
async def test_refresh_replaces_identities(board):
    """Test that a refresh mints new ids even when the feed content is identical."""
    await board.refresh()
    first_ids = [job.id for job in board.jobs]

    await board.refresh()

    assert [job.title for job in board.jobs] == ["Frontend Engineer", "Data Analyst"]
    assert set(first_ids).isdisjoint(job.id for job in board.jobs)


@pytest.mark.asyncio
async def test_refresh_failure_sets_error_and_keeps_jobs(board, feed):
    await board.refresh()
    previous = board.jobs

    feed.fetch_jobs.side_effect = FeedTimeoutError()
    assert await board.refresh() is False

    assert board.error == "Request timed out. Please check your connection and try again."
    assert board.jobs is previous
    assert board.loading is False


@pytest.mark.asyncio
async def test_successful_refresh_clears_error(board, feed):
    feed.fetch_jobs.side_effect = FeedEmptyError()
    await board.refresh()
    assert board.error == "No jobs were returned from the API."

    feed.fetch_jobs.side_effect = lambda: normalize_jobs(RAW_FEED)
    await board.refresh()
    assert board.error is None


@pytest.mark.asyncio
async def test_loading_flag_during_refresh(board, feed):
    seen = []

    async def fetch():
        seen.append(board.loading)
        return normalize_jobs(RAW_FEED)

    feed.fetch_jobs.side_effect = fetch
    await board.refresh()

    assert seen == [True]
    assert board.loading is False


@pytest.mark.asyncio
async def test_visible_jobs_follow_query(board):
    await board.refresh()

    assert board.visible_jobs is board.jobs

    board.set_query("cebu")
    assert [job.title for job in board.visible_jobs] == ["Data Analyst"]

    board.set_query("REACT")
    assert [job.title for job in board.visible_jobs] == ["Frontend Engineer"]

    board.set_query("  ")
    assert len(board.visible_jobs) == 2


@pytest.mark.asyncio
async def test_save_and_remove_through_board(board):
    await board.refresh()
    job = board.jobs[0]

    assert board.save(job).success is True
    assert board.is_saved(job.id) is True
    assert board.saved_jobs == [job]

    duplicate = board.save(job)
    assert (duplicate.success, duplicate.message) == (False, "Job already saved.")

    board.remove(job.id)
    assert board.is_saved(job.id) is False
    assert board.saved_jobs == []


@pytest.mark.asyncio
async def test_refresh_survives_oversized_salary(httpx_mock):
    """Test that one record with an out-of-range number does not break the refresh."""
    body = b'[{"title": "Dev", "maxSalary": 1' + b"0" * 400 + b'}, {"title": "QA"}]'
    httpx_mock.add_response(content=body, headers={"content-type": "application/json"})
    board = JobBoard(
        feed=EmplloFeedClient(url="https://feed.example.com/api/v1"),
        registry=SavedJobsRegistry(),
    )

    assert await board.refresh() is True

    assert board.error is None
    assert [job.title for job in board.jobs] == ["Dev", "QA"]
    assert board.jobs[0].max_salary is None


def test_boards_share_injected_registry(feed, sample_job):
    """Test that screens built from the same registry see the same saved jobs."""
    registry = SavedJobsRegistry()
    home = JobBoard(feed=feed, registry=registry)
    saved_screen = JobBoard(feed=feed, registry=registry)

    home.save(sample_job)

    assert saved_screen.is_saved(sample_job.id) is True


def test_start_application(board, sample_job):
    controller = board.start_application(sample_job)

    assert isinstance(controller, ApplicationFormController)
    assert controller.job is sample_job
    assert controller.phase is FormPhase.IDLE
