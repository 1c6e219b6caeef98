import asyncio
import logging
import sys

from job_finder.board import JobBoard
from job_finder.feeds.empllo import EmplloFeedClient
from job_finder.formatter import JobFormatter
from job_finder.registry import SavedJobsRegistry

# Set up logging
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.INFO
)
logger = logging.getLogger(__name__)


async def main(query: str = "") -> None:
    board = JobBoard(feed=EmplloFeedClient(), registry=SavedJobsRegistry())

    logger.info(f"Fetching jobs from {board.feed.url}...")
    if not await board.refresh():
        logger.error(f"Failed to load jobs: {board.error}")
        return

    board.set_query(query)
    visible = board.visible_jobs
    logger.info(f"{len(visible)} of {len(board.jobs)} jobs match '{query}'")

    for job in visible:
        logger.info(
            f"{job.title} | {job.company_name} | {job.location or 'n/a'} | "
            f"{JobFormatter.format_salary(job)}"
        )

    if visible:
        result = board.save(visible[0])
        logger.info(f"Saving first match: {result.message}")
        logger.info(f"Saving it again: {board.save(visible[0]).message}")


if __name__ == "__main__":
    asyncio.run(main(" ".join(sys.argv[1:])))
