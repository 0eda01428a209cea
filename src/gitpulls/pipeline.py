"""Rate limit gate, pull request fetch and open count."""

import logging
import time
from collections.abc import Iterable

import httpx

from gitpulls.errors import RateLimitCheckError, RateLimitExceededError
from gitpulls.github.client import GitHubClient
from gitpulls.models.pr import CountResult, PullRequest
from gitpulls.models.rate_limit import RateLimit
from gitpulls.models.repo import SelectedRepository

logger = logging.getLogger(__name__)


def count_open(pulls: Iterable[PullRequest]) -> int:
    """Count pull requests whose state is ``open``."""
    return sum(1 for pr in pulls if pr.is_open)


async def check_rate_limit(client: GitHubClient, now: float | None = None) -> RateLimit:
    """
    Make sure the API quota is not exhausted.

    Args:
        client: GitHub client
        now: Current UNIX time, defaults to time.time()

    Returns:
        The current RateLimit

    Raises:
        RateLimitExceededError: If no requests remain in the window
        RateLimitCheckError: If the rate limit endpoint returns an error status
    """
    try:
        rate_limit = await client.get_rate_limit()
    except httpx.HTTPStatusError as e:
        raise RateLimitCheckError(e.response.status_code) from e
    logger.debug("%s", rate_limit)

    if rate_limit.is_exhausted:
        current = time.time() if now is None else now
        raise RateLimitExceededError(rate_limit.wait_time(current))
    return rate_limit


async def run(
    selection: SelectedRepository, client: GitHubClient, now: float | None = None
) -> CountResult:
    """
    Count the open pull requests of the selected repository.

    Args:
        selection: Repository picked at the prompt
        client: GitHub client
        now: Current UNIX time for the rate limit check

    Returns:
        CountResult with total and open counts

    Raises:
        RateLimitExceededError: If the quota is exhausted (nothing is fetched)
        RateLimitCheckError: If the quota could not be read
        MalformedResponseError: If a response body cannot be parsed
        httpx.HTTPError: If a pull request page request fails
    """
    await check_rate_limit(client, now)

    pulls = await client.list_pull_requests(
        selection.owner, selection.repo, per_page=selection.per_page
    )
    logger.info("Fetched %d pull requests for %s", len(pulls), selection.full_name)

    return CountResult(selection=selection, total=len(pulls), open_count=count_open(pulls))
