"""GitHub API client for rate limit and pull request queries."""

import logging
from typing import Any

import httpx

from gitpulls.config import Settings, get_settings
from gitpulls.errors import MalformedResponseError
from gitpulls.models.pr import PullRequest
from gitpulls.models.rate_limit import RateLimit

logger = logging.getLogger(__name__)


class GitHubClient:
    """Client for interacting with GitHub API."""

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize GitHub client.

        Args:
            settings: Runtime settings. If None, uses get_settings().
            transport: Optional httpx transport, used by tests to fake GitHub.
        """
        self.settings = settings or get_settings()
        self.base_url = self.settings.api_url.rstrip("/")
        self.headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": self.settings.api_version,
        }
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers=self.headers,
            timeout=self.settings.timeout,
            transport=self.transport,
        )

    async def get_rate_limit(self) -> RateLimit:
        """
        Fetch the remaining API quota.

        Returns:
            RateLimit for the core REST quota

        Raises:
            httpx.HTTPError: If API request fails
            MalformedResponseError: If the body is not a rate limit document
        """
        url = f"{self.base_url}/rate_limit"
        async with self._client() as client:
            logger.debug("GET %s", url)
            response = await client.get(url)
            response.raise_for_status()
            try:
                payload = response.json()
                if not isinstance(payload, dict):
                    raise ValueError(f"Expected an object, got {type(payload).__name__}")
                return RateLimit.from_api(payload)
            except ValueError as e:
                raise MalformedResponseError(f"Unexpected rate limit response: {e}") from e

    async def list_pull_requests(
        self, owner: str, repo: str, per_page: int = 100
    ) -> list[PullRequest]:
        """
        Fetch every pull request page for a repository.

        Follows the ``Link: rel="next"`` header until the last page.

        Args:
            owner: Repository owner
            repo: Repository name
            per_page: Page size (GitHub caps it at 100)

        Returns:
            Pull requests in the order GitHub returned them

        Raises:
            httpx.HTTPError: If any page request fails
            MalformedResponseError: If a page is not a list of pull requests
        """
        pulls: list[PullRequest] = []
        url: str | None = f"{self.base_url}/repos/{owner}/{repo}/pulls"
        params: dict[str, Any] | None = {"per_page": per_page}

        async with self._client() as client:
            while url:
                logger.debug("GET %s", url)
                response = await client.get(url, params=params)
                response.raise_for_status()
                pulls.extend(_parse_page(response))

                # The next link already carries the query string
                url = response.links.get("next", {}).get("url")
                params = None

        return pulls


def _parse_page(response: httpx.Response) -> list[PullRequest]:
    try:
        page = response.json()
        if not isinstance(page, list):
            raise ValueError(f"Expected a list, got {type(page).__name__}")
        return [PullRequest.model_validate(item) for item in page]
    except ValueError as e:
        raise MalformedResponseError(f"Unexpected pull request page: {e}") from e
