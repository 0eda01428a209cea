"""
Pytest fixtures for gitpulls tests.

``fake_github`` is an in-memory stand-in for the two GitHub endpoints the
tool calls, served through ``httpx.MockTransport``.

Usage:
    def test_something(fake_github, client):
        fake_github.add_pulls(open=3, closed=2)
        ...
"""

from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest

from gitpulls.config import Settings
from gitpulls.github.client import GitHubClient

API_URL = "https://api.github.test"
NOW = 1_700_000_000


@dataclass
class FakeGitHub:
    """Serves /rate_limit and paginated /repos/{owner}/{repo}/pulls."""

    owner: str = "octocat"
    repo: str = "hello-world"
    remaining: int = 60
    reset: int = NOW + 3600
    pulls_status: int = 200
    rate_limit_status: int = 200
    pulls_body: Any = None
    rate_limit_body: Any = None
    pulls: list[dict[str, Any]] = field(default_factory=list)
    requests: list[httpx.Request] = field(default_factory=list)

    def add_pulls(self, open: int = 0, closed: int = 0):
        for state in ["open"] * open + ["closed"] * closed:
            number = len(self.pulls) + 1
            self.pulls.append({"number": number, "state": state, "title": f"PR {number}"})

    @property
    def pull_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith("/pulls")]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path == "/rate_limit":
            if self.rate_limit_status != 200:
                return httpx.Response(self.rate_limit_status, json={"message": "error"})
            if self.rate_limit_body is not None:
                return httpx.Response(200, json=self.rate_limit_body)
            core = {"limit": 60, "remaining": self.remaining, "reset": self.reset, "used": 60 - self.remaining}
            return httpx.Response(200, json={"resources": {"core": core}, "rate": core})

        if path == f"/repos/{self.owner}/{self.repo}/pulls":
            if self.pulls_status != 200:
                return httpx.Response(self.pulls_status, json={"message": "error"})
            if self.pulls_body is not None:
                return httpx.Response(200, json=self.pulls_body)
            return self._page(request)

        return httpx.Response(404, json={"message": "Not Found"})

    def _page(self, request: httpx.Request) -> httpx.Response:
        per_page = int(request.url.params.get("per_page", 30))
        page = int(request.url.params.get("page", 1))
        start = (page - 1) * per_page
        items = self.pulls[start:start + per_page]

        headers = {}
        if start + per_page < len(self.pulls):
            next_url = request.url.copy_merge_params({"page": page + 1})
            headers["Link"] = f'<{next_url}>; rel="next"'
        return httpx.Response(200, json=items, headers=headers)


@pytest.fixture
def settings() -> Settings:
    return Settings(api_url=API_URL, timeout=5.0, per_page=100, max_attempts=None)


@pytest.fixture
def fake_github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def client(settings, fake_github) -> GitHubClient:
    return GitHubClient(settings=settings, transport=httpx.MockTransport(fake_github.handler))
