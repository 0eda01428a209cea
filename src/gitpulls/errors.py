"""Exceptions and HTTP status classification."""

STATUS_MESSAGES: dict[int, str] = {
    404: "Repository not found",
    500: "Internal server error",
}


class GitPullsError(Exception):
    """Base class for gitpulls errors."""


class InvalidInputError(GitPullsError):
    """Raised when the prompt loop runs out of attempts."""


class RateLimitExceededError(GitPullsError):
    """Raised when the API quota is exhausted before fetching."""

    def __init__(self, wait: str):
        super().__init__(f"API rate limit exceeded. Try again in {wait}")
        self.wait = wait


class RateLimitCheckError(GitPullsError):
    """Raised when the rate limit endpoint answers with an error status."""

    def __init__(self, status_code: int):
        super().__init__(f"Could not check the API rate limit (HTTP {status_code})")
        self.status_code = status_code


class MalformedResponseError(GitPullsError):
    """Raised when a GitHub response body cannot be parsed."""


def describe_status(status_code: int) -> str | None:
    """
    Map an HTTP status of the pull request fetch to a user message.

    Args:
        status_code: HTTP status of the failed response

    Returns:
        The message for known statuses, None otherwise
    """
    return STATUS_MESSAGES.get(status_code)
