"""Rate limit model."""

from typing import Any

from pydantic import BaseModel, Field


class RateLimit(BaseModel):
    """GitHub API quota for the current window."""

    limit: int = Field(default=0, description="Requests allowed per window")
    remaining: int = Field(default=0, description="Requests left in the window")
    reset: int = Field(default=0, description="UNIX timestamp when the quota refills")
    used: int = Field(default=0, description="Requests used in the window")

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "RateLimit":
        """
        Build from a ``GET /rate_limit`` response body.

        Args:
            payload: Decoded JSON body

        Returns:
            RateLimit for the core REST quota

        Raises:
            ValueError: If the body has neither ``resources.core`` nor ``rate``
        """
        core = payload.get("resources", {}).get("core") or payload.get("rate")
        if core is None:
            raise ValueError("Rate limit response has no core quota")
        return cls.model_validate(core)

    @property
    def is_exhausted(self) -> bool:
        return self.remaining <= 0

    def seconds_until_reset(self, now: float) -> int:
        """Seconds left until ``reset``, never negative."""
        return max(0, self.reset - int(now))

    def wait_time(self, now: float) -> str:
        """Format the time until reset as ``MM:SS``."""
        minutes, seconds = divmod(self.seconds_until_reset(now), 60)
        return f"{minutes:02d}:{seconds:02d}"

    def __str__(self) -> str:
        return f"RateLimit(remaining={self.remaining}/{self.limit}, reset={self.reset})"
