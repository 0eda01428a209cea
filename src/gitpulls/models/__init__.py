"""Data models for gitpulls."""

from gitpulls.models.pr import CountResult, PullRequest
from gitpulls.models.rate_limit import RateLimit
from gitpulls.models.repo import SelectedRepository

__all__ = ["CountResult", "PullRequest", "RateLimit", "SelectedRepository"]
