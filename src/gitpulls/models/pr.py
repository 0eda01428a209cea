"""Pull request models."""

from pydantic import BaseModel, ConfigDict, Field

from gitpulls.models.repo import SelectedRepository


class PullRequest(BaseModel):
    """A GitHub Pull Request, reduced to the fields we read."""

    model_config = ConfigDict(extra="ignore")

    number: int | None = Field(default=None, description="PR number")
    state: str = Field(..., description="PR state (open, closed)")
    title: str = Field(default="", description="PR title")

    @property
    def is_open(self) -> bool:
        return self.state == "open"


class CountResult(BaseModel):
    """Outcome of counting the pull requests of one repository."""

    selection: SelectedRepository = Field(..., description="Repository that was queried")
    total: int = Field(..., description="Pull requests fetched across all pages")
    open_count: int = Field(..., description="Pull requests whose state is open")
