"""Repository selection model."""

from pydantic import BaseModel, Field


class SelectedRepository(BaseModel):
    """Repository the user picked at the prompt."""

    owner: str = Field(default="", description="Repository owner/organization")
    repo: str = Field(default="", description="Repository name")
    per_page: int = Field(default=100, ge=1, le=100, description="Pull requests per page")

    @property
    def full_name(self) -> str:
        """Get ``owner/repo`` form."""
        return f"{self.owner}/{self.repo}"
