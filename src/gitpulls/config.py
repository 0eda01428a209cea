"""Runtime settings, read from ``GITPULLS_*`` environment variables or ``.env``."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the GitHub client and the prompt loop."""

    model_config = SettingsConfigDict(
        env_prefix="GITPULLS_", env_file=".env", env_parse_none_str="none", extra="ignore"
    )

    api_url: str = Field(default="https://api.github.com", description="GitHub REST API base URL")
    api_version: str = Field(default="2022-11-28", description="X-GitHub-Api-Version header")
    per_page: int = Field(default=100, ge=1, le=100, description="Pull requests per page")
    timeout: float | None = Field(default=30.0, description="Request timeout, None waits forever")
    max_attempts: int | None = Field(
        default=None, ge=1, description="Prompt attempts before giving up, None for unbounded"
    )
    log_level: str = Field(default="WARNING", description="Log level without --verbose")


@lru_cache
def get_settings() -> Settings:
    return Settings()
