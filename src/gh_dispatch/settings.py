"""Client settings loaded from environment variables."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class GitHubSettings(BaseSettings):
    """Configuration for the GitHub dispatcher.

    Values are read from ``GITHUB_``-prefixed environment variables
    (case-insensitive) and optionally from a ``.env`` file in the working
    directory.  Instances are passed explicitly to the client objects.
    """

    api_url: str = "https://api.github.com"
    per_page: int = Field(default=100, ge=1, le=100)
    max_pages: int = Field(default=1000, ge=1)
    timeout: float = Field(default=30, gt=0)
    user_agent: str = "gh-dispatch"

    model_config = {
        "env_prefix": "GITHUB_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        if "://" not in value:
            raise ValueError(f"GITHUB_API_URL must be an absolute URL, got {value!r}")
        return value.rstrip("/")
