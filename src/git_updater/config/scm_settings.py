"""Credentials and connection settings for the SCM API."""

from typing import Any, Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URLS = {
    "github": "https://api.github.com",
    "gitlab": "https://gitlab.com/api/v4",
}


class SCMSettings(BaseSettings):
    """Configuration values for talking to the SCM API."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    token: Optional[SecretStr] = Field(
        default=None,
        description="Personal Access Token for SCM API operations.",
        alias="GIT_UPDATER_SCM_TOKEN",
    )
    api_url: Optional[str] = Field(
        default=None,
        description="Base URL for the SCM API. Defaults to the provider's public API.",
        alias="GIT_UPDATER_SCM_API_URL",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="HTTP timeout (in seconds) for SCM API requests.",
        alias="GIT_UPDATER_SCM_TIMEOUT_SECONDS",
    )

    @field_validator("api_url", mode="before")
    @classmethod
    def normalize_api_url(cls, value: Any) -> Optional[str]:
        """Trim whitespace and any trailing slash from the API URL."""
        if value is None:
            return None
        if isinstance(value, str):
            trimmed = value.strip()
            if not trimmed:
                return None
            return trimmed.rstrip("/")
        return value

    def api_url_for(self, provider: str) -> str:
        """Return the configured API URL or the provider default."""
        if self.api_url:
            return self.api_url
        try:
            return DEFAULT_API_URLS[provider]
        except KeyError as exc:
            raise ValueError(f"Unsupported SCM provider: {provider}") from exc
