"""Main application configuration for git-updater."""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class UpdaterSettings(BaseSettings):
    """The configurable fields for the updater."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    scm_provider: str = Field(
        default="github",
        title="SCM Provider",
        description="Remote repository provider, either 'github' or 'gitlab'.",
        alias="GIT_UPDATER_SCM_PROVIDER",
    )
    use_mock_scm: bool = Field(
        default=False,
        title="Use Mock SCM",
        description="Return an in-memory SCM client when enabled.",
        alias="GIT_UPDATER_USE_MOCK_SCM",
    )
    branch_prefix: str = Field(
        default="git-updater-",
        title="Branch Prefix",
        description="Default prefix for generated branch names.",
        alias="GIT_UPDATER_BRANCH_PREFIX",
    )
    commit_author_name: str = Field(
        default="",
        title="Commit Author Name",
        description="Name recorded as author and committer of updates.",
        alias="GIT_UPDATER_COMMIT_AUTHOR_NAME",
    )
    commit_author_email: str = Field(
        default="",
        title="Commit Author Email",
        description="Email recorded as author and committer of updates.",
        alias="GIT_UPDATER_COMMIT_AUTHOR_EMAIL",
    )

    @field_validator("scm_provider", mode="before")
    @classmethod
    def normalize_provider(cls, value: Any) -> str:
        """Lowercase and trim the provider name."""
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("use_mock_scm", mode="before")
    @classmethod
    def parse_use_mock_scm(cls, value: Any) -> bool:
        """Ensure use_mock_scm is parsed as a boolean from string."""
        if isinstance(value, str):
            return value.lower() in {"true", "1", "yes", "on"}
        return bool(value)
