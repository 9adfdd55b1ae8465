"""Pydantic models describing file updates and pull requests."""

from typing import Optional

from pydantic import BaseModel, Field, model_validator


class Signature(BaseModel):
    """Identifies the author and committer of a commit."""

    name: str = Field("", description="Display name of the commit author.")
    email: str = Field("", description="Email address of the commit author.")

    def is_empty(self) -> bool:
        return not self.name and not self.email


class CommitInput(BaseModel):
    """Configuration for a single-file commit and its optional branch."""

    repo: str = Field(..., description="Repository identifier, e.g. my-org/my-repo.")
    filename: str = Field(
        ..., description="Path of the file relative to the repository root."
    )
    branch: str = Field("main", description="Base branch to read from and fork.")
    branch_generate_name: str = Field(
        "",
        description="Prefix used when generating the name of the new branch.",
    )
    disable_pr_creation: bool = Field(
        False,
        description="Commit directly to the base branch instead of a new branch.",
    )
    create_missing: bool = Field(
        False, description="Create the target file when it does not exist."
    )
    remove_file: bool = Field(False, description="Remove the target file.")
    commit_message: str = Field("", description="Message for the commit.")
    signature: Signature = Field(default_factory=Signature)

    @model_validator(mode="after")
    def _validate_file_operation(self) -> "CommitInput":
        if self.remove_file and self.create_missing:
            raise ValueError("remove_file and create_missing cannot both be set.")
        return self

    @property
    def is_file_operation(self) -> bool:
        """True when the request creates or removes the file itself."""
        return self.remove_file or self.create_missing


class FileContent(BaseModel):
    """The current state of a file in the repository."""

    path: str
    data: bytes = b""
    sha: str = Field(
        "", description="Revision id of the file; empty when the file is absent."
    )


class PullRequestInput(BaseModel):
    """Configuration for the pull request to be opened."""

    repo: str = Field(..., description="Repository identifier, e.g. my-org/my-repo.")
    title: str
    body: str = ""
    source_branch: str = Field(
        "main", description="Branch the change was forked from; the PR target."
    )
    new_branch: Optional[str] = Field(
        None, description="Branch holding the change; the PR source."
    )
    branch_generate_name: str = Field(
        "",
        description="Prefix used to generate the PR source when new_branch is unset.",
    )


class PullRequestResult(BaseModel):
    """A pull request created upstream."""

    number: int
    link: str
