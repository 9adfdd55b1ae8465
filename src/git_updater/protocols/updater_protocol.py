"""Protocol definition for applying file updates to a repository."""

from typing import Callable, Protocol

from src.git_updater.schemas import CommitInput, PullRequestInput, PullRequestResult

ContentUpdater = Callable[[bytes], bytes]


class UpdaterProtocol(Protocol):
    """Protocol for services that commit file changes to a remote repository."""

    def apply_update_to_file(
        self, commit_input: CommitInput, updater: ContentUpdater
    ) -> str:
        """Apply ``updater`` to the described file and return the target branch."""
        ...

    def create_pr(self, pr_input: PullRequestInput) -> PullRequestResult:
        """Open a pull request and return its number and link."""
        ...
