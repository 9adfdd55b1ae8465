"""Protocol definition for SCM client interface."""

from typing import Protocol

from src.git_updater.schemas import FileContent, PullRequestResult, Signature


class SCMClientProtocol(Protocol):
    """Protocol for file, branch and pull request operations on a remote repository."""

    def get_file(self, repo: str, ref: str, path: str) -> FileContent:
        """
        Read a file at a specific ref.

        Args:
            repo: Repository identifier, e.g. "my-org/my-repo".
            ref: Branch name or revision to read from.
            path: Path to the file in the repository.

        Returns:
            FileContent with the decoded body and its revision id.

        Raises:
            SCMError: If the upstream service responds with an error status.
                A missing file has the NOT_FOUND kind.
            TransportError: If the service could not be reached.
        """
        ...

    def create_branch(self, repo: str, branch: str, sha: str) -> None:
        """
        Create a new branch pointing at the given revision.

        Raises:
            SCMError: If branch creation fails.
        """
        ...

    def get_branch_head(self, repo: str, branch: str) -> str:
        """
        Return the revision id at the head of a branch.

        Raises:
            SCMError: If the branch cannot be read.
        """
        ...

    def update_file(
        self,
        repo: str,
        branch: str,
        path: str,
        message: str,
        previous_sha: str,
        signature: Signature,
        content: bytes,
    ) -> None:
        """
        Create or update a file on a branch.

        Args:
            repo: Repository identifier.
            branch: Branch to commit to.
            path: Path to the file in the repository.
            message: Commit message.
            previous_sha: Revision id the change is based on; may be empty.
            signature: Author and committer of the commit.
            content: New file body.

        Raises:
            SCMError: If the write is rejected.
        """
        ...

    def delete_file(
        self,
        repo: str,
        branch: str,
        path: str,
        message: str,
        previous_sha: str,
        signature: Signature,
        content: bytes,
    ) -> None:
        """
        Delete a file from a branch.

        Raises:
            SCMError: If the deletion is rejected.
        """
        ...

    def create_pull_request(
        self, repo: str, *, title: str, body: str, source: str, target: str
    ) -> PullRequestResult:
        """
        Open a pull request merging ``source`` into ``target``.

        Returns:
            PullRequestResult with the number and link of the new pull request.

        Raises:
            SCMError: If PR creation fails.
        """
        ...
