"""Service for committing a single-file change to a remote repository."""

import logging
from typing import Optional

from src.git_updater.errors import (
    NothingToRemoveError,
    SCMError,
    TransformError,
    UpdateError,
    is_not_found,
)
from src.git_updater.names import NameGenerator, RandomNameGenerator
from src.git_updater.protocols import SCMClientProtocol, UpdaterProtocol
from src.git_updater.protocols.updater_protocol import ContentUpdater
from src.git_updater.schemas import (
    CommitInput,
    FileContent,
    PullRequestInput,
    PullRequestResult,
)

logger = logging.getLogger(__name__)


class UpdaterService(UpdaterProtocol):
    """
    Fetches a file, transforms it and commits the result, optionally on a new branch.

    Each call is a sequence of independent remote calls. Nothing is rolled
    back when a later call fails: a branch created before a failed write
    stays on the remote.
    """

    def __init__(
        self,
        scm_client: SCMClientProtocol,
        name_generator: Optional[NameGenerator] = None,
    ) -> None:
        """Initialize service with an SCM client and a branch name generator."""
        self._scm_client = scm_client
        self._name_generator = name_generator or RandomNameGenerator()

    def apply_update_to_file(
        self, commit_input: CommitInput, updater: ContentUpdater
    ) -> str:
        """
        Fetch the file, pass it to ``updater`` and commit the result.

        Args:
            commit_input: Describes the file, the base branch and the commit.
            updater: Transforms the current body into the new body. It
                receives an empty body when a missing file is created.

        Returns:
            Name of the branch the change was committed to.

        Raises:
            SCMError: If the file cannot be read. A missing file is only
                tolerated when ``create_missing`` or ``remove_file`` is set.
            NothingToRemoveError: If ``remove_file`` is set and the file is absent.
            TransformError: If ``updater`` raises.
            UpdateError: If a later remote call fails.
        """
        current, missing = self._get_current_file(commit_input)
        if missing and commit_input.remove_file:
            raise NothingToRemoveError(commit_input.filename, commit_input.branch)

        current_sha = current.sha
        if current_sha:
            logger.info(
                "got existing file %s with sha %s", commit_input.filename, current_sha
            )
        elif missing:
            current_sha = self._get_fallback_sha(commit_input)

        try:
            updated = updater(current.data)
        except Exception as exc:
            raise TransformError(exc) from exc

        return self._apply_update(commit_input, current_sha, updated)

    def create_pr(self, pr_input: PullRequestInput) -> PullRequestResult:
        """
        Open a pull request from the change branch into ``pr_input.source_branch``.

        The change branch is ``pr_input.new_branch`` or, when unset, a name
        generated from ``pr_input.branch_generate_name``. Its existence is not
        checked.
        """
        new_branch = pr_input.new_branch or self._name_generator.prefixed_name(
            pr_input.branch_generate_name
        )
        try:
            pull_request = self._scm_client.create_pull_request(
                pr_input.repo,
                title=pr_input.title,
                body=pr_input.body,
                source=new_branch,
                target=pr_input.source_branch,
            )
        except SCMError as exc:
            raise UpdateError("create a pull request", exc) from exc

        logger.info(
            "created pull request %s: %s", pull_request.number, pull_request.link
        )
        return pull_request

    def _get_current_file(
        self, commit_input: CommitInput
    ) -> tuple[FileContent, bool]:
        try:
            current = self._scm_client.get_file(
                commit_input.repo, commit_input.branch, commit_input.filename
            )
        except SCMError as exc:
            if not is_not_found(exc) or not commit_input.is_file_operation:
                logger.info("failed to get file from repo: %s", exc)
                raise
            return FileContent(path=commit_input.filename), True
        return current, False

    def _get_fallback_sha(self, commit_input: CommitInput) -> str:
        try:
            return self._scm_client.get_branch_head(
                commit_input.repo, commit_input.branch
            )
        except SCMError as exc:
            logger.warning(
                "unable to get parent sha for branch %s, it may still succeed: %s",
                commit_input.branch,
                exc,
            )
            return ""

    def _apply_update(
        self, commit_input: CommitInput, current_sha: str, new_body: bytes
    ) -> str:
        try:
            branch_sha = self._scm_client.get_branch_head(
                commit_input.repo, commit_input.branch
            )
        except SCMError as exc:
            raise UpdateError("get branch head", exc) from exc

        branch = self._create_branch_if_necessary(commit_input, branch_sha)

        if commit_input.remove_file:
            try:
                self._scm_client.delete_file(
                    commit_input.repo,
                    branch,
                    commit_input.filename,
                    commit_input.commit_message,
                    current_sha,
                    commit_input.signature,
                    new_body,
                )
            except SCMError as exc:
                raise UpdateError("delete file", exc) from exc
            logger.info("deleted file %s on branch %s", commit_input.filename, branch)
            return branch

        try:
            self._scm_client.update_file(
                commit_input.repo,
                branch,
                commit_input.filename,
                commit_input.commit_message,
                current_sha,
                commit_input.signature,
                new_body,
            )
        except SCMError as exc:
            raise UpdateError("update file", exc) from exc
        logger.info("updated file %s on branch %s", commit_input.filename, branch)
        return branch

    def _create_branch_if_necessary(
        self, commit_input: CommitInput, source_sha: str
    ) -> str:
        if commit_input.disable_pr_creation:
            logger.info(
                "PR creation disabled, committing directly to branch %s",
                commit_input.branch,
            )
            return commit_input.branch

        branch = self._name_generator.prefixed_name(commit_input.branch_generate_name)
        logger.info("generating new branch %s", branch)
        try:
            self._scm_client.create_branch(commit_input.repo, branch, source_sha)
        except SCMError as exc:
            raise UpdateError("create branch", exc) from exc
        logger.info("created branch %s at %s", branch, source_sha)
        return branch
