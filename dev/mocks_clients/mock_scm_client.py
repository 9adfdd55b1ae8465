"""In-memory SCM client for offline development and testing."""

import hashlib
from dataclasses import dataclass
from http import HTTPStatus
from typing import Dict, List, Optional, Tuple

from src.git_updater.errors import SCMError
from src.git_updater.protocols import SCMClientProtocol
from src.git_updater.schemas import FileContent, PullRequestResult, Signature

FileKey = Tuple[str, str, str]


def blob_sha(data: bytes) -> str:
    """Return the git blob SHA for ``data``."""
    header = f"blob {len(data)}\0".encode()
    return hashlib.sha1(header + data).hexdigest()


@dataclass
class FileWrite:
    """A recorded update or delete call."""

    repo: str
    branch: str
    path: str
    message: str
    previous_sha: str
    signature: Signature
    content: bytes


@dataclass
class CreatedPullRequest:
    """A recorded pull request."""

    repo: str
    title: str
    body: str
    source: str
    target: str


class MockSCMClient(SCMClientProtocol):
    """
    Mock implementation of the SCM client backed by dictionaries.

    Files and branch heads are seeded with ``add_file_contents`` and
    ``add_branch_head``. Setting one of the ``*_error`` attributes makes the
    matching call raise it. Every mutating call is recorded so tests can
    assert on what reached the remote.
    """

    def __init__(self) -> None:
        self.files: Dict[FileKey, bytes] = {}
        self.branch_heads: Dict[Tuple[str, str], str] = {}
        self.created_branches: List[Tuple[str, str, str]] = []
        self.updated_files: List[FileWrite] = []
        self.deleted_files: List[FileWrite] = []
        self.pull_requests: List[CreatedPullRequest] = []
        self.calls: List[str] = []

        self.get_file_error: Optional[Exception] = None
        self.get_branch_head_error: Optional[Exception] = None
        self.create_branch_error: Optional[Exception] = None
        self.update_file_error: Optional[Exception] = None
        self.delete_file_error: Optional[Exception] = None
        self.create_pull_request_error: Optional[Exception] = None

    def add_file_contents(self, repo: str, path: str, ref: str, data: bytes) -> None:
        """Seed a file at ``ref``."""
        self.files[(repo, path, ref)] = data

    def add_branch_head(self, repo: str, branch: str, sha: str) -> None:
        """Seed the head revision of a branch."""
        self.branch_heads[(repo, branch)] = sha

    def get_updated_contents(self, repo: str, path: str, branch: str) -> bytes:
        """Return the last body written to ``path`` on ``branch``, or b""."""
        for write in reversed(self.updated_files):
            if (write.repo, write.path, write.branch) == (repo, path, branch):
                return write.content
        return b""

    def get_file(self, repo: str, ref: str, path: str) -> FileContent:
        self.calls.append("get_file")
        if self.get_file_error is not None:
            raise self.get_file_error
        try:
            data = self.files[(repo, path, ref)]
        except KeyError:
            raise SCMError(
                f"failed to get file {path} from repo {repo} ref {ref}",
                HTTPStatus.NOT_FOUND,
                "Not Found",
            ) from None
        return FileContent(path=path, data=data, sha=blob_sha(data))

    def create_branch(self, repo: str, branch: str, sha: str) -> None:
        self.calls.append("create_branch")
        if self.create_branch_error is not None:
            raise self.create_branch_error
        self.created_branches.append((repo, branch, sha))
        self.branch_heads[(repo, branch)] = sha

    def get_branch_head(self, repo: str, branch: str) -> str:
        self.calls.append("get_branch_head")
        if self.get_branch_head_error is not None:
            raise self.get_branch_head_error
        try:
            return self.branch_heads[(repo, branch)]
        except KeyError:
            raise SCMError(
                f"failed to get branch {branch} in repo {repo}",
                HTTPStatus.NOT_FOUND,
                "Branch Not Found",
            ) from None

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
        self.calls.append("update_file")
        if self.update_file_error is not None:
            raise self.update_file_error
        self.updated_files.append(
            FileWrite(repo, branch, path, message, previous_sha, signature, content)
        )
        self.files[(repo, path, branch)] = content

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
        self.calls.append("delete_file")
        if self.delete_file_error is not None:
            raise self.delete_file_error
        self.deleted_files.append(
            FileWrite(repo, branch, path, message, previous_sha, signature, content)
        )
        self.files.pop((repo, path, branch), None)

    def create_pull_request(
        self, repo: str, *, title: str, body: str, source: str, target: str
    ) -> PullRequestResult:
        self.calls.append("create_pull_request")
        if self.create_pull_request_error is not None:
            raise self.create_pull_request_error
        self.pull_requests.append(
            CreatedPullRequest(repo, title, body, source, target)
        )
        number = len(self.pull_requests)
        return PullRequestResult(
            number=number, link=f"https://example.com/pull-request/{number}"
        )

    def assert_branch_created(self, repo: str, branch: str, sha: str) -> None:
        assert (repo, branch, sha) in self.created_branches, (
            f"branch {branch} at {sha} not created in {repo}: {self.created_branches}"
        )

    def assert_no_branches_created(self) -> None:
        assert not self.created_branches, (
            f"branches unexpectedly created: {self.created_branches}"
        )

    def assert_pull_request_created(
        self, repo: str, *, title: str, body: str, source: str, target: str
    ) -> None:
        expected = CreatedPullRequest(repo, title, body, source, target)
        assert expected in self.pull_requests, (
            f"pull request {expected} not created: {self.pull_requests}"
        )

    def assert_no_pull_requests_created(self) -> None:
        assert not self.pull_requests, (
            f"pull requests unexpectedly created: {self.pull_requests}"
        )

    def assert_no_writes(self) -> None:
        assert not self.updated_files and not self.deleted_files, (
            f"unexpected writes: {self.updated_files + self.deleted_files}"
        )
