"""Client for GitHub API operations."""

from contextlib import contextmanager
from typing import Iterator, Optional

import requests
from github import Auth, Github, GithubException, InputGitAuthor
from github.Repository import Repository

from src.git_updater.config import SCMSettings
from src.git_updater.errors import SCMError, TransportError
from src.git_updater.protocols import SCMClientProtocol
from src.git_updater.schemas import FileContent, PullRequestResult, Signature


@contextmanager
def _translate_errors(message: str) -> Iterator[None]:
    """Convert PyGithub and transport failures into SCM errors."""
    try:
        yield
    except GithubException as exc:
        raise SCMError(message, exc.status, _response_message(exc)) from exc
    except requests.RequestException as exc:
        raise TransportError(f"{message}: {exc}") from exc


def _response_message(exc: GithubException) -> str:
    if isinstance(exc.data, dict):
        return str(exc.data.get("message", ""))
    return str(exc.data or "")


class GithubClient(SCMClientProtocol):
    """
    Client for GitHub API operations.

    This client handles GitHub Personal Access Token authentication and maps
    the contents, git refs and pull request APIs onto the SCM client protocol.
    """

    def __init__(self, settings: SCMSettings):
        """Initialize the GitHub client with settings."""
        self.settings = settings
        self._github_client: Optional[Github] = None

    def authenticate(self) -> Github:
        """
        Authenticate using Personal Access Token.

        Returns:
            Authenticated GitHub API client.

        Raises:
            ValueError: If the token is not configured.
        """
        if self._github_client is not None:
            return self._github_client

        token = self.settings.token
        if token is None or not token.get_secret_value():
            raise ValueError(
                "GitHub Personal Access Token not configured. Set GIT_UPDATER_SCM_TOKEN."
            )

        self._github_client = Github(
            auth=Auth.Token(token.get_secret_value()),
            base_url=self.settings.api_url_for("github"),
            timeout=int(self.settings.timeout_seconds),
        )
        return self._github_client

    def get_file(self, repo: str, ref: str, path: str) -> FileContent:
        """Read a file at ``ref`` via the contents API."""
        with _translate_errors(f"failed to get file {path} from repo {repo} ref {ref}"):
            content = self._get_repo(repo).get_contents(path, ref=ref)

        if isinstance(content, list):
            raise SCMError(
                f"failed to get file {path} from repo {repo} ref {ref}",
                response_message="path is a directory",
            )
        return FileContent(path=path, data=content.decoded_content, sha=content.sha)

    def create_branch(self, repo: str, branch: str, sha: str) -> None:
        """Create ``refs/heads/<branch>`` pointing at ``sha``."""
        with _translate_errors(f"failed to create branch {branch} in repo {repo}"):
            self._get_repo(repo).create_git_ref(ref=f"refs/heads/{branch}", sha=sha)

    def get_branch_head(self, repo: str, branch: str) -> str:
        """Return the commit SHA at the head of ``branch``."""
        with _translate_errors(f"failed to get branch {branch} in repo {repo}"):
            ref = self._get_repo(repo).get_git_ref(f"heads/{branch}")
            return ref.object.sha

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
        Create or update a file via the contents API.

        The file is updated when ``previous_sha`` is set and created otherwise.
        """
        with _translate_errors(
            f"failed to update file {path} in repo {repo} branch {branch}"
        ):
            github_repo = self._get_repo(repo)
            kwargs = self._commit_kwargs(branch, signature)
            if previous_sha:
                github_repo.update_file(path, message, content, previous_sha, **kwargs)
            else:
                github_repo.create_file(path, message, content, **kwargs)

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
        """Delete a file via the contents API."""
        with _translate_errors(
            f"failed to delete file {path} in repo {repo} branch {branch}"
        ):
            self._get_repo(repo).delete_file(
                path, message, previous_sha, **self._commit_kwargs(branch, signature)
            )

    def create_pull_request(
        self, repo: str, *, title: str, body: str, source: str, target: str
    ) -> PullRequestResult:
        """Open a pull request merging ``source`` into ``target``."""
        with _translate_errors(f"failed to create pull request in repo {repo}"):
            pr = self._get_repo(repo).create_pull(
                title=title, body=body, head=source, base=target
            )
        return PullRequestResult(number=pr.number, link=pr.html_url)

    def _get_repo(self, repo: str) -> Repository:
        return self.authenticate().get_repo(repo)

    def _commit_kwargs(self, branch: str, signature: Signature) -> dict:
        kwargs = {"branch": branch}
        if not signature.is_empty():
            author = InputGitAuthor(signature.name, signature.email)
            kwargs["author"] = author
            kwargs["committer"] = author
        return kwargs
