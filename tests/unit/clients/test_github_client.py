"""Unit tests for the GithubClient."""

from unittest.mock import MagicMock, patch

import pytest
import requests
from github import GithubException, InputGitAuthor

from src.git_updater.clients import GithubClient
from src.git_updater.config import SCMSettings
from src.git_updater.errors import SCMError, TransportError, is_not_found
from src.git_updater.schemas import Signature


@pytest.fixture
def github_client(scm_settings: SCMSettings) -> GithubClient:
    """Return a GithubClient instance with mocked credentials."""
    return GithubClient(scm_settings)


@pytest.fixture
def mock_repo():
    """Patch authentication and return the mocked repository."""
    with patch(
        "src.git_updater.clients.github_client.GithubClient.authenticate"
    ) as mock_authenticate:
        mock_github = MagicMock()
        repo = MagicMock()
        mock_github.get_repo.return_value = repo
        mock_authenticate.return_value = mock_github
        yield repo


def test_authenticate_requires_token():
    """Test that a missing token is reported before any API call."""
    client = GithubClient(SCMSettings())

    with pytest.raises(ValueError, match="GIT_UPDATER_SCM_TOKEN"):
        client.authenticate()


@patch("src.git_updater.clients.github_client.Github")
def test_authenticate_caches_client(mock_github_class, github_client: GithubClient):
    """Test that the authenticated client is created once."""
    first = github_client.authenticate()
    second = github_client.authenticate()

    assert first is second
    mock_github_class.assert_called_once()
    kwargs = mock_github_class.call_args.kwargs
    assert kwargs["base_url"] == "https://api.github.com"
    assert kwargs["timeout"] == 30


def test_get_file(mock_repo, github_client: GithubClient):
    """Test that get_file returns the decoded body and blob sha."""
    # Arrange
    mock_file = MagicMock()
    mock_file.decoded_content = b"test:\n  image: old-image\n"
    mock_file.sha = "blob-sha"
    mock_repo.get_contents.return_value = mock_file

    # Act
    content = github_client.get_file("org/repo", "main", "path/to/file.yaml")

    # Assert
    assert content.data == b"test:\n  image: old-image\n"
    assert content.sha == "blob-sha"
    assert content.path == "path/to/file.yaml"
    mock_repo.get_contents.assert_called_once_with("path/to/file.yaml", ref="main")


def test_get_file_not_found(mock_repo, github_client: GithubClient):
    """Test that a 404 from GitHub is classified as NOT_FOUND."""
    mock_repo.get_contents.side_effect = GithubException(
        404, {"message": "Not Found"}, None
    )

    with pytest.raises(SCMError) as exc_info:
        github_client.get_file("org/repo", "main", "missing.yaml")

    assert is_not_found(exc_info.value)
    assert str(exc_info.value) == (
        "failed to get file missing.yaml from repo org/repo ref main: "
        "response status 404: Not Found"
    )


def test_get_file_server_error(mock_repo, github_client: GithubClient):
    """Test that other statuses are not classified as NOT_FOUND."""
    mock_repo.get_contents.side_effect = GithubException(500, "oops", None)

    with pytest.raises(SCMError) as exc_info:
        github_client.get_file("org/repo", "main", "file.yaml")

    assert exc_info.value.status_code == 500
    assert not is_not_found(exc_info.value)


def test_get_file_directory(mock_repo, github_client: GithubClient):
    """Test that reading a directory is an error."""
    mock_repo.get_contents.return_value = [MagicMock(), MagicMock()]

    with pytest.raises(SCMError, match="failed to get file"):
        github_client.get_file("org/repo", "main", "dir")


def test_get_file_transport_error(mock_repo, github_client: GithubClient):
    """Test that connection failures become TransportError."""
    mock_repo.get_contents.side_effect = requests.ConnectionError("refused")

    with pytest.raises(TransportError):
        github_client.get_file("org/repo", "main", "file.yaml")


def test_create_branch(mock_repo, github_client: GithubClient):
    """Test that create_branch creates a ref at the given sha."""
    github_client.create_branch("org/repo", "new-branch", "abc123")

    mock_repo.create_git_ref.assert_called_once_with(
        ref="refs/heads/new-branch", sha="abc123"
    )


def test_get_branch_head(mock_repo, github_client: GithubClient):
    """Test that get_branch_head returns the ref's object sha."""
    mock_ref = MagicMock()
    mock_ref.object.sha = "abc123"
    mock_repo.get_git_ref.return_value = mock_ref

    assert github_client.get_branch_head("org/repo", "main") == "abc123"
    mock_repo.get_git_ref.assert_called_once_with("heads/main")


def test_update_file_with_previous_sha(mock_repo, github_client: GithubClient):
    """Test that a known revision updates the file with that sha."""
    signature = Signature(name="Bot", email="bot@example.com")

    github_client.update_file(
        "org/repo", "branch-a", "a.yaml", "update", "blob-sha", signature, b"new"
    )

    mock_repo.update_file.assert_called_once()
    args = mock_repo.update_file.call_args
    assert args.args == ("a.yaml", "update", b"new", "blob-sha")
    assert args.kwargs["branch"] == "branch-a"
    assert isinstance(args.kwargs["author"], InputGitAuthor)
    mock_repo.create_file.assert_not_called()


def test_update_file_without_previous_sha(mock_repo, github_client: GithubClient):
    """Test that an empty revision creates the file."""
    github_client.update_file(
        "org/repo", "main", "a.yaml", "create", "", Signature(), b"new"
    )

    mock_repo.create_file.assert_called_once_with(
        "a.yaml", "create", b"new", branch="main"
    )
    mock_repo.update_file.assert_not_called()


def test_update_file_conflict(mock_repo, github_client: GithubClient):
    """Test that a rejected write carries the upstream status."""
    mock_repo.update_file.side_effect = GithubException(
        409, {"message": "a.yaml does not match blob-sha"}, None
    )

    with pytest.raises(SCMError) as exc_info:
        github_client.update_file(
            "org/repo", "main", "a.yaml", "update", "blob-sha", Signature(), b"new"
        )

    assert exc_info.value.status_code == 409
    assert exc_info.value.response_message == "a.yaml does not match blob-sha"


def test_delete_file(mock_repo, github_client: GithubClient):
    """Test that delete_file passes the revision and branch."""
    github_client.delete_file(
        "org/repo", "branch-a", "a.yaml", "remove", "blob-sha", Signature(), b""
    )

    mock_repo.delete_file.assert_called_once_with(
        "a.yaml", "remove", "blob-sha", branch="branch-a"
    )


def test_create_pull_request(mock_repo, github_client: GithubClient):
    """Test that create_pull_request returns the number and link."""
    mock_pr = MagicMock()
    mock_pr.number = 7
    mock_pr.html_url = "https://github.com/org/repo/pull/7"
    mock_repo.create_pull.return_value = mock_pr

    result = github_client.create_pull_request(
        "org/repo", title="Title", body="Body", source="branch-a", target="main"
    )

    assert result.number == 7
    assert result.link == "https://github.com/org/repo/pull/7"
    mock_repo.create_pull.assert_called_once_with(
        title="Title", body="Body", head="branch-a", base="main"
    )
