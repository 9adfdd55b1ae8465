"""Client modules for remote repository APIs."""

from .github_client import GithubClient
from .gitlab_client import GitlabClient

__all__ = [
    "GithubClient",
    "GitlabClient",
]
