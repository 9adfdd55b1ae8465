"""Dependency injection container for the updater."""

from typing import Optional

from src.git_updater.clients import GithubClient, GitlabClient
from src.git_updater.config import scm_settings, updater_settings
from src.git_updater.names import NameGenerator, RandomNameGenerator
from src.git_updater.protocols import SCMClientProtocol, UpdaterProtocol
from src.git_updater.schemas import CommitInput, Signature
from src.git_updater.services import UpdaterService


class DependencyContainer:
    """Container for managing updater dependencies with lazy instantiation."""

    def __init__(self):
        """Initialize the container with empty caches."""
        self._scm_client: Optional[SCMClientProtocol] = None
        self._name_generator: Optional[NameGenerator] = None
        self._updater: Optional[UpdaterProtocol] = None

    def get_scm_client(self) -> SCMClientProtocol:
        """
        Get the SCM client instance.

        Returns MockSCMClient if GIT_UPDATER_USE_MOCK_SCM=True, otherwise the
        client for the configured provider.
        """
        if self._scm_client is None:
            if updater_settings.use_mock_scm:
                from dev.mocks_clients import MockSCMClient

                self._scm_client = MockSCMClient()
            elif updater_settings.scm_provider == "github":
                self._scm_client = GithubClient(scm_settings)
            elif updater_settings.scm_provider == "gitlab":
                self._scm_client = GitlabClient(scm_settings)
            else:
                raise ValueError(
                    f"Unsupported SCM provider: {updater_settings.scm_provider}"
                )
        return self._scm_client

    def get_name_generator(self) -> NameGenerator:
        """Get the branch name generator."""
        if self._name_generator is None:
            self._name_generator = RandomNameGenerator()
        return self._name_generator

    def get_updater(self) -> UpdaterProtocol:
        """Get the updater service wired to the SCM client."""
        if self._updater is None:
            self._updater = UpdaterService(
                self.get_scm_client(), self.get_name_generator()
            )
        return self._updater

    def get_signature(self) -> Signature:
        """Return the configured commit author."""
        return Signature(
            name=updater_settings.commit_author_name,
            email=updater_settings.commit_author_email,
        )

    def build_commit_input(self, **fields) -> CommitInput:
        """Build a CommitInput, filling the branch prefix and author from settings."""
        fields.setdefault("branch_generate_name", updater_settings.branch_prefix)
        fields.setdefault("signature", self.get_signature())
        return CommitInput(**fields)


# Global container instance
_container: Optional[DependencyContainer] = None


def get_container() -> DependencyContainer:
    """Get the global dependency container instance."""
    global _container
    if _container is None:
        _container = DependencyContainer()
    return _container
