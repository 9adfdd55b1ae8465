"""Shared test fixtures for all test categories."""

import pytest

from dev.mocks_clients import MockSCMClient
from src.git_updater.config import SCMSettings
from src.git_updater.names import StaticNameGenerator
from src.git_updater.schemas import CommitInput, PullRequestInput
from src.git_updater.services import UpdaterService
from tests.fixtures.repository import (
    TEST_BRANCH,
    TEST_FILE_BODY,
    TEST_FILE_PATH,
    TEST_REPO,
    TEST_SHA,
)


@pytest.fixture
def scm_settings() -> SCMSettings:
    """Provide SCM settings with a fake token."""

    return SCMSettings(
        GIT_UPDATER_SCM_TOKEN="fake-pat",
        GIT_UPDATER_SCM_TIMEOUT_SECONDS=30,
    )


# =============================================================================
# Updater Fixtures (used by services/ tests)
# =============================================================================


@pytest.fixture
def mock_scm() -> MockSCMClient:
    """In-memory SCM client seeded with one YAML file on the main branch."""

    client = MockSCMClient()
    client.add_file_contents(TEST_REPO, TEST_FILE_PATH, TEST_BRANCH, TEST_FILE_BODY)
    client.add_branch_head(TEST_REPO, TEST_BRANCH, TEST_SHA)
    return client


@pytest.fixture
def updater(mock_scm: MockSCMClient) -> UpdaterService:
    """UpdaterService whose generated branch names end in 'a'."""

    return UpdaterService(mock_scm, StaticNameGenerator("a"))


@pytest.fixture
def commit_input() -> CommitInput:
    """A plain update of the seeded file on a generated branch."""

    return CommitInput(
        repo=TEST_REPO,
        filename=TEST_FILE_PATH,
        branch=TEST_BRANCH,
        branch_generate_name="test-branch-",
        commit_message="just a test commit",
    )


@pytest.fixture
def pull_request_input() -> PullRequestInput:
    """A pull request from the generated branch into main."""

    return PullRequestInput(
        repo=TEST_REPO,
        new_branch="test-branch-a",
        source_branch=TEST_BRANCH,
        title="This is a test PR",
        body="This is the body",
    )
