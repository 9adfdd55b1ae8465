"""Unit test specific fixtures."""

import pytest


@pytest.fixture(autouse=True)
def set_unit_test_env(monkeypatch):
    """Setup environment variables for unit tests.

    Note: Monkeypatch only works for in-process execution.
    For subprocess-based tests, use subprocess env parameter.
    """
    monkeypatch.delenv("GIT_UPDATER_SCM_TOKEN", raising=False)
    monkeypatch.delenv("GIT_UPDATER_SCM_API_URL", raising=False)
    monkeypatch.setenv("GIT_UPDATER_USE_MOCK_SCM", "true")
