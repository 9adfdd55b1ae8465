"""Mock client modules for development and testing."""

from .mock_scm_client import MockSCMClient

__all__ = [
    "MockSCMClient",
]
