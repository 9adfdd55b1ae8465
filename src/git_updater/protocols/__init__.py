"""Protocol definitions for core interfaces maintained in this package."""

from .scm_client_protocol import SCMClientProtocol
from .updater_protocol import UpdaterProtocol

__all__ = [
    "SCMClientProtocol",
    "UpdaterProtocol",
]
