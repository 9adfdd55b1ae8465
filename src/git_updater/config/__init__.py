"""Configuration module for the git-updater project."""

from .scm_settings import SCMSettings
from .updater_settings import UpdaterSettings

# Singleton instances for direct access
updater_settings = UpdaterSettings()
scm_settings = SCMSettings()

__all__ = [
    # Classes
    "SCMSettings",
    "UpdaterSettings",
    # Singleton instances
    "updater_settings",
    "scm_settings",
]
