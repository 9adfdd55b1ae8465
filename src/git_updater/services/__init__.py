"""Service modules for applying file updates to remote repositories."""

from .content_updaters import remove_yaml_key, replace_contents, update_yaml
from .updater_service import UpdaterService

__all__ = ["UpdaterService", "replace_contents", "update_yaml", "remove_yaml_key"]
