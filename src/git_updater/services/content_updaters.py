"""Reusable ContentUpdater building blocks."""

from typing import Any

from src.git_updater import syaml
from src.git_updater.protocols.updater_protocol import ContentUpdater


def replace_contents(body: bytes) -> ContentUpdater:
    """Return a ContentUpdater that replaces the file with ``body``."""

    def _replace(_: bytes) -> bytes:
        return body

    return _replace


def update_yaml(key: str, new_value: Any) -> ContentUpdater:
    """
    Return a ContentUpdater that sets a key in a YAML file.

    The key can be a dotted path:

        update_yaml("test.image", "new-image")
    """

    def _update(body: bytes) -> bytes:
        return syaml.set_bytes(body, key, new_value)

    return _update


def remove_yaml_key(key: str) -> ContentUpdater:
    """
    Return a ContentUpdater that removes a key from a YAML file.

    The key can be a dotted path:

        remove_yaml_key("test.image")
    """

    def _remove(body: bytes) -> bytes:
        return syaml.delete_bytes(body, key)

    return _remove
