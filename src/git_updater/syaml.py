"""Dotted key-path editing of YAML documents."""

from __future__ import annotations

from typing import Any, List

import yaml

APPEND_INDEX = "-1"


class SyamlError(ValueError):
    """Raised when a YAML body cannot be parsed or the path cannot be applied."""


def set_bytes(body: bytes, path: str, value: Any) -> bytes:
    """
    Set the value at a dotted key path in a YAML body.

    Intermediate mappings are created as needed. Integer segments index
    into sequences and ``-1`` as the final segment appends to one.

        set_bytes(b"test:\\n  image: old\\n", "test.image", "new")
    """
    segments = split_path(path)
    document = _load(body)
    if document is None:
        document = {}

    parent = document
    for position, segment in enumerate(segments[:-1]):
        next_segment = segments[position + 1]
        child = _get_child(parent, segment, path)
        if child is None:
            child = [] if next_segment == APPEND_INDEX else {}
            _set_child(parent, segment, child, path)
        elif not isinstance(child, (dict, list)):
            raise SyamlError(f"cannot set '{path}': '{segment}' is a scalar value")
        parent = child

    _set_child(parent, segments[-1], value, path)
    return _dump(document)


def delete_bytes(body: bytes, path: str) -> bytes:
    """
    Remove the key at a dotted key path in a YAML body.

    A path that does not exist leaves the document unchanged.
    """
    segments = split_path(path)
    document = _load(body)
    if document is None:
        return _dump({})

    parent = document
    for segment in segments[:-1]:
        child = _get_child(parent, segment, path)
        if not isinstance(child, (dict, list)):
            return _dump(document)
        parent = child

    last = segments[-1]
    if isinstance(parent, dict):
        key = _mapping_key(parent, last)
        if key in parent:
            del parent[key]
    elif isinstance(parent, list):
        index = _sequence_index(last)
        if index is not None and -len(parent) <= index < len(parent):
            del parent[index]
    else:
        raise SyamlError(f"cannot delete '{path}' from a scalar document")
    return _dump(document)


def split_path(path: str) -> List[str]:
    """Split a dotted path into segments, honouring ``\\.`` escapes."""
    if not path:
        raise SyamlError("path must not be empty")

    segments: List[str] = []
    current: List[str] = []
    escaped = False
    for char in path:
        if escaped:
            current.append(char)
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == ".":
            segments.append("".join(current))
            current = []
        else:
            current.append(char)
    if escaped:
        current.append("\\")
    segments.append("".join(current))

    if any(segment == "" for segment in segments):
        raise SyamlError(f"path '{path}' contains an empty segment")
    return segments


def _load(body: bytes) -> Any:
    try:
        return yaml.safe_load(body) if body else None
    except yaml.YAMLError as exc:
        raise SyamlError(f"failed to parse YAML: {exc}") from exc


def _dump(document: Any) -> bytes:
    return yaml.safe_dump(
        document, default_flow_style=False, sort_keys=True, allow_unicode=True
    ).encode("utf-8")


def _mapping_key(mapping: dict, segment: str) -> Any:
    if segment not in mapping and segment.lstrip("-").isdigit():
        numeric = int(segment)
        if numeric in mapping:
            return numeric
    return segment


def _sequence_index(segment: str) -> int | None:
    try:
        return int(segment)
    except ValueError:
        return None


def _get_child(parent: Any, segment: str, path: str) -> Any:
    if isinstance(parent, dict):
        return parent.get(_mapping_key(parent, segment))
    if isinstance(parent, list):
        index = _sequence_index(segment)
        if index is None:
            raise SyamlError(f"'{segment}' in '{path}' is not a sequence index")
        if 0 <= index < len(parent):
            return parent[index]
        return None
    raise SyamlError(f"cannot traverse '{path}': document is a scalar value")


def _set_child(parent: Any, segment: str, value: Any, path: str) -> None:
    if isinstance(parent, dict):
        parent[_mapping_key(parent, segment)] = value
        return
    if isinstance(parent, list):
        index = _sequence_index(segment)
        if index is None:
            raise SyamlError(f"'{segment}' in '{path}' is not a sequence index")
        if index == -1 or index == len(parent):
            parent.append(value)
        elif 0 <= index < len(parent):
            parent[index] = value
        elif index > len(parent):
            parent.extend([None] * (index - len(parent)))
            parent.append(value)
        else:
            raise SyamlError(f"sequence index {index} in '{path}' is out of range")
        return
    raise SyamlError(f"cannot set '{path}': document is a scalar value")
