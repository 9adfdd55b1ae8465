"""Branch name generation."""

from __future__ import annotations

import random
from typing import Protocol

# Consonants and digits only, so generated suffixes never spell words.
ALPHANUMS = "bcdfghjklmnpqrstvwxz2456789"
DEFAULT_SUFFIX_LENGTH = 5


class NameGenerator(Protocol):
    """Protocol for producing unique names from a prefix."""

    def prefixed_name(self, prefix: str) -> str:
        """Return a name that starts with ``prefix``."""
        ...


class RandomNameGenerator(NameGenerator):
    """Appends a random suffix to the prefix."""

    def __init__(
        self,
        rng: random.Random | None = None,
        length: int = DEFAULT_SUFFIX_LENGTH,
    ) -> None:
        if length < 1:
            raise ValueError("Suffix length must be at least 1.")
        self._rng = rng or random.Random()
        self._length = length

    def prefixed_name(self, prefix: str) -> str:
        suffix = "".join(self._rng.choice(ALPHANUMS) for _ in range(self._length))
        return f"{prefix}{suffix}"


class StaticNameGenerator(NameGenerator):
    """Always appends the same name to the prefix."""

    def __init__(self, name: str) -> None:
        self.name = name

    def prefixed_name(self, prefix: str) -> str:
        return f"{prefix}{self.name}"
