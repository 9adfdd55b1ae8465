"""Unit tests for branch name generation."""

import random

import pytest

from src.git_updater.names import ALPHANUMS, RandomNameGenerator, StaticNameGenerator


def test_random_name_generator_prefixes_suffix():
    """Test that generated names start with the prefix and use the alphabet."""
    name = RandomNameGenerator().prefixed_name("gitops-")

    assert name.startswith("gitops-")
    suffix = name[len("gitops-") :]
    assert len(suffix) == 5
    assert all(char in ALPHANUMS for char in suffix)


def test_random_name_generator_is_deterministic_with_seed():
    """Test that the same seed yields the same sequence of names."""
    first = RandomNameGenerator(random.Random(42))
    second = RandomNameGenerator(random.Random(42))

    assert [first.prefixed_name("p-") for _ in range(3)] == [
        second.prefixed_name("p-") for _ in range(3)
    ]


def test_random_name_generator_empty_prefix():
    """Test that an empty prefix still produces a usable name."""
    name = RandomNameGenerator(length=8).prefixed_name("")

    assert len(name) == 8


def test_random_name_generator_rejects_empty_suffix():
    """Test that a zero-length suffix is rejected."""
    with pytest.raises(ValueError):
        RandomNameGenerator(length=0)


def test_static_name_generator():
    """Test that the static generator appends its fixed name."""
    assert StaticNameGenerator("a").prefixed_name("test-branch-") == "test-branch-a"
