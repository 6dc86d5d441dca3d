"""Shared fixtures for the numbind test suite."""

from __future__ import annotations

import pytest

from numbind.boundary import create_registry
from numbind.decorator import export
from numbind.host import Host
from numbind.registry import Registry
from numbind.types import U64


@export(id="mislabeled")
def mislabeled(n: U64) -> U64:
    """Returns text although the annotation promises a u64."""
    return f"{n}"  # type: ignore[return-value]


@export(id="explode")
def explode(n: U64) -> U64:
    """Fails with an error numbind does not define."""
    raise RuntimeError(f"export execution failed for {n}")


@pytest.fixture
def registry() -> Registry:
    """A registry holding the boundary entry points ``add`` and ``return_message``."""
    return create_registry()


@pytest.fixture
def host(registry: Registry) -> Host:
    """A Host over the boundary registry with default configuration."""
    return Host(registry=registry)


@pytest.fixture
def faulty_registry() -> Registry:
    """A registry of exports that misbehave: ``mislabeled`` and ``explode``."""
    registry = Registry()
    registry.register(mislabeled.export)
    registry.register(explode.export)
    return registry
