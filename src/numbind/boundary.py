"""Entry points exposed to external hosts.

These functions only translate between host values and the engine: ``add``
passes its operands through unchanged and ``return_message`` renders the
Fibonacci result as text. Neither logs nor keeps state.
"""

from __future__ import annotations

from numbind import engine
from numbind.decorator import export
from numbind.registry import Registry
from numbind.types import U32, U64

__all__ = ["add", "return_message", "create_registry", "EXPORTS"]


@export(id="add", tags=["math"], may_overflow=True)
def add(left: U64, right: U64) -> U64:
    """Add two unsigned 64-bit integers."""
    return engine.add(left, right)


@export(id="return_message", tags=["math", "fibonacci"], may_overflow=True)
def return_message(n: U32) -> str:
    """Describe the nth Fibonacci number in a sentence."""
    return f"The fibonacci of {n} is {engine.fibonacci(n)}."


EXPORTS = (add, return_message)


def create_registry() -> Registry:
    """Return a new Registry holding ``add`` and ``return_message``.

    Each call builds a fresh registry, so hosts never share registration state.
    """
    registry = Registry()
    for func in EXPORTS:
        registry.register(func.export)
    return registry
