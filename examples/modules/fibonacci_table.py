"""Decorated export example: the first ``count`` Fibonacci terms."""

from numbind import engine
from numbind.decorator import export
from numbind.types import U32, U64


@export(id="fibonacci_table", tags=["math", "fibonacci"])
def fibonacci_table(count: U32) -> list[U64]:
    """List the first ``count`` Fibonacci terms, stopping at the u64 limit."""
    return [engine.fibonacci(i) for i in range(min(count, engine.MAX_FIBONACCI_INDEX + 1))]
