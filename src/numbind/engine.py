"""Pure numeric engine: fixed-width addition and Fibonacci terms.

Both operations use unsigned integer semantics. A result that does not fit
in the output width raises ArithmeticOverflowError instead of wrapping.
"""

from __future__ import annotations

from numbind.errors import ArithmeticOverflowError, InvalidInputError

__all__ = [
    "U32_BITS",
    "U64_BITS",
    "U32_MAX",
    "U64_MAX",
    "MAX_FIBONACCI_INDEX",
    "add",
    "fibonacci",
]

U32_BITS = 32
U64_BITS = 64
U32_MAX = 2**U32_BITS - 1
U64_MAX = 2**U64_BITS - 1

# fibonacci(93) == 12200160415121876738 is the last term below 2**64.
MAX_FIBONACCI_INDEX = 93


def _check_unsigned(name: str, value: object, maximum: int, bits: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"'{name}' must be an integer, got {type(value).__name__}")
    if value < 0 or value > maximum:
        raise InvalidInputError(f"'{name}' is outside the u{bits} range: {value}")


def add(a: int, b: int) -> int:
    """Return ``a + b`` as an unsigned 64-bit integer.

    Raises:
        InvalidInputError: If either operand is not a u64 value.
        ArithmeticOverflowError: If the sum exceeds ``U64_MAX``.
    """
    _check_unsigned("a", a, U64_MAX, U64_BITS)
    _check_unsigned("b", b, U64_MAX, U64_BITS)
    total = a + b
    if total > U64_MAX:
        raise ArithmeticOverflowError(operation="add", operands=[a, b], width=U64_BITS)
    return total


def fibonacci(n: int) -> int:
    """Return the nth Fibonacci number, with fibonacci(0) == 0 and fibonacci(1) == 1.

    The index is a u32 and the result a u64, so only indices up to
    ``MAX_FIBONACCI_INDEX`` are computable.

    Raises:
        InvalidInputError: If ``n`` is not a u32 value.
        ArithmeticOverflowError: If ``n > MAX_FIBONACCI_INDEX``.
    """
    _check_unsigned("n", n, U32_MAX, U32_BITS)
    if n > MAX_FIBONACCI_INDEX:
        raise ArithmeticOverflowError(operation="fibonacci", operands=[n], width=U64_BITS)

    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous
