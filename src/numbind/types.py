"""Fixed-width integer types used at the host boundary.

These are ``Annotated`` ints, so they read as plain ``int`` to Python while
the generated pydantic models enforce the unsigned range and reject strings,
floats and bools coming from the host.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from numbind.engine import U32_MAX, U64_MAX

__all__ = ["U32", "U64"]

U32 = Annotated[int, Field(strict=True, ge=0, le=U32_MAX)]
U64 = Annotated[int, Field(strict=True, ge=0, le=U64_MAX)]
