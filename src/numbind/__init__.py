"""numbind - fixed-width addition and Fibonacci exposed to external hosts."""

from __future__ import annotations

# Engine
from numbind.engine import MAX_FIBONACCI_INDEX, U32_MAX, U64_MAX, add, fibonacci

# Boundary
from numbind.types import U32, U64
from numbind.boundary import create_registry, return_message

# Host-facing layer
from numbind.decorator import ExportedFunction, export
from numbind.registry import Registry
from numbind.schema import describe, dump_schemas
from numbind.host import Host
from numbind.config import Config

# Errors
from numbind.errors import (
    ArithmeticOverflowError,
    ConfigError,
    ConfigNotFoundError,
    ExportDefinitionError,
    ExportNotFoundError,
    InvalidInputError,
    NumbindError,
    SchemaValidationError,
)

__version__ = "0.1.0"

__all__ = [
    # Engine
    "add",
    "fibonacci",
    "U32_MAX",
    "U64_MAX",
    "MAX_FIBONACCI_INDEX",
    # Boundary
    "U32",
    "U64",
    "return_message",
    "create_registry",
    # Host-facing layer
    "ExportedFunction",
    "export",
    "Registry",
    "describe",
    "dump_schemas",
    "Host",
    "Config",
    # Errors
    "NumbindError",
    "ArithmeticOverflowError",
    "ConfigError",
    "ConfigNotFoundError",
    "ExportDefinitionError",
    "ExportNotFoundError",
    "InvalidInputError",
    "SchemaValidationError",
]
