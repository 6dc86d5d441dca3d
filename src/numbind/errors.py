"""Exceptions raised by numbind.

Every error carries a stable ``code`` a host can branch on and a ``details``
dict with the values that caused it.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "NumbindError",
    "ArithmeticOverflowError",
    "InvalidInputError",
    "SchemaValidationError",
    "ExportNotFoundError",
    "ExportDefinitionError",
    "ConfigError",
    "ConfigNotFoundError",
]


class NumbindError(Exception):
    """Base class for numbind errors.

    Subclasses set ``code``. ``trace_id`` is filled in by the Host when the
    error is raised during a host call.
    """

    code = "NUMBIND_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None, trace_id: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.trace_id = trace_id
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ArithmeticOverflowError(NumbindError):
    """A result does not fit in the fixed output width."""

    code = "ARITHMETIC_OVERFLOW"

    def __init__(self, operation: str, operands: list[int], width: int, **kwargs: Any) -> None:
        rendered = ", ".join(str(op) for op in operands)
        super().__init__(
            f"{operation}({rendered}) overflows u{width}",
            details={"operation": operation, "operands": list(operands), "width": width},
            **kwargs,
        )

    @property
    def operation(self) -> str:
        return self.details["operation"]

    @property
    def operands(self) -> list[int]:
        return self.details["operands"]

    @property
    def width(self) -> int:
        return self.details["width"]


class InvalidInputError(NumbindError):
    """An argument has the wrong type or is outside its fixed-width range."""

    code = "INVALID_INPUT"


class SchemaValidationError(NumbindError):
    """Host values do not match an export's input or output model.

    ``details["errors"]`` holds one ``{"field", "code", "message"}`` dict per
    failing field.
    """

    code = "SCHEMA_VALIDATION_ERROR"

    def __init__(self, message: str, errors: list[dict[str, str]], **kwargs: Any) -> None:
        super().__init__(message, details={"errors": errors}, **kwargs)

    @property
    def errors(self) -> list[dict[str, str]]:
        return self.details["errors"]


class ExportNotFoundError(NumbindError):
    """No export is registered under the requested id."""

    code = "EXPORT_NOT_FOUND"

    def __init__(self, export_id: str, **kwargs: Any) -> None:
        super().__init__(f"Export not found: {export_id!r}", details={"export_id": export_id}, **kwargs)

    @property
    def export_id(self) -> str:
        return self.details["export_id"]


class ExportDefinitionError(NumbindError):
    """A function cannot be exported because its signature is not fully annotated."""

    code = "EXPORT_DEFINITION_ERROR"

    def __init__(self, function_name: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Cannot export {function_name}(): {reason}",
            details={"function_name": function_name, "reason": reason},
            **kwargs,
        )


class ConfigError(NumbindError):
    """A configuration file cannot be parsed."""

    code = "CONFIG_INVALID"


class ConfigNotFoundError(ConfigError):
    """A configuration file does not exist."""

    code = "CONFIG_NOT_FOUND"

    def __init__(self, path: str, **kwargs: Any) -> None:
        super().__init__(f"Configuration file not found: {path}", details={"path": path}, **kwargs)
