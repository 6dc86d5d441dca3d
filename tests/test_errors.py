"""Tests for the error hierarchy."""

from __future__ import annotations

import pytest

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


class TestNumbindError:
    """Tests for the base error."""

    def test_fields(self):
        err = NumbindError("msg", details={"k": 1}, trace_id="t-1")
        assert err.message == "msg"
        assert err.details == {"k": 1}
        assert err.trace_id == "t-1"
        assert err.timestamp.endswith("+00:00")

    def test_str_includes_code(self):
        assert str(InvalidInputError("bad n")) == "[INVALID_INPUT] bad n"

    def test_details_default_empty(self):
        assert NumbindError("m").details == {}


class TestArithmeticOverflowError:
    """Tests for ArithmeticOverflowError."""

    def test_message_and_properties(self):
        err = ArithmeticOverflowError(operation="fibonacci", operands=[94], width=64)
        assert str(err) == "[ARITHMETIC_OVERFLOW] fibonacci(94) overflows u64"
        assert err.operation == "fibonacci"
        assert err.operands == [94]
        assert err.width == 64

    def test_trace_id_passthrough(self):
        err = ArithmeticOverflowError(operation="add", operands=[1, 2], width=64, trace_id="abc")
        assert err.trace_id == "abc"


@pytest.mark.parametrize(
    "err, code",
    [
        (ArithmeticOverflowError(operation="add", operands=[1, 1], width=64), "ARITHMETIC_OVERFLOW"),
        (InvalidInputError("x"), "INVALID_INPUT"),
        (SchemaValidationError("x", []), "SCHEMA_VALIDATION_ERROR"),
        (ExportNotFoundError("x"), "EXPORT_NOT_FOUND"),
        (ExportDefinitionError("f", "why"), "EXPORT_DEFINITION_ERROR"),
        (ConfigError("x"), "CONFIG_INVALID"),
        (ConfigNotFoundError("x.yaml"), "CONFIG_NOT_FOUND"),
    ],
)
def test_codes_and_hierarchy(err, code):
    assert err.code == code
    assert isinstance(err, NumbindError)


def test_config_not_found_is_config_error():
    assert issubclass(ConfigNotFoundError, ConfigError)


def test_schema_validation_error_carries_errors():
    err = SchemaValidationError("Input validation failed", [{"field": "n", "code": "missing", "message": "Field required"}])
    assert err.errors[0]["field"] == "n"
    assert err.details["errors"] is err.errors


def test_export_not_found_carries_id():
    assert ExportNotFoundError("subtract").export_id == "subtract"
