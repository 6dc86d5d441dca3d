"""Calling exports the way an external host does."""

from __future__ import annotations

import logging
import time
import uuid
from typing import Any

import pydantic

from numbind.config import Config
from numbind.decorator import ExportedFunction
from numbind.errors import InvalidInputError, NumbindError, SchemaValidationError
from numbind.registry import Registry

__all__ = ["Host"]

logger = logging.getLogger(__name__)


def _field_errors(exc: pydantic.ValidationError) -> list[dict[str, str]]:
    return [
        {"field": ".".join(str(loc) for loc in err["loc"]), "code": err["type"], "message": err["msg"]}
        for err in exc.errors()
    ]


class Host:
    """Validates host values, calls the export, and checks what comes back.

    Errors raised by an export, ArithmeticOverflowError included, reach the
    caller unchanged apart from getting the call's ``trace_id``.
    """

    def __init__(self, registry: Registry, config: Config | None = None) -> None:
        self._registry = registry
        config = config if config is not None else Config()
        self._validate_output: bool = config.get("host.validate_output", True)
        self._log_level = logging.INFO if config.get("host.logging", False) else logging.DEBUG

    @property
    def registry(self) -> Registry:
        return self._registry

    def call(self, export_id: str, inputs: dict[str, Any] | None = None) -> Any:
        """Call an export with named host values and return its result.

        Raises:
            ExportNotFoundError: If ``export_id`` is not registered.
            SchemaValidationError: If the inputs, or the result when output
                validation is on, do not match the export's models.
        """
        exported = self._registry.get(export_id)
        inputs = {} if inputs is None else inputs
        trace_id = str(uuid.uuid4())

        logger.log(self._log_level, "[%s] START %s %s", trace_id, export_id, inputs)
        start = time.perf_counter()
        try:
            result = self._run(exported, inputs)
        except NumbindError as exc:
            if exc.trace_id is None:
                exc.trace_id = trace_id
            logger.warning("[%s] ERROR %s: %s", trace_id, export_id, exc)
            raise
        except Exception:
            logger.error("[%s] ERROR %s: unexpected failure", trace_id, export_id, exc_info=True)
            raise
        logger.log(
            self._log_level, "[%s] END %s (%.2fms)", trace_id, export_id, (time.perf_counter() - start) * 1000
        )
        return result

    def invoke(self, export_id: str, *args: Any, **kwargs: Any) -> Any:
        """Call an export with positional host values, in parameter order.

        ``host.invoke("add", 2, 3)`` is ``host.call("add", {"left": 2, "right": 3})``.

        Raises:
            InvalidInputError: If there are more positional values than
                parameters, or a parameter is given twice.
        """
        names = self._registry.get(export_id).positional_fields
        if len(args) > len(names):
            raise InvalidInputError(
                f"{export_id}() takes {len(names)} positional arguments but {len(args)} were given",
                details={"export_id": export_id},
            )
        inputs = dict(zip(names, args))
        for name, value in kwargs.items():
            if name in inputs:
                raise InvalidInputError(
                    f"{export_id}() got multiple values for argument '{name}'",
                    details={"export_id": export_id},
                )
            inputs[name] = value
        return self.call(export_id, inputs)

    def validate(self, export_id: str, inputs: dict[str, Any]) -> list[dict[str, str]]:
        """Check inputs without running the export. Returns the field errors, empty when valid."""
        try:
            self._registry.get(export_id).input_model.model_validate(inputs)
        except pydantic.ValidationError as exc:
            return _field_errors(exc)
        return []

    def _run(self, exported: ExportedFunction, inputs: dict[str, Any]) -> Any:
        try:
            exported.input_model.model_validate(inputs)
        except pydantic.ValidationError as exc:
            raise SchemaValidationError("Input validation failed", _field_errors(exc)) from exc

        result = exported(**inputs)

        if self._validate_output:
            try:
                exported.output_model.model_validate({"result": result})
            except pydantic.ValidationError as exc:
                raise SchemaValidationError("Output validation failed", _field_errors(exc)) from exc
        return result
