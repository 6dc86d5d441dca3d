"""The ``@export`` decorator.

An exported function stays an ordinary Python function. The decorator only
attaches an ExportedFunction as ``func.export``, which holds the pydantic
models a Host validates host values against.
"""

from __future__ import annotations

import inspect
import re
import typing
from typing import Any, Callable

from pydantic import BaseModel, create_model

from numbind.errors import ExportDefinitionError

__all__ = ["ExportedFunction", "export"]

_ID_INVALID_CHARS = re.compile(r"[^a-z0-9_.]")


def _type_hints(func: Callable) -> dict[str, Any]:
    try:
        return typing.get_type_hints(func, include_extras=True)
    except NameError as exc:
        raise ExportDefinitionError(func.__name__, f"unresolvable annotation ({exc})") from exc


def _build_models(func: Callable) -> tuple[type[BaseModel], type[BaseModel]]:
    """Build the input and output models for ``func``.

    The input model has one field per parameter, in signature order. The
    output model has a single ``result`` field typed by the return annotation.
    """
    hints = _type_hints(func)
    fields: dict[str, Any] = {}
    for name, param in inspect.signature(func).parameters.items():
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            raise ExportDefinitionError(func.__name__, f"variadic parameter '{name}' is not supported")
        if name not in hints:
            raise ExportDefinitionError(func.__name__, f"parameter '{name}' has no type annotation")
        default = ... if param.default is param.empty else param.default
        fields[name] = (hints[name], default)

    if "return" not in hints:
        raise ExportDefinitionError(func.__name__, "missing return annotation")

    prefix = "".join(part.capitalize() for part in func.__name__.split("_"))
    input_model = create_model(f"{prefix}Input", **fields)
    output_model = create_model(f"{prefix}Output", result=(hints["return"], ...))
    return input_model, output_model


def _auto_id(func: Callable) -> str:
    """Derive an export id from the function's module and qualified name."""
    raw = f"{func.__module__}.{func.__qualname__}".replace(".<locals>", "").lower()
    segments = [_ID_INVALID_CHARS.sub("_", seg) for seg in raw.split(".")]
    return ".".join(f"_{seg}" if seg[:1].isdigit() else seg for seg in segments)


class ExportedFunction:
    """A function plus the models used to check host values on the way in and out."""

    def __init__(
        self,
        func: Callable,
        export_id: str,
        description: str | None = None,
        tags: list[str] | None = None,
        may_overflow: bool = False,
    ) -> None:
        self.func = func
        self.export_id = export_id
        self.input_model, self.output_model = _build_models(func)
        if description is None:
            doc = inspect.getdoc(func)
            description = doc.splitlines()[0] if doc else func.__name__
        self.description = description
        self.tags = list(tags or [])
        self.may_overflow = may_overflow

    @property
    def positional_fields(self) -> list[str]:
        """Parameter names in the order a positional host call supplies them."""
        return list(self.input_model.model_fields)

    def __call__(self, **inputs: Any) -> Any:
        return self.func(**inputs)

    def __repr__(self) -> str:
        return f"ExportedFunction({self.export_id!r})"


def export(
    func: Callable | None = None,
    /,
    *,
    id: str | None = None,  # noqa: A002
    description: str | None = None,
    tags: list[str] | None = None,
    may_overflow: bool = False,
) -> Any:
    """Mark a function as callable by a host.

    Usable bare (``@export``) or with options (``@export(id="add")``). Without
    ``id`` the export id is derived from ``module.qualname``.

    Raises:
        ExportDefinitionError: If a parameter or the return value is not annotated,
            or the function takes ``*args``/``**kwargs``.
    """

    def decorate(target: Callable) -> Callable:
        target.export = ExportedFunction(  # type: ignore[attr-defined]
            target,
            export_id=id if id is not None else _auto_id(target),
            description=description,
            tags=tags,
            may_overflow=may_overflow,
        )
        return target

    if func is not None:
        return decorate(func)
    return decorate
