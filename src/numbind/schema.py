"""Schema documents a host uses to generate bindings for registered exports.

Each export is described by its JSON Schemas, so a host can see the u32/u64
ranges of the arguments without importing numbind.
"""

from __future__ import annotations

import json
from typing import Any

import yaml

from numbind.decorator import ExportedFunction
from numbind.errors import InvalidInputError
from numbind.registry import Registry

__all__ = ["describe", "dump_schemas"]


def describe(exported: ExportedFunction) -> dict[str, Any]:
    """Return a JSON-serializable description of one export."""
    return {
        "export_id": exported.export_id,
        "description": exported.description,
        "tags": list(exported.tags),
        "may_overflow": exported.may_overflow,
        "parameters": exported.positional_fields,
        "input_schema": exported.input_model.model_json_schema(),
        "output_schema": exported.output_model.model_json_schema(),
    }


def dump_schemas(registry: Registry, format: str = "json") -> str:  # noqa: A002
    """Serialize descriptions of every registered export, keyed by export id.

    Raises:
        InvalidInputError: If ``format`` is not ``"json"`` or ``"yaml"``.
    """
    documents = {export_id: describe(registry.get(export_id)) for export_id in registry.export_ids}
    if format == "json":
        return json.dumps(documents, indent=2)
    if format == "yaml":
        return yaml.safe_dump(documents, sort_keys=False)
    raise InvalidInputError(f"Unsupported schema format: {format!r}", details={"format": format})
