"""Host configuration loaded from YAML."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from numbind.errors import ConfigError, ConfigNotFoundError

__all__ = ["Config"]


class Config:
    """Nested settings read with dotted keys such as ``"host.validate_output"``.

    Keys read by Host:
        host.validate_output: Check results against the export's output model (default True).
        host.logging: Log every call at INFO instead of DEBUG (default False).
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def load(cls, path: str | Path) -> Config:
        """Read a YAML mapping from ``path``. An empty file gives an empty Config.

        Raises:
            ConfigNotFoundError: If ``path`` is not a file.
            ConfigError: If the YAML is malformed or its root is not a mapping.
        """
        path = Path(path)
        if not path.is_file():
            raise ConfigNotFoundError(str(path))

        try:
            data = yaml.safe_load(path.read_text())
        except yaml.YAMLError as exc:
            raise ConfigError(f"Cannot parse {path}: {exc}") from exc

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"Top level of {path} must be a mapping, got {type(data).__name__}")
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node
