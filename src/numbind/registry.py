"""Registry of exported entry points."""

from __future__ import annotations

import logging
import threading

from numbind.decorator import ExportedFunction
from numbind.errors import ExportNotFoundError, InvalidInputError

logger = logging.getLogger(__name__)

__all__ = ["Registry"]


class Registry:
    """Thread-safe mapping from export id to ExportedFunction."""

    def __init__(self) -> None:
        self._exports: dict[str, ExportedFunction] = {}
        self._lock = threading.Lock()

    def register(self, exported: ExportedFunction) -> None:
        """Add ``exported`` under its ``export_id``.

        Raises:
            InvalidInputError: If the id is empty or already taken.
        """
        export_id = exported.export_id
        if not export_id:
            raise InvalidInputError("export_id must be a non-empty string")
        with self._lock:
            if export_id in self._exports:
                raise InvalidInputError(f"Export already registered: {export_id!r}", details={"export_id": export_id})
            self._exports[export_id] = exported
        logger.debug("Registered export '%s'", export_id)

    def unregister(self, export_id: str) -> bool:
        """Remove an export. Returns False if it was not registered."""
        with self._lock:
            removed = self._exports.pop(export_id, None)
        if removed is None:
            return False
        logger.debug("Unregistered export '%s'", export_id)
        return True

    def get(self, export_id: str) -> ExportedFunction:
        """Return the export registered under ``export_id``.

        Raises:
            ExportNotFoundError: If nothing is registered under that id.
        """
        with self._lock:
            exported = self._exports.get(export_id)
        if exported is None:
            raise ExportNotFoundError(export_id)
        return exported

    def has(self, export_id: str) -> bool:
        with self._lock:
            return export_id in self._exports

    def list(self, tag: str | None = None) -> list[str]:
        """Sorted export ids, optionally only those carrying ``tag``."""
        with self._lock:
            exports = list(self._exports.values())
        return sorted(e.export_id for e in exports if tag is None or tag in e.tags)

    @property
    def export_ids(self) -> list[str]:
        return self.list()

    def __len__(self) -> int:
        with self._lock:
            return len(self._exports)
