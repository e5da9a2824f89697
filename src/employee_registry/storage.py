"""Key-value storage backends for the serialized employee list.

A backend only needs ``get_item``/``set_item`` over string values, mirroring
the browser ``localStorage`` contract. The store owns serialization; backends
just move strings around.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol

from .logging_utils import get_logger

logger = get_logger(__name__)


class PersistenceError(Exception):
    """Raised when the storage backend cannot be read or written."""


class KeyValueStorage(Protocol):
    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...


class MemoryStorage:
    """Process-local storage, used by tests and throwaway sessions."""

    def __init__(self, items: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value


class JsonFileStorage:
    """Storage backed by a JSON object file mapping keys to string values.

    Writes go to a temporary file in the same directory which then replaces
    the existing one, so a crash never leaves a half-written file behind.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, ValueError) as exc:
            raise PersistenceError(f"Could not read storage file {self.path}: {exc}") from exc
        if not isinstance(payload, dict):
            raise PersistenceError(f"Storage file {self.path} does not contain a JSON object")
        return payload

    def get_item(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        if value is not None and not isinstance(value, str):
            raise PersistenceError(f"Storage entry '{key}' in {self.path} is not a string")
        return value

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=self.path.parent)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump(items, handle, indent=2)
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as exc:
            raise PersistenceError(f"Could not write storage file {self.path}: {exc}") from exc
        logger.debug("Wrote storage entry '%s' to %s", key, self.path)


__all__ = ["JsonFileStorage", "KeyValueStorage", "MemoryStorage", "PersistenceError"]
