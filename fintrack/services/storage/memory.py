"""
In-Memory Storage Implementation

Keeps encoded documents in a dict, the way a browser keeps strings in
local storage. Used by tests and by the app when no data directory is
writable.
"""

import json
from typing import Any

from fintrack.services.storage.interface import (
    DocumentStorageInterface,
    LoadResult,
    ParseError,
    StorageError,
)


class InMemoryStorage(DocumentStorageInterface):
    """Documents held as JSON strings, keyed by document key."""

    def __init__(self):
        self._items: dict[str, str] = {}

    def load(self, key: str) -> LoadResult[Any]:
        raw = self._items.get(key)
        if raw is None or not raw.strip():
            return LoadResult(key=key)
        try:
            return LoadResult(key=key, value=json.loads(raw))
        except ValueError as e:
            return LoadResult(key=key, error=ParseError(key, f"invalid JSON: {e}"))

    def save(self, key: str, document: Any) -> None:
        try:
            self._items[key] = json.dumps(document, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Document for {key} is not JSON-serializable: {e}")

    def delete(self, key: str) -> bool:
        return self._items.pop(key, None) is not None

    def get_raw(self, key: str):
        """Return the encoded document, or None."""
        return self._items.get(key)

    def set_raw(self, key: str, raw: str) -> None:
        """Store an encoded document as-is, valid or not."""
        self._items[key] = raw

    def keys(self) -> list[str]:
        return sorted(self._items)
