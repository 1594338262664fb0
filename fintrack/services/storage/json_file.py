"""
JSON File Storage Implementation

DESIGN DECISION: Each key is one JSON file in a data directory.
1. Users can open and back up their data with any text editor
2. No database setup required
3. Writes go to a temporary file first and replace the target,
   so a crash mid-write leaves the previous document intact

TRADEOFFS:
- Single writer assumed; two processes writing the same key is
  last-write-wins
- Whole-document rewrites (we're fine for a personal ledger)
"""

import json
import os
from pathlib import Path
from typing import Any, Optional

from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from fintrack.config import get_settings
from fintrack.services.storage.interface import (
    DocumentStorageInterface,
    LoadResult,
    ParseError,
    StorageError,
)


class JsonFileStorage(DocumentStorageInterface):
    """
    Stores documents as `<data_dir>/<key>.json`.
    """

    def __init__(self, data_dir: Optional[Path] = None):
        self._data_dir = Path(data_dir or get_settings().storage.data_dir)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, key: str) -> Path:
        """Get the file path for a document key."""
        return self._data_dir / f"{key}.json"

    def load(self, key: str) -> LoadResult[Any]:
        path = self.path_for(key)
        if not path.exists():
            return LoadResult(key=key)

        try:
            with path.open("r", encoding="utf-8") as handle:
                raw = handle.read()
        except (OSError, UnicodeDecodeError) as e:
            return LoadResult(key=key, error=ParseError(key, f"unreadable file: {e}"))

        if not raw.strip():
            return LoadResult(key=key)

        try:
            return LoadResult(key=key, value=json.loads(raw))
        except ValueError as e:
            return LoadResult(key=key, error=ParseError(key, f"invalid JSON: {e}"))

    def save(self, key: str, document: Any) -> None:
        try:
            payload = json.dumps(document, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Document for {key} is not JSON-serializable: {e}")

        try:
            self._write(self.path_for(key), payload)
        except OSError as e:
            raise StorageError(f"Failed to write {key}: {e}")

    def delete(self, key: str) -> bool:
        path = self.path_for(key)
        if not path.exists():
            return False
        try:
            path.unlink()
        except OSError as e:
            raise StorageError(f"Failed to delete {key}: {e}")
        return True

    @retry(
        retry=retry_if_exception_type(OSError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.05, min=0.05, max=0.5),
        reraise=True,
    )
    def _write(self, path: Path, payload: str) -> None:
        """Write through a temporary file, retrying transient OS errors."""
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        with tmp_path.open("w", encoding="utf-8") as handle:
            handle.write(payload)
        os.replace(tmp_path, path)
