"""Services package."""

from fintrack.services.storage import (
    DocumentStorageInterface,
    InMemoryStorage,
    JsonFileStorage,
    LoadResult,
    ParseError,
    StorageError,
)

__all__ = [
    "DocumentStorageInterface",
    "InMemoryStorage",
    "JsonFileStorage",
    "LoadResult",
    "ParseError",
    "StorageError",
]
