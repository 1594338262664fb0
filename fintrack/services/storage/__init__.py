"""
Storage Services Package

Provides the abstract document storage interface and its implementations:
JSON files on disk, and an in-memory store for tests.
"""

from fintrack.services.storage.interface import (
    DocumentStorageInterface,
    LoadResult,
    ParseError,
    StorageError,
)
from fintrack.services.storage.json_file import JsonFileStorage
from fintrack.services.storage.memory import InMemoryStorage

__all__ = [
    # Interface
    "DocumentStorageInterface",
    "LoadResult",
    # Exceptions
    "ParseError",
    "StorageError",
    # Implementations
    "InMemoryStorage",
    "JsonFileStorage",
]
