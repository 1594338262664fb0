"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for storage operations.
This allows us to:
1. Keep documents as JSON files on disk
2. Use in-memory storage for testing
3. Keep the ledger and habit logic decoupled from storage

The interface is a key-value store of JSON documents, nothing more.
Each key holds one self-contained document: the transaction list, the
meta snapshot or the habit map.

Reading is where stored data goes wrong, so `load` never raises. It
returns a LoadResult that either carries the parsed document or a
ParseError, and the caller decides which default to fall back to.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class ParseError(StorageError):
    """A stored document exists but cannot be decoded."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"{key}: {reason}")
        self.key = key
        self.reason = reason


@dataclass(frozen=True)
class LoadResult(Generic[T]):
    """
    Outcome of reading one document.

    Three states:
    - found:   value is set, error is None
    - missing: value is None, error is None
    - corrupt: error is set
    """
    key: str
    value: Optional[T] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def found(self) -> bool:
        return self.error is None and self.value is not None

    def unwrap_or(self, default: T) -> T:
        """Return the loaded value, or `default` when missing or corrupt."""
        if self.found:
            return self.value
        return default

    def map(self, fn) -> "LoadResult":
        """
        Apply `fn` to a found value.

        A ValueError or TypeError raised by `fn` (for example a pydantic
        ValidationError) turns the result into a ParseError.
        """
        if not self.found:
            return self
        try:
            return LoadResult(key=self.key, value=fn(self.value))
        except (ValueError, TypeError) as e:
            return LoadResult(key=self.key, error=ParseError(self.key, str(e)))


class DocumentStorageInterface(ABC):
    """
    Abstract interface for document storage operations.

    Any storage implementation (JSON files, in-memory, etc.)
    must implement these methods.
    """

    @abstractmethod
    def load(self, key: str) -> LoadResult[Any]:
        """
        Read and decode the document stored under `key`.

        Args:
            key: Document key

        Returns:
            LoadResult with the decoded JSON value, nothing (missing key)
            or a ParseError (undecodable content). Never raises.
        """
        pass

    @abstractmethod
    def save(self, key: str, document: Any) -> None:
        """
        Encode and store a document, replacing any previous one.

        Args:
            key: Document key
            document: JSON-serializable value

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """
        Remove a document.

        Returns:
            True if a document was removed
        """
        pass

    def load_or_default(
        self,
        key: str,
        parse: Callable[[Any], T],
        default: T,
        on_error: Optional[Callable[[ParseError], None]] = None,
    ) -> T:
        """
        Load, parse and collapse to `default` on any failure.

        `on_error` is called with the ParseError when the stored document
        was present but unusable; a missing document is not an error.
        """
        result = self.load(key).map(parse)
        if result.error is not None and on_error is not None:
            on_error(result.error)
        return result.unwrap_or(default)
