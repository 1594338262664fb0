"""
Ledger Store

Owns the list of transactions and the insight meta snapshot.

DESIGN DECISION: The store is an explicit object handed to whoever needs
it. There is no module-level ledger; tests and the app each build their
own from a storage backend.

Every mutation is persisted immediately (last-write-wins).
"""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Callable, Optional

from pydantic import ValidationError

from fintrack.audit import ActivityLogger
from fintrack.config import get_settings
from fintrack.models.analytics import MetaSnapshot, Summary
from fintrack.models.audit import ActivityEventBuilder
from fintrack.models.transaction import Transaction, TransactionDraft
from fintrack.services.storage import DocumentStorageInterface, ParseError, StorageError


class LedgerStore:
    """
    Insertion-ordered list of transactions backed by one stored document.
    """

    def __init__(
        self,
        storage: DocumentStorageInterface,
        key: Optional[str] = None,
        activity_logger: Optional[ActivityLogger] = None,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize the store and load the persisted transactions.

        Args:
            storage: Document storage backend
            key: Document key; defaults to the configured transactions key
            activity_logger: Where ledger events are logged
            clock: Seconds since the epoch, used for id assignment
        """
        self._storage = storage
        self._key = key or get_settings().storage.transactions_key
        self._activity = activity_logger or ActivityLogger()
        self._clock = clock
        self._transactions: list[Transaction] = storage.load_or_default(
            self._key,
            self._parse_document,
            [],
            on_error=self._on_parse_error,
        )

    def add(self, draft: TransactionDraft) -> Transaction:
        """Assign an id, append and persist. The draft is not validated here."""
        transaction = Transaction.from_draft(draft, self._next_id())
        self._transactions.append(transaction)
        self._persist()
        self._activity.log(ActivityEventBuilder.transaction_added(
            transaction_id=transaction.id,
            transaction_type=transaction.type.value,
            category=transaction.category,
            amount=transaction.amount,
        ))
        return transaction

    def delete(self, transaction_id: int) -> bool:
        """
        Remove the transaction with this id.

        Returns False (and changes nothing) if no such transaction exists.
        """
        remaining = [t for t in self._transactions if t.id != transaction_id]
        found = len(remaining) != len(self._transactions)
        self._transactions = remaining
        self._persist()
        self._activity.log(ActivityEventBuilder.transaction_deleted(transaction_id, found))
        return found

    def list(self) -> list[Transaction]:
        """All transactions in insertion order (a copy)."""
        return list(self._transactions)

    def get(self, transaction_id: int) -> Optional[Transaction]:
        for transaction in self._transactions:
            if transaction.id == transaction_id:
                return transaction
        return None

    def __len__(self) -> int:
        return len(self._transactions)

    def _next_id(self) -> int:
        # Millisecond timestamp, bumped past the newest id so two adds in
        # the same millisecond stay unique.
        candidate = int(self._clock() * 1000)
        if self._transactions:
            candidate = max(candidate, max(t.id for t in self._transactions) + 1)
        return candidate

    def _persist(self) -> None:
        try:
            self._storage.save(self._key, [t.to_document() for t in self._transactions])
        except StorageError as e:
            self._activity.log_storage_write_failed(self._key, str(e))
            raise

    def _parse_document(self, document) -> list[Transaction]:
        if not isinstance(document, list):
            raise TypeError(f"expected a list of transactions, got {type(document).__name__}")

        transactions = []
        for record in document:
            try:
                transactions.append(Transaction.model_validate(record))
            except ValidationError as e:
                self._activity.log_document_unreadable(
                    self._key, f"skipped transaction record: {e.error_count()} errors"
                )
        return transactions

    def _on_parse_error(self, error: ParseError) -> None:
        self._activity.log_document_unreadable(error.key, error.reason)


class MetaStore:
    """
    The summary shown at the last insight refresh.

    Used only to report income/expense deltas between refreshes.
    """

    def __init__(
        self,
        storage: DocumentStorageInterface,
        key: Optional[str] = None,
        activity_logger: Optional[ActivityLogger] = None,
    ):
        self._storage = storage
        self._key = key or get_settings().storage.meta_key
        self._activity = activity_logger or ActivityLogger()
        self._snapshot: MetaSnapshot = storage.load_or_default(
            self._key,
            MetaSnapshot.model_validate,
            MetaSnapshot(),
            on_error=lambda error: self._activity.log_document_unreadable(error.key, error.reason),
        )

    def snapshot(self) -> MetaSnapshot:
        return self._snapshot.model_copy()

    @property
    def last_summary(self) -> Optional[Summary]:
        return self._snapshot.last_summary

    def record(self, summary: Summary, now: Optional[datetime] = None) -> MetaSnapshot:
        """Replace the snapshot with `summary` and persist it."""
        self._snapshot = MetaSnapshot(
            last_summary=summary,
            last_updated=now or datetime.now(timezone.utc),
        )
        try:
            self._storage.save(self._key, self._snapshot.model_dump(mode="json"))
        except StorageError as e:
            self._activity.log_storage_write_failed(self._key, str(e))
            raise
        return self.snapshot()
