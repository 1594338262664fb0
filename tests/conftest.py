"""
Shared fixtures for the fintrack tests.

Every test gets its own InMemoryStorage; nothing touches the real data
directory unless a test passes `tmp_path` explicitly.
"""

from datetime import date
from decimal import Decimal
from typing import Optional

import pytest

from fintrack.audit import ActivityLogger
from fintrack.habits import HabitTracker
from fintrack.ledger import LedgerStore, MetaStore
from fintrack.models.transaction import Transaction, TransactionDraft, TransactionType
from fintrack.orchestrator import FinanceTracker
from fintrack.services.storage import InMemoryStorage

FIXED_EPOCH_SECONDS = 1_700_000_000.0


def _make_tx(
    tx_type: str,
    amount,
    date: Optional[str],
    category: str = "General",
    tx_id: int = 0,
    description: Optional[str] = None,
) -> Transaction:
    return Transaction(
        id=tx_id,
        type=TransactionType(tx_type),
        category=category,
        amount=amount,
        date=date,
        description=description,
    )


def _make_draft(
    tx_type: str,
    amount,
    date: Optional[str],
    category: str = "General",
    description: Optional[str] = None,
) -> TransactionDraft:
    return TransactionDraft(
        type=TransactionType(tx_type),
        category=category,
        amount=amount,
        date=date,
        description=description,
    )


@pytest.fixture
def make_tx():
    """Factory for ledger transactions with explicit ids."""
    return _make_tx


@pytest.fixture
def make_draft():
    """Factory for transaction drafts."""
    return _make_draft


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_EPOCH_SECONDS


@pytest.fixture
def ledger(storage, fixed_clock) -> LedgerStore:
    return LedgerStore(storage, clock=fixed_clock)


@pytest.fixture
def tracker(storage, fixed_clock) -> FinanceTracker:
    """A tracker wired to in-memory storage with a fixed clock and calendar."""
    activity_logger = ActivityLogger()
    return FinanceTracker(
        ledger=LedgerStore(storage, activity_logger=activity_logger, clock=fixed_clock),
        meta=MetaStore(storage, activity_logger=activity_logger),
        habits=HabitTracker(
            storage,
            activity_logger=activity_logger,
            today=lambda: date(2024, 3, 1),
        ),
        activity_logger=activity_logger,
        currency="₹",
    )


@pytest.fixture
def example_ledger() -> list[Transaction]:
    """Income 1000 in January, expenses 400 (Jan) and 300 (Feb)."""
    return [
        _make_tx("income", Decimal("1000"), "2024-01-10", "Salary", tx_id=1),
        _make_tx("expense", Decimal("400"), "2024-01-15", "Food", tx_id=2),
        _make_tx("expense", Decimal("300"), "2024-02-01", "Rent", tx_id=3),
    ]
