"""Ledger package."""

from fintrack.ledger.store import LedgerStore, MetaStore

__all__ = ["LedgerStore", "MetaStore"]
