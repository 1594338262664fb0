"""
Transaction Models for fintrack

These models define the schema of the ledger: one record per income or
expense entry. They are designed to:
1. Survive whatever was written to storage earlier
2. Be serializable to the JSON document the ledger is persisted as
3. Stay immutable once created

DESIGN DECISION: The engine does not re-validate user input.
Positivity of amounts and presence of dates are checked by the input
validator before a draft ever reaches the ledger. The models only
normalize what they are given, so a stored record with a garbage amount
counts as 0 instead of breaking every aggregate.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TransactionType(str, Enum):
    """Direction of a ledger entry."""
    INCOME = "income"
    EXPENSE = "expense"


def coerce_amount(value: Any) -> Decimal:
    """
    Convert a stored amount to Decimal.

    Missing, non-numeric and non-finite values count as zero.
    """
    if value is None or isinstance(value, bool):
        return Decimal(0)
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return Decimal(0)
        try:
            amount = Decimal(text)
        except InvalidOperation:
            return Decimal(0)
    else:
        return Decimal(0)

    if not amount.is_finite():
        return Decimal(0)
    return amount


def _coerce_iso_date(value: Any) -> Optional[str]:
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if value is None:
        return None
    return str(value)


class TransactionDraft(BaseModel):
    """
    A transaction as entered by the user, before the ledger assigns an id.
    """
    model_config = ConfigDict(frozen=True)

    type: TransactionType = Field(
        ...,
        description="Income or expense"
    )
    category: str = Field(
        default="",
        description="Free-form category label"
    )
    amount: Decimal = Field(
        default=Decimal(0),
        description="Amount; positive for valid input, 0 when missing in storage"
    )
    date: Optional[str] = Field(
        default=None,
        description="Calendar date as an ISO string"
    )
    description: Optional[str] = Field(
        default=None,
        description="Optional note"
    )

    @field_validator('amount', mode='before')
    @classmethod
    def normalize_amount(cls, v: Any) -> Decimal:
        return coerce_amount(v)

    @field_validator('date', mode='before')
    @classmethod
    def normalize_date(cls, v: Any) -> Optional[str]:
        return _coerce_iso_date(v)


class Transaction(TransactionDraft):
    """
    A ledger entry.

    Created by LedgerStore.add, never modified, removed by id.
    """

    id: int = Field(
        ...,
        description="Unique id derived from the creation time in milliseconds"
    )

    @classmethod
    def from_draft(cls, draft: TransactionDraft, transaction_id: int) -> "Transaction":
        return cls(id=transaction_id, **draft.model_dump())

    def to_document(self) -> dict:
        """Convert to the JSON document stored for this entry."""
        return {
            "id": self.id,
            "type": self.type.value,
            "category": self.category,
            "amount": str(self.amount),
            "date": self.date,
            "description": self.description,
        }
