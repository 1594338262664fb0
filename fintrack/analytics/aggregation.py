"""
Aggregation Engine

Pure functions over a transaction list: headline summary, per-month
buckets and per-category expense totals. Every function returns a
defined result for every input, including an empty ledger.
"""

from collections import defaultdict
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, Optional

from fintrack.models.analytics import MonthlyBucket, Summary
from fintrack.models.transaction import Transaction, TransactionType

HUNDRED = Decimal(100)


def parse_transaction_date(value: Optional[str]) -> Optional[date]:
    """Parse an ISO date or datetime string; None if missing or unparseable."""
    if not value:
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def month_key(day: date) -> str:
    return f"{day.year:04d}-{day.month:02d}"


def summarize(transactions: Iterable[Transaction]) -> Summary:
    """
    Income, expense, balance and savings rate over all transactions.

    Savings rate is balance as a percentage of income, and 0 when there
    is no positive income.
    """
    income = Decimal(0)
    expense = Decimal(0)

    for transaction in transactions:
        if transaction.type == TransactionType.INCOME:
            income += transaction.amount
        elif transaction.type == TransactionType.EXPENSE:
            expense += transaction.amount

    balance = income - expense
    savings_rate = balance / income * HUNDRED if income > 0 else Decimal(0)

    return Summary(
        income=income,
        expense=expense,
        balance=balance,
        savings_rate=savings_rate,
    )


def monthly_buckets(
    transactions: Iterable[Transaction],
    transaction_type: TransactionType,
) -> list[MonthlyBucket]:
    """
    Totals of one transaction type per calendar month, oldest month first.

    Transactions without a parseable date are left out.
    """
    totals: dict[str, Decimal] = defaultdict(Decimal)

    for transaction in transactions:
        if transaction.type != transaction_type:
            continue
        day = parse_transaction_date(transaction.date)
        if day is None:
            continue
        totals[month_key(day)] += transaction.amount

    # YYYY-MM sorts chronologically as a string
    return [MonthlyBucket(month=month, total=total) for month, total in sorted(totals.items())]


def category_totals(transactions: Iterable[Transaction]) -> dict[str, Decimal]:
    """Summed expense amount per category, categories as entered."""
    totals: dict[str, Decimal] = defaultdict(Decimal)
    for transaction in transactions:
        if transaction.type == TransactionType.EXPENSE:
            totals[transaction.category] += transaction.amount
    return dict(totals)


def top_category(totals: dict[str, Decimal]) -> Optional[tuple[str, Decimal]]:
    """The highest-spend category, or None without expenses."""
    if not totals:
        return None
    return max(totals.items(), key=lambda item: item[1])
