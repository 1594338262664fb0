"""
CSV Report Export

Renders the ledger as a CSV document:
- header `id,type,category,amount,date,description`, unquoted
- one row per transaction, every field double-quoted, inner quotes doubled
- rows separated by `\\n`, no trailing newline
"""

import csv
import io
from datetime import date
from typing import Iterable, Optional

from pydantic import BaseModel, Field

from fintrack.models.transaction import Transaction

CSV_COLUMNS = ["id", "type", "category", "amount", "date", "description"]


class ExportedReport(BaseModel):
    """A rendered CSV report ready to be offered as a download."""

    filename: str
    content: str
    row_count: int = Field(ge=0)
    mime_type: str = "text/csv;charset=utf-8"


def report_filename(day: Optional[date] = None) -> str:
    """`finance-report-YYYY-MM-DD.csv` for the export date."""
    return f"finance-report-{(day or date.today()).isoformat()}.csv"


def _row(transaction: Transaction) -> list[str]:
    return [
        str(transaction.id),
        transaction.type.value,
        transaction.category,
        str(transaction.amount),
        transaction.date or "",
        transaction.description or "",
    ]


def _quoted_line(fields: list[str]) -> str:
    buffer = io.StringIO()
    csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n").writerow(fields)
    # drop the terminator; lines are joined below
    return buffer.getvalue()[:-1]


def build_csv(transactions: Iterable[Transaction]) -> str:
    """Render transactions in the given order."""
    lines = [",".join(CSV_COLUMNS)]
    lines.extend(_quoted_line(_row(transaction)) for transaction in transactions)
    return "\n".join(lines)


def export_report(
    transactions: list[Transaction],
    day: Optional[date] = None,
) -> Optional[ExportedReport]:
    """Build the downloadable report; None when there is nothing to export."""
    if not transactions:
        return None
    return ExportedReport(
        filename=report_filename(day),
        content=build_csv(transactions),
        row_count=len(transactions),
    )
