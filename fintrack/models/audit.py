"""
Activity Models for fintrack

Every state change and every computed report is recorded as a structured
event. This provides:
1. Traceability of ledger and habit changes
2. Debugging information when stored data turns out to be unreadable
3. A record of what the user was shown

DESIGN DECISION: Events are write-only. They go to the structured log and
are never read back by the application.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class ActivityEventType(str, Enum):
    """Types of events we record."""
    # Ledger
    TRANSACTION_ADDED = "transaction_added"
    TRANSACTION_DELETED = "transaction_deleted"

    # Habits
    HABIT_MARKED = "habit_marked"

    # Analytics
    INSIGHTS_REFRESHED = "insights_refreshed"
    GOAL_EVALUATED = "goal_evaluated"
    SIMULATION_RUN = "simulation_run"

    # Reports
    REPORT_EXPORTED = "report_exported"

    # Storage
    STORED_DOCUMENT_UNREADABLE = "stored_document_unreadable"
    STORAGE_WRITE_FAILED = "storage_write_failed"


class ActivitySeverity(str, Enum):
    """Severity level for activity events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ActivityEvent(BaseModel):
    """A single activity event."""

    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )
    event_type: ActivityEventType
    severity: ActivitySeverity = ActivitySeverity.INFO

    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'transaction', 'habit', 'document')"
    )
    entity_id: Optional[str] = None

    description: str = Field(..., max_length=500)
    details: dict[str, Any] = Field(default_factory=dict)
    is_user_action: bool = False

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "description": self.description,
            "details": self.details,
            "is_user_action": self.is_user_action,
        }


class ActivityEventBuilder:
    """
    Helper class to build activity events with common patterns.

    Usage:
        event = ActivityEventBuilder.transaction_added(tx_id, "expense", "Food", amount)
        event = ActivityEventBuilder.habit_marked("log_daily", 3)
    """

    @staticmethod
    def transaction_added(
        transaction_id: int,
        transaction_type: str,
        category: str,
        amount: Decimal,
    ) -> ActivityEvent:
        return ActivityEvent(
            event_type=ActivityEventType.TRANSACTION_ADDED,
            entity_type="transaction",
            entity_id=str(transaction_id),
            description=f"Added {transaction_type} in {category}",
            details={
                "type": transaction_type,
                "category": category,
                "amount": str(amount),
            },
            is_user_action=True,
        )

    @staticmethod
    def transaction_deleted(transaction_id: int, found: bool) -> ActivityEvent:
        return ActivityEvent(
            event_type=ActivityEventType.TRANSACTION_DELETED,
            entity_type="transaction",
            entity_id=str(transaction_id),
            description=(
                "Transaction deleted" if found else "Delete requested for unknown transaction"
            ),
            details={"found": found},
            is_user_action=True,
        )

    @staticmethod
    def habit_marked(habit_id: str, streak: int, changed: bool) -> ActivityEvent:
        return ActivityEvent(
            event_type=ActivityEventType.HABIT_MARKED,
            entity_type="habit",
            entity_id=habit_id,
            description=(
                f"Habit streak now {streak}" if changed else "Habit already done today"
            ),
            details={"streak": streak, "changed": changed},
            is_user_action=True,
        )

    @staticmethod
    def insights_refreshed(line_count: int, transaction_count: int) -> ActivityEvent:
        return ActivityEvent(
            event_type=ActivityEventType.INSIGHTS_REFRESHED,
            description=f"Generated {line_count} insight lines",
            details={
                "line_count": line_count,
                "transaction_count": transaction_count,
            },
            is_user_action=True,
        )

    @staticmethod
    def goal_evaluated(name: str, tier: str, ratio: Optional[Decimal]) -> ActivityEvent:
        return ActivityEvent(
            event_type=ActivityEventType.GOAL_EVALUATED,
            entity_type="goal",
            entity_id=name,
            description=f"Goal evaluated as {tier}",
            details={
                "tier": tier,
                "ratio": str(ratio) if ratio is not None else None,
            },
            is_user_action=True,
        )

    @staticmethod
    def simulation_run(months: int, point_count: int) -> ActivityEvent:
        return ActivityEvent(
            event_type=ActivityEventType.SIMULATION_RUN,
            severity=ActivitySeverity.DEBUG,
            description=f"Projected {point_count} of {months} months",
            details={"months": months, "point_count": point_count},
        )

    @staticmethod
    def report_exported(filename: str, row_count: int) -> ActivityEvent:
        return ActivityEvent(
            event_type=ActivityEventType.REPORT_EXPORTED,
            entity_type="report",
            entity_id=filename,
            description=f"Exported {row_count} transactions",
            details={"row_count": row_count},
            is_user_action=True,
        )

    @staticmethod
    def stored_document_unreadable(key: str, reason: str) -> ActivityEvent:
        return ActivityEvent(
            event_type=ActivityEventType.STORED_DOCUMENT_UNREADABLE,
            severity=ActivitySeverity.WARNING,
            entity_type="document",
            entity_id=key,
            description="Stored document could not be read; using defaults",
            details={"reason": reason},
        )

    @staticmethod
    def storage_write_failed(key: str, error_message: str) -> ActivityEvent:
        return ActivityEvent(
            event_type=ActivityEventType.STORAGE_WRITE_FAILED,
            severity=ActivitySeverity.ERROR,
            entity_type="document",
            entity_id=key,
            description="Failed to write document",
            details={"error": error_message},
        )
