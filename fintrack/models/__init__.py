"""
Data Models Package

This package contains all Pydantic models used in fintrack.
"""

from fintrack.models.transaction import (
    Transaction,
    TransactionDraft,
    TransactionType,
    coerce_amount,
)
from fintrack.models.analytics import (
    ChartFrame,
    GoalEvaluation,
    GoalRequest,
    GoalTier,
    MetaSnapshot,
    MonthlyBucket,
    ProjectionPoint,
    SimulationParams,
    Summary,
    TrendDirection,
    TrendPrediction,
)
from fintrack.models.habit import (
    HABIT_LABELS,
    HabitId,
    HabitState,
    default_habits,
)
from fintrack.models.validation import (
    ValidationIssue,
    ValidationResult,
)
from fintrack.models.audit import (
    ActivityEvent,
    ActivityEventBuilder,
    ActivityEventType,
    ActivitySeverity,
)

__all__ = [
    # Ledger models
    "Transaction",
    "TransactionDraft",
    "TransactionType",
    "coerce_amount",
    # Analytics models
    "ChartFrame",
    "GoalEvaluation",
    "GoalRequest",
    "GoalTier",
    "MetaSnapshot",
    "MonthlyBucket",
    "ProjectionPoint",
    "SimulationParams",
    "Summary",
    "TrendDirection",
    "TrendPrediction",
    # Habit models
    "HABIT_LABELS",
    "HabitId",
    "HabitState",
    "default_habits",
    # Validation models
    "ValidationIssue",
    "ValidationResult",
    # Activity models
    "ActivityEvent",
    "ActivityEventBuilder",
    "ActivityEventType",
    "ActivitySeverity",
]
