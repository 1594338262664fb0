"""
Analytics Models for fintrack

Derived values computed from the ledger. None of these are a source of
truth: they are recomputed from the current transaction list whenever
they are needed. The one exception is MetaSnapshot, which caches the
summary shown at the last insight refresh so the next refresh can report
what changed.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# AGGREGATES
# =============================================================================

class Summary(BaseModel):
    """Headline KPIs of the whole ledger."""
    model_config = ConfigDict(frozen=True)

    income: Decimal = Decimal(0)
    expense: Decimal = Decimal(0)
    balance: Decimal = Decimal(0)
    savings_rate: Decimal = Field(
        default=Decimal(0),
        description="Balance as a percentage of income; 0 without income"
    )


class MonthlyBucket(BaseModel):
    """Total of one transaction type within one calendar month."""
    model_config = ConfigDict(frozen=True)

    month: str = Field(
        ...,
        pattern=r"^\d{4}-\d{2}$",
        description="Month key, YYYY-MM"
    )
    total: Decimal


class MetaSnapshot(BaseModel):
    """Summary recorded at the last insight refresh."""

    last_summary: Optional[Summary] = None
    last_updated: Optional[datetime] = None


# =============================================================================
# TREND
# =============================================================================

class TrendDirection(str, Enum):
    INCREASE = "increase"
    STABLE_OR_LOWER = "stable_or_lower"


class TrendPrediction(BaseModel):
    """Next-month estimate from a least-squares fit over recent buckets."""
    model_config = ConfigDict(frozen=True)

    points: list[MonthlyBucket] = Field(
        ...,
        min_length=2,
        max_length=3,
        description="Buckets the line was fitted to, oldest first"
    )
    predicted: Decimal = Field(..., ge=0)
    direction: TrendDirection

    @property
    def last_total(self) -> Decimal:
        return self.points[-1].total


# =============================================================================
# GOALS
# =============================================================================

class GoalTier(str, Enum):
    """
    Feasibility of a savings goal at the current savings rate.

    COMFORTABLE:  savings cover the requirement with >= 20% to spare
    TIGHT:        feasible with some trimming (70% to 120%)
    OUT_OF_REACH: below 70% of the requirement
    NO_SAVINGS:   nothing is being saved at all
    """
    COMFORTABLE = "comfortable"
    TIGHT = "tight"
    OUT_OF_REACH = "out_of_reach"
    NO_SAVINGS = "no_savings"


class GoalRequest(BaseModel):
    """A savings goal entered by the user."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=200)
    amount: Decimal = Field(..., gt=0)
    months: int = Field(..., ge=1)


class GoalEvaluation(BaseModel):
    """Result of evaluating a goal against the current summary."""

    goal: GoalRequest
    tier: GoalTier
    monthly_savings: Decimal
    required_per_month: Decimal
    ratio: Optional[Decimal] = Field(
        default=None,
        description="monthly_savings / required_per_month; None without savings"
    )
    message: str
    color: str = Field(
        ...,
        description="CSS color the presentation layer renders the message in"
    )

    @property
    def is_feasible(self) -> bool:
        return self.tier in (GoalTier.COMFORTABLE, GoalTier.TIGHT)


# =============================================================================
# NET-WORTH SIMULATION
# =============================================================================

class SimulationParams(BaseModel):
    """Slider values of the net-worth simulator."""

    months: int = Field(..., ge=1)
    income_growth_percent: Decimal = Decimal(0)
    expense_growth_percent: Decimal = Decimal(0)


class ProjectionPoint(BaseModel):
    """Cumulative net worth after a number of months."""
    model_config = ConfigDict(frozen=True)

    month: int = Field(..., ge=1)
    value: Decimal


class ChartFrame(BaseModel):
    """One frame of the projection chart animation, in canvas coordinates."""
    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0)
    progress: float = Field(..., ge=0.0, le=1.0)
    points: list[tuple[float, float]] = Field(default_factory=list)
