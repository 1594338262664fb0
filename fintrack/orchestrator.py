"""
Main Orchestrator for fintrack

This module ties together all the components and defines the
end-to-end flows behind every user action:
1. Add / delete a transaction
2. Refresh insights (and remember what was shown)
3. Evaluate a savings goal
4. Run the net-worth simulator
5. Mark a habit done
6. Export the ledger

DESIGN DECISION: The orchestrator owns no data of its own.
The ledger, meta snapshot and habits live in their stores; everything
else is computed on demand from the current ledger.
"""

from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Optional, Union

from fintrack.analytics import (
    category_totals,
    evaluate_goal,
    generate_insights,
    monthly_buckets,
    simulate_net_worth,
    summarize,
)
from fintrack.audit import ActivityLogger
from fintrack.config import get_settings
from fintrack.habits import HabitTracker
from fintrack.ledger import LedgerStore, MetaStore
from fintrack.models.analytics import (
    ChartFrame,
    GoalEvaluation,
    GoalRequest,
    MonthlyBucket,
    ProjectionPoint,
    SimulationParams,
    Summary,
)
from fintrack.models.audit import ActivityEventBuilder
from fintrack.models.habit import HabitId, HabitState
from fintrack.models.transaction import Transaction, TransactionDraft, TransactionType
from fintrack.reports import ExportedReport, export_report, interpolate_frames
from fintrack.services.storage import (
    DocumentStorageInterface,
    InMemoryStorage,
    JsonFileStorage,
)


class FinanceTracker:
    """
    Entry point for every user action.

    The presentation layer calls these methods and renders what they
    return; it never touches the stores directly.
    """

    def __init__(
        self,
        ledger: LedgerStore,
        meta: MetaStore,
        habits: HabitTracker,
        activity_logger: Optional[ActivityLogger] = None,
        currency: Optional[str] = None,
    ):
        self._ledger = ledger
        self._meta = meta
        self._habits = habits
        self._activity = activity_logger or ActivityLogger()
        self._currency = currency or get_settings().display.currency_symbol

    @property
    def currency(self) -> str:
        return self._currency

    # -------------------------------------------------------------------------
    # Ledger
    # -------------------------------------------------------------------------

    def add_transaction(self, draft: TransactionDraft, today: Optional[date] = None) -> Transaction:
        """Add a validated draft; logging anything counts toward the log_daily habit."""
        transaction = self._ledger.add(draft)
        self._habits.mark_done(HabitId.LOG_DAILY, today)
        return transaction

    def delete_transaction(self, transaction_id: int) -> bool:
        return self._ledger.delete(transaction_id)

    def transactions(self) -> list[Transaction]:
        return self._ledger.list()

    # -------------------------------------------------------------------------
    # Aggregates
    # -------------------------------------------------------------------------

    def summary(self) -> Summary:
        return summarize(self._ledger.list())

    def monthly(self, transaction_type: TransactionType) -> list[MonthlyBucket]:
        return monthly_buckets(self._ledger.list(), transaction_type)

    def category_totals(self) -> dict[str, Decimal]:
        return category_totals(self._ledger.list())

    # -------------------------------------------------------------------------
    # Insights, goals, simulation
    # -------------------------------------------------------------------------

    def refresh_insights(self) -> list[str]:
        """
        Generate insight lines and remember the summary they were based on.

        With an empty ledger only the "no data" line is returned and the
        stored snapshot is left alone.
        """
        transactions = self._ledger.list()
        summary = summarize(transactions)

        lines = generate_insights(
            summary=summary,
            totals_by_category=category_totals(transactions),
            monthly_expense=monthly_buckets(transactions, TransactionType.EXPENSE),
            previous=self._meta.last_summary,
            transaction_count=len(transactions),
            currency=self._currency,
        )

        if transactions:
            self._meta.record(summary)

        self._activity.log(ActivityEventBuilder.insights_refreshed(
            line_count=len(lines),
            transaction_count=len(transactions),
        ))
        return lines

    def evaluate_goal(self, goal: GoalRequest) -> GoalEvaluation:
        evaluation = evaluate_goal(goal, self.summary(), currency=self._currency)
        self._activity.log(ActivityEventBuilder.goal_evaluated(
            name=goal.name,
            tier=evaluation.tier.value,
            ratio=evaluation.ratio,
        ))
        return evaluation

    def simulate(self, params: SimulationParams) -> list[ProjectionPoint]:
        transactions = self._ledger.list()
        points = simulate_net_worth(
            params,
            income_buckets=monthly_buckets(transactions, TransactionType.INCOME),
            expense_buckets=monthly_buckets(transactions, TransactionType.EXPENSE),
        )
        self._activity.log(ActivityEventBuilder.simulation_run(
            months=params.months,
            point_count=len(points),
        ))
        return points

    def chart_frames(self, points: list[ProjectionPoint]) -> list[ChartFrame]:
        display = get_settings().display
        return interpolate_frames(
            points,
            width=display.chart_width,
            height=display.chart_height,
            padding=display.chart_padding,
            total_frames=display.chart_frames,
        )

    # -------------------------------------------------------------------------
    # Habits
    # -------------------------------------------------------------------------

    def mark_habit(self, habit_id: Union[HabitId, str], today: Optional[date] = None) -> HabitState:
        return self._habits.mark_done(habit_id, today)

    def habits(self) -> dict[HabitId, HabitState]:
        return self._habits.states()

    def habit_done_today(self, habit_id: Union[HabitId, str], today: Optional[date] = None) -> bool:
        return self._habits.is_done_today(habit_id, today)

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------

    def export_report(self, day: Optional[date] = None) -> Optional[ExportedReport]:
        """CSV of the whole ledger; None when there are no transactions."""
        report = export_report(self._ledger.list(), day)
        if report is not None:
            self._activity.log(ActivityEventBuilder.report_exported(
                filename=report.filename,
                row_count=report.row_count,
            ))
        return report


def create_app_components(
    storage: Optional[DocumentStorageInterface] = None,
    data_dir: Optional[Path] = None,
    use_storage: bool = True,
) -> FinanceTracker:
    """
    Factory function to create all application components.

    Args:
        storage: Storage backend to use as-is
        data_dir: Directory for JSON file storage when no backend is given
        use_storage: Set to False to keep everything in memory
                     (nothing survives a restart)

    Returns:
        A FinanceTracker wired to its stores
    """
    if storage is None:
        storage = JsonFileStorage(data_dir) if use_storage else InMemoryStorage()

    activity_logger = ActivityLogger()
    return FinanceTracker(
        ledger=LedgerStore(storage, activity_logger=activity_logger),
        meta=MetaStore(storage, activity_logger=activity_logger),
        habits=HabitTracker(storage, activity_logger=activity_logger),
        activity_logger=activity_logger,
    )
