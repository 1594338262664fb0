"""Analytics package: aggregation, trend, goals, simulation and insights."""

from fintrack.analytics.aggregation import (
    category_totals,
    monthly_buckets,
    parse_transaction_date,
    summarize,
    top_category,
)
from fintrack.analytics.formatting import format_amount, format_currency, format_percent
from fintrack.analytics.goals import (
    COMFORTABLE_RATIO,
    TIGHT_RATIO,
    evaluate_goal,
    monthly_savings,
)
from fintrack.analytics.insights import generate_insights
from fintrack.analytics.simulation import simulate_net_worth
from fintrack.analytics.trend import fit_next_value, predict_next

__all__ = [
    "COMFORTABLE_RATIO",
    "TIGHT_RATIO",
    "category_totals",
    "evaluate_goal",
    "fit_next_value",
    "format_amount",
    "format_currency",
    "format_percent",
    "generate_insights",
    "monthly_buckets",
    "monthly_savings",
    "parse_transaction_date",
    "predict_next",
    "simulate_net_worth",
    "summarize",
    "top_category",
]
