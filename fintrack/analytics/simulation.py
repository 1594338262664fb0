"""
Net-Worth Simulator

Projects cumulative net worth month by month from the latest monthly
income and expense totals, compounding each by its growth rate.
"""

from decimal import Decimal
from typing import Sequence

from fintrack.models.analytics import MonthlyBucket, ProjectionPoint, SimulationParams

HUNDRED = Decimal(100)


def latest_total(buckets: Sequence[MonthlyBucket]) -> Decimal:
    return buckets[-1].total if buckets else Decimal(0)


def simulate_net_worth(
    params: SimulationParams,
    income_buckets: Sequence[MonthlyBucket],
    expense_buckets: Sequence[MonthlyBucket],
) -> list[ProjectionPoint]:
    """
    One projection point per month, starting at month 1.

    Month 1 uses the latest totals as they are; growth is applied from
    month 2 onwards. Empty when there is no income or expense history.
    Flat series are returned as-is; drawing them is the chart's concern.
    """
    if not income_buckets and not expense_buckets:
        return []

    income = latest_total(income_buckets)
    expense = latest_total(expense_buckets)
    income_factor = 1 + params.income_growth_percent / HUNDRED
    expense_factor = 1 + params.expense_growth_percent / HUNDRED

    net_worth = Decimal(0)
    points = []
    for index in range(params.months):
        if index > 0:
            income *= income_factor
            expense *= expense_factor
        net_worth += income - expense
        points.append(ProjectionPoint(month=index + 1, value=net_worth))

    return points
