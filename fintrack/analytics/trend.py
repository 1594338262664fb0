"""
Trend Predictor

Estimates next month's total from the last few monthly buckets with an
ordinary least-squares line y = a*x + b over x = 1..n.
"""

from decimal import Decimal
from typing import Optional, Sequence

from fintrack.models.analytics import MonthlyBucket, TrendDirection, TrendPrediction

TREND_WINDOW = 3
MIN_TREND_POINTS = 2


def fit_next_value(values: Sequence[Decimal]) -> Decimal:
    """
    Least-squares prediction of the value after `values`.

    Falls back to the last value when the fit is degenerate.
    """
    n = len(values)
    xs = [Decimal(i) for i in range(1, n + 1)]

    sum_x = sum(xs, Decimal(0))
    sum_y = sum(values, Decimal(0))
    sum_xy = sum((x * y for x, y in zip(xs, values)), Decimal(0))
    sum_x2 = sum((x * x for x in xs), Decimal(0))

    denominator = n * sum_x2 - sum_x * sum_x
    if denominator == 0:
        return values[-1]

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n
    return slope * (n + 1) + intercept


def predict_next(buckets: Sequence[MonthlyBucket]) -> Optional[TrendPrediction]:
    """
    Predict the next bucket total from the last (up to) three buckets.

    Returns None with fewer than two buckets; the caller should ask for
    more data. Predictions are clamped at zero.
    """
    if len(buckets) < MIN_TREND_POINTS:
        return None

    window = list(buckets[-TREND_WINDOW:])
    predicted = max(Decimal(0), fit_next_value([b.total for b in window]))

    # No threshold band: any rise counts as an increase
    direction = (
        TrendDirection.INCREASE
        if predicted > window[-1].total
        else TrendDirection.STABLE_OR_LOWER
    )

    return TrendPrediction(points=window, predicted=predicted, direction=direction)
