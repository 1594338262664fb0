"""
Insight Generator

Turns the current aggregates into short, rule-based lines of advice.
Lines use Markdown emphasis; the presentation layer renders them.

Rules, in output order:
1. Cash flow sign
2. Savings rate tier (>= 30%, >= 10%, below)
3. Highest spend category
4. Change since the previous refresh, or a first-session note
5. Expense trend over the last months, or a request for more data
6. Fixed micro-habit ideas
"""

from decimal import Decimal
from typing import Optional, Sequence

from fintrack.analytics.aggregation import top_category
from fintrack.analytics.formatting import format_amount
from fintrack.analytics.trend import predict_next
from fintrack.models.analytics import MonthlyBucket, Summary, TrendDirection

EXCELLENT_SAVINGS_RATE = Decimal(30)
MODERATE_SAVINGS_RATE = Decimal(10)

NO_DATA_LINE = (
    "No data yet. Add a few transactions so the copilot can analyze your behavior."
)


def generate_insights(
    summary: Summary,
    totals_by_category: dict[str, Decimal],
    monthly_expense: Sequence[MonthlyBucket],
    previous: Optional[Summary],
    transaction_count: int,
    currency: str = "₹",
) -> list[str]:
    """Build the insight lines for the current ledger state."""
    if transaction_count == 0:
        return [NO_DATA_LINE]

    lines = [
        _cash_flow_line(summary),
        _savings_rate_line(summary.savings_rate),
    ]

    top = top_category(totals_by_category)
    if top is not None:
        name, total = top
        lines.append(
            f"💡 Highest spend category: **{name}** ({currency}{format_amount(total)}). "
            "A small 5-10% cut here unlocks savings quickly."
        )

    lines.append(_since_last_line(summary, previous, currency))
    lines.extend(_trend_lines(monthly_expense, currency))
    lines.append(
        "💭 Micro-habit ideas:\n"
        "• Auto-rule: every time you receive Salary, move 5-10% to a savings bucket.\n"
        f"• Round-up rule: for big discretionary spends, auto-save the nearest {currency}100 difference.\n"
        "• Subscription scan: once a month, cancel at least one low-value recurring cost."
    )
    return lines


def _cash_flow_line(summary: Summary) -> str:
    if summary.balance >= 0:
        return (
            "✅ **Cash flow positive.** Net balance is "
            f"**{format_amount(summary.balance)}**."
        )
    return (
        "⚠️ **Cash flow negative.** You are overspending by "
        f"**{format_amount(abs(summary.balance))}**."
    )


def _savings_rate_line(rate: Decimal) -> str:
    shown = format_amount(rate, 1)
    if rate >= EXCELLENT_SAVINGS_RATE:
        return f"🎯 Savings rate at **{shown}%**, excellent for long-term goals."
    if rate >= MODERATE_SAVINGS_RATE:
        return f"📈 Savings rate at **{shown}%**. Aim for 20-30% to build stronger buffers."
    return (
        f"🚨 Savings rate only **{shown}%**. "
        "Consider trimming a few non-essential categories."
    )


def _since_last_line(summary: Summary, previous: Optional[Summary], currency: str) -> str:
    if previous is None:
        return (
            "👋 This is your first analyzed session. "
            "Future visits will show how your behavior shifts over time."
        )

    delta_income = summary.income - previous.income
    delta_expense = summary.expense - previous.expense
    income_trend = "increased" if delta_income >= 0 else "decreased"
    expense_trend = "increased" if delta_expense >= 0 else "decreased"

    return (
        f"🕒 Since last check-in, your **income** {income_trend} by "
        f"**{currency}{format_amount(abs(delta_income), 0)}** and **expenses** "
        f"{expense_trend} by **{currency}{format_amount(abs(delta_expense), 0)}**."
    )


def _trend_lines(monthly_expense: Sequence[MonthlyBucket], currency: str) -> list[str]:
    prediction = predict_next(monthly_expense)
    if prediction is None:
        return [
            "🧪 Track at least 2-3 months of expenses to unlock more accurate trend analysis."
        ]

    recent = ", ".join(
        f"{bucket.month}: {currency}{format_amount(bucket.total, 0)}"
        for bucket in prediction.points
    )
    lines = [
        f"📊 Last months: {recent}.",
        f"🤖 Estimated next-month expenses: **{currency}{format_amount(prediction.predicted, 0)}** "
        "(simple trend-based estimate).",
    ]
    if prediction.direction == TrendDirection.INCREASE:
        lines.append(
            "🔎 Trend suggests a possible **increase** next month. "
            "Plan a buffer so it does not hurt your savings rate."
        )
    else:
        lines.append(
            "✅ Trend suggests **stable or lower** expenses next month "
            "if your behavior stays similar."
        )
    return lines
