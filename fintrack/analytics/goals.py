"""
Goal Evaluator

Classifies a savings goal against the current monthly savings.

Tiers, by ratio = monthly_savings / required_per_month:
- ratio >= 1.2          COMFORTABLE
- 0.7 <= ratio < 1.2    TIGHT
- ratio < 0.7           OUT_OF_REACH
- no savings at all     NO_SAVINGS (ratio not computed)

The boundaries are inclusive on the higher tier. Decimal arithmetic keeps
them exact: savings of exactly 1.2x the requirement is COMFORTABLE.
"""

from decimal import Decimal

from fintrack.analytics.formatting import format_amount
from fintrack.models.analytics import GoalEvaluation, GoalRequest, GoalTier, Summary

COMFORTABLE_RATIO = Decimal("1.2")
TIGHT_RATIO = Decimal("0.7")

TIER_COLORS: dict[GoalTier, str] = {
    GoalTier.COMFORTABLE: "#4ade80",
    GoalTier.TIGHT: "#facc15",
    GoalTier.OUT_OF_REACH: "#fb7185",
    GoalTier.NO_SAVINGS: "#f97373",
}


def monthly_savings(summary: Summary) -> Decimal:
    """Income minus expense; zero for a ledger without income."""
    if summary.income > 0:
        return summary.income - summary.expense
    return Decimal(0)


def classify_ratio(ratio: Decimal) -> GoalTier:
    if ratio >= COMFORTABLE_RATIO:
        return GoalTier.COMFORTABLE
    if ratio >= TIGHT_RATIO:
        return GoalTier.TIGHT
    return GoalTier.OUT_OF_REACH


def evaluate_goal(goal: GoalRequest, summary: Summary, currency: str = "₹") -> GoalEvaluation:
    """Evaluate whether `goal` is reachable at the current savings rate."""
    savings = monthly_savings(summary)
    required = goal.amount / goal.months

    if savings <= 0:
        tier = GoalTier.NO_SAVINGS
        ratio = None
    else:
        ratio = savings / required
        tier = classify_ratio(ratio)

    return GoalEvaluation(
        goal=goal,
        tier=tier,
        monthly_savings=savings,
        required_per_month=required,
        ratio=ratio,
        message=_feedback(goal, tier, savings, required, currency),
        color=TIER_COLORS[tier],
    )


def _feedback(
    goal: GoalRequest,
    tier: GoalTier,
    savings: Decimal,
    required: Decimal,
    currency: str,
) -> str:
    saved = f"{currency}{format_amount(savings, 0)}"
    needed = f"{currency}{format_amount(required, 0)}"

    if tier == GoalTier.NO_SAVINGS:
        return (
            f"❌ Right now your net monthly savings are ~{saved}. "
            "This goal needs either more income or lower expenses."
        )
    if tier == GoalTier.COMFORTABLE:
        return (
            f"✅ You can comfortably reach **{goal.name}** "
            f"({currency}{format_amount(goal.amount, 0)}) in {goal.months} months. "
            "Your current savings already exceed what is needed."
        )
    if tier == GoalTier.TIGHT:
        return (
            f"⚠️ **{goal.name}** is possible but tight. You need ~{needed}/month; "
            f"you currently save ~{saved}/month. "
            "Trim 1-2 categories slightly to create margin."
        )
    return (
        f"🚨 **{goal.name}** in {goal.months} months needs ~{needed}/month, "
        f"but you save only ~{saved}/month. Extend the timeline or increase income."
    )
