"""
Form Input Validation

DESIGN DECISION: Input is validated once, at the boundary.
The ledger, the aggregation engine and the goal evaluator assume clean
input and never re-check it. Anything the user types goes through
InputValidator first; only a valid result carries a parsed value.

Rules:
- transaction: type is income/expense, amount is a positive number,
  date is present (an unparseable date is only a warning: the ledger
  keeps it, monthly bucketing skips it)
- goal: name is not empty, amount is a positive number, months is a
  positive integer

IMPORTANT: Validation never silently fixes issues beyond trimming
whitespace. It reports them.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from fintrack.analytics.aggregation import parse_transaction_date
from fintrack.models.analytics import GoalRequest
from fintrack.models.transaction import TransactionDraft, TransactionType
from fintrack.models.validation import ValidationIssue, ValidationResult


def _parse_number(value: Any) -> Optional[Decimal]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    return number if number.is_finite() else None


def _parse_whole_number(value: Any) -> Optional[int]:
    number = _parse_number(value)
    if number is None or number != number.to_integral_value():
        return None
    return int(number)


class InputValidator:
    """
    Validates transaction and goal form submissions.
    """

    def validate_transaction(
        self,
        transaction_type: Any,
        category: Any,
        amount: Any,
        date: Any,
        description: Any = None,
    ) -> ValidationResult:
        """
        Check a transaction form submission.

        Returns a ValidationResult whose value is a TransactionDraft
        when there are no errors.
        """
        issues = []

        try:
            parsed_type = TransactionType(transaction_type)
        except ValueError:
            parsed_type = None
            issues.append(ValidationIssue(
                field="type",
                issue_type="invalid_value",
                message="Type must be income or expense.",
            ))

        parsed_amount = _parse_number(amount)
        if parsed_amount is None or parsed_amount <= 0:
            issues.append(ValidationIssue(
                field="amount",
                issue_type="invalid_value",
                message="Please enter a valid amount greater than zero.",
            ))

        date_text = str(date).strip() if date is not None else ""
        if not date_text:
            issues.append(ValidationIssue(
                field="date",
                issue_type="missing",
                message="Please enter a date.",
            ))
        elif parse_transaction_date(date_text) is None:
            issues.append(ValidationIssue(
                field="date",
                issue_type="invalid_format",
                message="Date is not in YYYY-MM-DD format; it will not appear in monthly trends.",
                severity="warning",
            ))

        result = ValidationResult(
            is_valid=not any(issue.severity == "error" for issue in issues),
            issues=issues,
        )
        if result.is_valid:
            note = str(description).strip() if description is not None else ""
            result.value = TransactionDraft(
                type=parsed_type,
                category=str(category) if category is not None else "",
                amount=parsed_amount,
                date=date_text,
                description=note or None,
            )
        return result

    def validate_goal(self, name: Any, amount: Any, months: Any) -> ValidationResult:
        """
        Check a goal form submission.

        Returns a ValidationResult whose value is a GoalRequest when
        there are no errors.
        """
        issues = []

        goal_name = str(name).strip() if name is not None else ""
        if not goal_name:
            issues.append(ValidationIssue(
                field="name",
                issue_type="missing",
                message="Please provide a goal name.",
            ))

        parsed_amount = _parse_number(amount)
        if parsed_amount is None or parsed_amount <= 0:
            issues.append(ValidationIssue(
                field="amount",
                issue_type="invalid_value",
                message="Goal amount must be a positive number.",
            ))

        parsed_months = _parse_whole_number(months)
        if parsed_months is None or parsed_months <= 0:
            issues.append(ValidationIssue(
                field="months",
                issue_type="invalid_value",
                message="Months must be a whole number greater than zero.",
            ))

        result = ValidationResult(is_valid=not issues, issues=issues)
        if result.is_valid:
            result.value = GoalRequest(
                name=goal_name,
                amount=parsed_amount,
                months=parsed_months,
            )
        return result
