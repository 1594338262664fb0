"""
Validation Models

Results of checking form input before it reaches the ledger or the
goal evaluator.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field

from fintrack.models.analytics import GoalRequest
from fintrack.models.transaction import TransactionDraft


class ValidationIssue(BaseModel):
    """A single validation issue found."""

    field: str = Field(
        ...,
        description="Field with the issue"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'missing', 'invalid_value')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    severity: str = Field(
        default="error",
        pattern="^(error|warning|info)$",
        description="Issue severity"
    )


class ValidationResult(BaseModel):
    """
    Result of validating one form submission.

    When valid, `value` holds the parsed draft or goal.
    """

    is_valid: bool
    issues: list[ValidationIssue] = Field(default_factory=list)
    value: Optional[Union[TransactionDraft, GoalRequest]] = None

    @property
    def has_errors(self) -> bool:
        """Check if there are any error-level issues."""
        return any(issue.severity == "error" for issue in self.issues)

    @property
    def error_count(self) -> int:
        """Count error-level issues."""
        return sum(1 for issue in self.issues if issue.severity == "error")

    @property
    def message(self) -> str:
        return " ".join(issue.message for issue in self.issues)
