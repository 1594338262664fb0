"""Input validation package."""

from fintrack.validation.validator import InputValidator

__all__ = ["InputValidator"]
