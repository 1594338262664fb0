"""Activity logging package."""

from fintrack.audit.logger import ActivityLogger, configure_logging

__all__ = ["ActivityLogger", "configure_logging"]
