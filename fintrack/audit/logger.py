"""
Activity Logger

DESIGN DECISION: Every state change in the system is logged.
This provides:
1. Traceability of ledger and habit changes
2. Debugging capability when stored data is unreadable
3. A record of the reports the user was shown

The activity logger is synchronous, like the rest of the engine.
"""

import logging
from typing import Optional

import structlog

from fintrack.models.audit import ActivityEvent, ActivityEventBuilder, ActivitySeverity


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(level: str = "INFO") -> None:
    """Route structlog output through the stdlib root logger at `level`."""
    logging.basicConfig(format="%(message)s", level=getattr(logging, level.upper(), logging.INFO))


class ActivityLogger:
    """
    Central activity logging service.

    Renders ActivityEvent models as structured log lines.
    """

    def __init__(self, logger_name: Optional[str] = None):
        self._logger = structlog.get_logger(logger_name or "fintrack.activity")

    def log(self, event: ActivityEvent) -> None:
        """Log an activity event at the level matching its severity."""
        log_dict = event.to_log_dict()

        if event.severity == ActivitySeverity.ERROR:
            self._logger.error("activity_event", **log_dict)
        elif event.severity == ActivitySeverity.WARNING:
            self._logger.warning("activity_event", **log_dict)
        elif event.severity == ActivitySeverity.DEBUG:
            self._logger.debug("activity_event", **log_dict)
        else:
            self._logger.info("activity_event", **log_dict)

    def log_document_unreadable(self, key: str, reason: str) -> None:
        """Log that a stored document was replaced by defaults."""
        self.log(ActivityEventBuilder.stored_document_unreadable(key=key, reason=reason))

    def log_storage_write_failed(self, key: str, error_message: str) -> None:
        """Log a failed document write."""
        self.log(ActivityEventBuilder.storage_write_failed(key=key, error_message=error_message))
