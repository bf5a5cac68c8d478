"""LoggerProtocol definition for structured logging.

Standardizes structured logging across the client while remaining
backend-agnostic. Implementations MUST keep logs structured (message plus
key-value context).

Log Levels:
    - DEBUG: Request/response diagnostics
    - INFO: Completed catalog operations
    - WARNING: Degraded catalog responses, skipped notifications
    - ERROR: Operation failed
    - CRITICAL: Client cannot operate at all

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("table_data_loaded", table_key=key, owner_count=3)

    scoped = logger.bind(table_key=key)
    scoped.warning("owner_update_failed", owner_id="jdoe")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event name (snake_case; put variables in context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name.
            error: Optional exception instance; implementations may add
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger instance remains unchanged.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
