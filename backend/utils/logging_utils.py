"""
Structured Logging Utilities

Provides a logger wrapper that attaches structured context to log records,
and a decorator that logs repository operations.
"""

import logging
from typing import Any, Dict, Optional
from functools import wraps


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    Usage:
        logger = StructuredLogger(__name__, entity="Student")
        logger.debug("Criteria translated", extra={
            "criteria_keys": ["firstname", "city.name"],
        })
    """

    def __init__(self, name: str, **context: Any):
        """
        Initialize structured logger.

        Args:
            name: Logger name (typically __name__)
            **context: Fields attached to every record from this logger
        """
        self.logger = logging.getLogger(name)
        self.context = context

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        context = dict(self.context)
        if extra:
            context.update(extra)
        return context

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log debug message with structured context."""
        self.logger.debug(message, extra=self._add_context(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log warning message with structured context."""
        self.logger.warning(message, extra=self._add_context(extra))


def log_operation(operation_name: str):
    """
    Decorator to log start, completion and failure of a repository method.

    The wrapped method's `self.model` names the entity in the log context.
    Failures are logged at warning level; the error itself is reported by
    whoever translates or handles it.

    Example:
        @log_operation("insert")
        def insert(self, entity):
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            logger = StructuredLogger(
                func.__module__,
                operation=operation_name,
                entity=getattr(self.model, '__name__', str(self.model)),
            )
            logger.debug(f"Starting {operation_name}")

            try:
                result = func(self, *args, **kwargs)
            except Exception as e:
                logger.warning(f"Failed {operation_name}", extra={
                    "error": str(e),
                    "error_type": type(e).__name__,
                })
                raise

            logger.debug(f"Completed {operation_name}")
            return result

        return wrapper

    return decorator
