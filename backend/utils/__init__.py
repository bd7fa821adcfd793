"""
Utility functions and decorators.
"""

from .error_handlers import translate_persistence_errors
from .logging_utils import StructuredLogger, log_operation

__all__ = ["translate_persistence_errors", "StructuredLogger", "log_operation"]
