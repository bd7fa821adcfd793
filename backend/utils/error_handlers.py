"""
Error translation for repository operations.

Failures raised by the persistence context are converted into the
application's PersistenceError so callers handle a single exception type.
"""

from functools import wraps
from typing import Callable
import logging

from sqlalchemy.exc import SQLAlchemyError

from exceptions import PersistenceError

logger = logging.getLogger(__name__)


def translate_persistence_errors(operation_name: str):
    """
    Decorator that re-raises SQLAlchemy failures as PersistenceError.

    Application errors (AttributeResolutionError, InvalidCriteriaError) pass
    through untouched. The original exception is kept as __cause__.

    Args:
        operation_name: Name of the repository operation (e.g., "get_by_criteria")

    Example:
        @translate_persistence_errors("delete")
        def delete(self, id):
            ...
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                return func(self, *args, **kwargs)
            except SQLAlchemyError as e:
                entity = getattr(self.model, '__name__', str(self.model))
                logger.error(f"{operation_name} - Persistence error on {entity}: {e}", exc_info=True)
                raise PersistenceError(operation_name, entity, str(e)) from e

        return wrapper

    return decorator
