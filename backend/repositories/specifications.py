"""
Specification Pattern Implementation

Encapsulates query logic in reusable, composable specifications. A criteria
map is translated into one FieldSpecification per entry, conjoined by an
AndSpecification.

Each specification can:
- Render itself as a SQLAlchemy filter expression
- Report the bind parameters the expression refers to
- Evaluate itself against an in-memory entity
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Dict, Generic, Optional, TypeVar

from sqlalchemy import and_, true

from constants import CriteriaTokens
from domain.value_objects.constraints import Constraint, parse_constraint
from .path_resolver import ResolvedPath, resolve_path


logger = logging.getLogger(__name__)

T = TypeVar('T')


def build_parameter_alias(path: str) -> str:
    """
    Bind parameter name for a field path: the path with separators removed.

    Example:
        build_parameter_alias("city.name") -> "cityname"
    """
    return path.replace(CriteriaTokens.PATH_SEPARATOR, "")


class Specification(ABC, Generic[T]):
    """
    Abstract base class for specifications.

    A specification encapsulates a single query criterion.
    """

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool:
        """
        Check if a candidate object satisfies this specification.

        Args:
            candidate: Object to check

        Returns:
            True if candidate satisfies specification
        """
        pass

    @abstractmethod
    def to_sql_filter(self):
        """
        Convert specification to SQLAlchemy filter expression.

        Returns:
            SQLAlchemy filter expression
        """
        pass

    def parameters(self) -> Dict[str, Any]:
        """Bind parameter values referenced by `to_sql_filter`."""
        return {}

    def __and__(self, other: "Specification[T]") -> "AndSpecification[T]":
        """Combine specifications with AND."""
        return AndSpecification(self, other)


class AndSpecification(Specification[T]):
    """Specification that conjoins any number of specifications; empty means always true."""

    def __init__(self, *specs: Specification[T]):
        self.specs = list(specs)

    def is_satisfied_by(self, candidate: T) -> bool:
        """Check if candidate satisfies every specification."""
        return all(spec.is_satisfied_by(candidate) for spec in self.specs)

    def to_sql_filter(self):
        """Convert to SQL AND filter."""
        if not self.specs:
            return true()
        return and_(*(spec.to_sql_filter() for spec in self.specs))

    def parameters(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        for spec in self.specs:
            params.update(spec.parameters())
        return params


class FieldSpecification(Specification[T]):
    """Specification for one constraint on one (possibly nested) field path."""

    def __init__(self, resolved: ResolvedPath, constraint: Constraint, alias: Optional[str] = None):
        """
        Initialize field specification.

        Args:
            resolved: Resolved field path
            constraint: Constraint on the terminal column
            alias: Bind parameter name (defaults to the path without dots)
        """
        self.resolved = resolved
        self.constraint = constraint
        self.alias = alias or build_parameter_alias(resolved.path)

    @property
    def path(self) -> str:
        return self.resolved.path

    def is_satisfied_by(self, candidate: T) -> bool:
        if not self.resolved.is_nested:
            return self.constraint.is_satisfied_by(getattr(candidate, self.resolved.column.key))
        return any(self.constraint.is_satisfied_by(value) for value in self.resolved.values_of(candidate))

    def to_sql_filter(self):
        return self.resolved.wrap(self.constraint.to_sql_filter(self.resolved.column, self.alias))

    def parameters(self) -> Dict[str, Any]:
        return self.constraint.parameters(self.alias)

    def __repr__(self) -> str:
        return f"FieldSpecification({self.path!r}, {self.constraint!r})"


class CriteriaSpecification(AndSpecification[T]):
    """Conjunction of field specifications built from a criteria map."""

    @classmethod
    def from_criteria(cls, model, criteria: Mapping, strict: bool = False) -> "CriteriaSpecification[T]":
        """
        Translate a criteria map into a specification.

        Args:
            model: Mapped entity class the field paths start from
            criteria: Mapping of field path to constraint value
            strict: Raise on malformed ranges instead of skipping them

        Returns:
            Specification with one FieldSpecification per translated entry

        Raises:
            AttributeResolutionError: If a field path does not resolve
            InvalidCriteriaError: If strict and a range is malformed
        """
        specs = []
        used_aliases = set()
        for path, raw in criteria.items():
            resolved = resolve_path(model, path)
            constraint = parse_constraint(path, raw, strict=strict)
            if constraint is None:
                continue

            # Ranges bind derived names, so every name the constraint binds must be free
            alias = build_parameter_alias(path)
            suffix = 1
            while alias in used_aliases or used_aliases.intersection(constraint.parameter_names(alias)):
                suffix += 1
                alias = f"{build_parameter_alias(path)}_{suffix}"
            used_aliases.add(alias)
            used_aliases.update(constraint.parameter_names(alias))

            specs.append(FieldSpecification(resolved, constraint, alias))

        logger.debug(f"Translated {len(specs)} of {len(criteria)} criteria entries for {model.__name__}")
        return cls(*specs)
