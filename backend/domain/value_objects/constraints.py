"""
Constraint Value Objects

Immutable, explicitly typed field constraints used by criteria queries.

A criteria map such as {"firstname": "Jo%", "city.name": ["Athens", "Patras"]}
is turned into one constraint per entry by `parse_constraint`. Each constraint
knows how to render itself as a SQLAlchemy predicate over a column, which
parameters it binds, and how to evaluate itself against a plain Python value.
"""

import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Tuple

from sqlalchemy import bindparam

from constants import ConstraintKind, CriteriaTokens
from exceptions import InvalidCriteriaError

logger = logging.getLogger(__name__)

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


class Constraint(ABC):
    """
    Abstract base class for a single-field constraint.

    Subclasses are frozen dataclasses; `kind` tags the variant.
    """

    kind: ClassVar[ConstraintKind]

    @abstractmethod
    def to_sql_filter(self, column, alias: str):
        """
        Build the predicate for this constraint.

        Args:
            column: Mapped column attribute the predicate applies to
            alias: Bind parameter name reserved for this constraint

        Returns:
            SQLAlchemy boolean clause
        """
        pass

    def parameters(self, alias: str) -> Dict[str, Any]:
        """Values to bind for the parameters referenced by `to_sql_filter`."""
        return {}

    def parameter_names(self, alias: str) -> Tuple[str, ...]:
        """Bind parameter names `to_sql_filter` uses under the given alias."""
        return tuple(self.parameters(alias))

    @abstractmethod
    def is_satisfied_by(self, value: Any) -> bool:
        """Check a plain Python value against this constraint."""
        pass


@dataclass(frozen=True)
class Equality(Constraint):
    value: Any

    kind: ClassVar[ConstraintKind] = ConstraintKind.EQUALITY

    def to_sql_filter(self, column, alias: str):
        return column == bindparam(alias)

    def parameters(self, alias: str) -> Dict[str, Any]:
        return {alias: self.value}

    def is_satisfied_by(self, value: Any) -> bool:
        return value == self.value


@dataclass(frozen=True)
class PatternMatch(Constraint):
    """
    Case-insensitive SQL LIKE match.

    The bound pattern is lower-cased and always ends with a wildcard,
    so "Jo" and "Jo%" both match values starting with "jo".
    """

    pattern: str

    kind: ClassVar[ConstraintKind] = ConstraintKind.PATTERN

    @property
    def bound_pattern(self) -> str:
        lowered = self.pattern.lower()
        if not lowered.endswith(CriteriaTokens.WILDCARD):
            lowered += CriteriaTokens.WILDCARD
        return lowered

    def to_sql_filter(self, column, alias: str):
        return column.ilike(bindparam(alias))

    def parameters(self, alias: str) -> Dict[str, Any]:
        return {alias: self.bound_pattern}

    def is_satisfied_by(self, value: Any) -> bool:
        if value is None:
            return False
        return _like_to_regex(self.bound_pattern).fullmatch(str(value)) is not None


@dataclass(frozen=True)
class Membership(Constraint):
    values: Tuple[Any, ...]

    kind: ClassVar[ConstraintKind] = ConstraintKind.MEMBERSHIP

    def to_sql_filter(self, column, alias: str):
        # Expanding parameters render an empty list as an always-false IN
        return column.in_(bindparam(alias, expanding=True))

    def parameters(self, alias: str) -> Dict[str, Any]:
        return {alias: list(self.values)}

    def is_satisfied_by(self, value: Any) -> bool:
        # IN never matches NULL, even when NULL is listed
        return value is not None and value in self.values


@dataclass(frozen=True)
class Range(Constraint):
    """Inclusive range; both bounds must be comparable scalars."""

    low: Any
    high: Any

    kind: ClassVar[ConstraintKind] = ConstraintKind.RANGE

    def __post_init__(self):
        """Validate that the bounds can be compared with each other."""
        if not _comparable(self.low, self.high):
            raise ValueError(f"Range bounds are not comparable: {self.low!r}, {self.high!r}")

    def to_sql_filter(self, column, alias: str):
        return column.between(bindparam(f"{alias}_from"), bindparam(f"{alias}_to"))

    def parameters(self, alias: str) -> Dict[str, Any]:
        return {f"{alias}_from": self.low, f"{alias}_to": self.high}

    def is_satisfied_by(self, value: Any) -> bool:
        if value is None:
            return False
        try:
            return self.low <= value <= self.high
        except TypeError:
            return False


@dataclass(frozen=True)
class IsNull(Constraint):
    kind: ClassVar[ConstraintKind] = ConstraintKind.IS_NULL

    def to_sql_filter(self, column, alias: str):
        return column.is_(None)

    def is_satisfied_by(self, value: Any) -> bool:
        return value is None


@dataclass(frozen=True)
class IsNotNull(Constraint):
    kind: ClassVar[ConstraintKind] = ConstraintKind.IS_NOT_NULL

    def to_sql_filter(self, column, alias: str):
        return column.isnot(None)

    def is_satisfied_by(self, value: Any) -> bool:
        return value is not None


def parse_constraint(field: str, raw: Any, strict: bool = False) -> Optional[Constraint]:
    """
    Turn a raw criteria value into a constraint.

    Args:
        field: Field path the value belongs to (used in messages)
        raw: Value from the criteria map, or an already built Constraint
        strict: Raise instead of skipping a malformed range

    Returns:
        The constraint, or None when a malformed range is skipped

    Raises:
        InvalidCriteriaError: If strict and the range is malformed
    """
    if isinstance(raw, Constraint):
        return raw
    if raw is None:
        return IsNull()
    if isinstance(raw, str):
        if raw == CriteriaTokens.IS_NULL:
            return IsNull()
        if raw == CriteriaTokens.IS_NOT_NULL:
            return IsNotNull()
        if CriteriaTokens.WILDCARD in raw:
            return PatternMatch(raw)
        return Equality(raw)
    if isinstance(raw, Mapping):
        return _parse_range(field, raw, strict)
    if isinstance(raw, _SEQUENCE_TYPES):
        return Membership(tuple(raw))
    return Equality(raw)


def _parse_range(field: str, raw: Mapping, strict: bool) -> Optional[Range]:
    if CriteriaTokens.RANGE_FROM not in raw or CriteriaTokens.RANGE_TO not in raw:
        problem = (
            f"range for '{field}' needs both '{CriteriaTokens.RANGE_FROM}' "
            f"and '{CriteriaTokens.RANGE_TO}' keys"
        )
    else:
        try:
            return Range(raw[CriteriaTokens.RANGE_FROM], raw[CriteriaTokens.RANGE_TO])
        except ValueError as e:
            problem = f"range for '{field}' is invalid: {e}"

    if strict:
        raise InvalidCriteriaError(field, problem)
    logger.warning(f"Skipping criteria entry: {problem}")
    return None


def _comparable(low: Any, high: Any) -> bool:
    for bound in (low, high):
        if bound is None or isinstance(bound, Mapping) or isinstance(bound, _SEQUENCE_TYPES):
            return False
    try:
        low <= high
    except TypeError:
        return False
    return True


def _like_to_regex(pattern: str) -> "re.Pattern[str]":
    parts = []
    for char in pattern:
        if char == CriteriaTokens.WILDCARD:
            parts.append('.*')
        elif char == CriteriaTokens.SINGLE_CHAR:
            parts.append('.')
        else:
            parts.append(re.escape(char))
    return re.compile(''.join(parts), re.IGNORECASE | re.DOTALL)
