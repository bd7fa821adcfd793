"""
Domain Value Objects

Value objects are immutable types that represent descriptive aspects of the domain.
They have no conceptual identity and are compared by their values, not by ID.

Examples:
- Equality, PatternMatch, Membership, Range, IsNull, IsNotNull: field constraints
- PageRequest: Zero-based page window with offset/limit
"""

from .constraints import (
    Constraint,
    Equality,
    PatternMatch,
    Membership,
    Range,
    IsNull,
    IsNotNull,
    parse_constraint,
)
from .page_request import PageRequest

__all__ = [
    "Constraint",
    "Equality",
    "PatternMatch",
    "Membership",
    "Range",
    "IsNull",
    "IsNotNull",
    "parse_constraint",
    "PageRequest",
]
