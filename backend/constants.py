"""
Application-wide constants for the criteria query vocabulary.

This module centralizes the magic strings recognised in criteria maps so the
parser, the repositories and the tests agree on a single spelling.
"""
from enum import Enum


class ConstraintKind(str, Enum):
    """
    Kinds of field constraints a criteria entry can express.

    Each kind maps to exactly one SQL predicate shape:
    - EQUALITY: column = value
    - PATTERN: lower(column) LIKE lower(pattern)
    - MEMBERSHIP: column IN (values)
    - RANGE: column BETWEEN from AND to (inclusive)
    - IS_NULL / IS_NOT_NULL: column IS [NOT] NULL
    """

    EQUALITY = 'EQUALITY'
    PATTERN = 'PATTERN'
    MEMBERSHIP = 'MEMBERSHIP'
    RANGE = 'RANGE'
    IS_NULL = 'IS_NULL'
    IS_NOT_NULL = 'IS_NOT_NULL'


class CriteriaTokens:
    """Reserved values and keys understood by the criteria parser"""

    IS_NULL = "isNull"
    IS_NOT_NULL = "isNotNull"

    # Range constraints are written as {"from": low, "to": high}
    RANGE_FROM = "from"
    RANGE_TO = "to"

    # SQL LIKE markers
    WILDCARD = "%"
    SINGLE_CHAR = "_"

    # Separator for nested attribute paths, e.g. "city.name"
    PATH_SEPARATOR = "."


class PageDefaults:
    """Pagination bounds used when no configuration overrides them"""

    PAGE = 0
    SIZE = 20
    MAX_SIZE = 1000
