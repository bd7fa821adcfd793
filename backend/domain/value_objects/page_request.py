"""
PageRequest Value Object

Immutable zero-based page window translated to SQL offset/limit.
"""

from dataclasses import dataclass

from exceptions import InvalidCriteriaError


@dataclass(frozen=True)
class PageRequest:
    """
    Zero-based page index and page size.

    Page 0 with size 10 covers rows 0-9, page 1 covers rows 10-19.
    """

    page: int
    size: int

    def __post_init__(self):
        """Validate page window."""
        if self.page < 0:
            raise InvalidCriteriaError("page", f"Page index cannot be negative: {self.page}")
        if self.size < 1:
            raise InvalidCriteriaError("size", f"Page size must be at least 1: {self.size}")

    @property
    def offset(self) -> int:
        """Number of rows to skip."""
        return self.page * self.size

    @property
    def limit(self) -> int:
        """Maximum number of rows to return."""
        return self.size

    def total_pages(self, total_count: int) -> int:
        """Number of pages needed to cover total_count rows."""
        return -(-total_count // self.size) if total_count > 0 else 0
