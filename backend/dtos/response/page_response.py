"""
Page Response DTOs

DTOs for paginated criteria search results.
"""

from pydantic import BaseModel, Field
from typing import Any, List, Optional

from domain.value_objects.page_request import PageRequest


class PageResponse(BaseModel):
    """
    Response DTO for one page of search results.

    Items are the entities returned by the repository.
    """

    items: List[Any] = Field(description="Entities on this page")
    total_count: int = Field(description="Number of entities matching the criteria")
    page: Optional[int] = Field(None, description="Zero-based page index, None when unpaginated")
    size: Optional[int] = Field(None, description="Page size, None when unpaginated")
    total_pages: int = Field(description="Number of pages at this size")

    @classmethod
    def build(cls, items: List[Any], total_count: int, page: Optional[int], size: Optional[int]) -> "PageResponse":
        """Assemble a response, deriving total_pages from the page window."""
        if page is None or size is None:
            total_pages = 1 if total_count else 0
            return cls(items=items, total_count=total_count, page=None, size=None, total_pages=total_pages)
        window = PageRequest(page=page, size=size)
        return cls(
            items=items,
            total_count=total_count,
            page=page,
            size=size,
            total_pages=window.total_pages(total_count)
        )

    @property
    def has_next(self) -> bool:
        return self.page is not None and self.page + 1 < self.total_pages
