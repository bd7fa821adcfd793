"""
Search Request DTOs

DTOs for criteria search requests.
"""

from pydantic import BaseModel, Field, validator
from typing import Any, Dict, Optional

from config import db_config


class SearchRequest(BaseModel):
    """
    Request DTO for a criteria search.

    Criteria values keep their raw shape here; they are parsed into
    constraints by the repository.
    """

    criteria: Dict[str, Any] = Field(default_factory=dict, description="Field path to constraint value")
    page: Optional[int] = Field(None, description="Zero-based page index")
    size: Optional[int] = Field(None, description="Page size")

    @validator("page")
    def validate_page(cls, v):
        """Ensure page index is non-negative."""
        if v is not None and v < 0:
            raise ValueError("Page must be non-negative")
        return v

    @validator("size", always=True)
    def validate_size(cls, v, values):
        """Default the size when a page is requested and keep it within bounds."""
        if v is None:
            return db_config.DEFAULT_PAGE_SIZE if values.get("page") is not None else None
        if v < 1 or v > db_config.MAX_PAGE_SIZE:
            raise ValueError(f"Size must be between 1 and {db_config.MAX_PAGE_SIZE}")
        return v

    @property
    def is_paginated(self) -> bool:
        return self.page is not None and self.size is not None

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "criteria": {"lastname": "Pap%", "city.name": ["Athens", "Patras"]},
                "page": 0,
                "size": 20
            }
        }
