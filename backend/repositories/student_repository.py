"""
Student repository for student-specific data access operations.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from models import Student as StudentModel
from .base_repository import BaseRepository


class StudentRepository(BaseRepository[StudentModel]):
    """Repository for Student model operations."""

    def __init__(self, db: Session, strict: Optional[bool] = None):
        super().__init__(db, StudentModel, strict=strict)

    def get_by_city_name(self, city_name: str) -> List[StudentModel]:
        """
        Get all students living in a city.

        Args:
            city_name: City name; may contain '%' for a case-insensitive pattern

        Returns:
            List of students in matching cities
        """
        return self.get_by_criteria({"city.name": city_name})

    def get_by_lastname_prefix(self, prefix: str, page: Optional[int] = None,
                               size: Optional[int] = None) -> List[StudentModel]:
        """
        Get students whose last name starts with a prefix, case-insensitively.

        Args:
            prefix: Leading characters of the last name
            page: Zero-based page index
            size: Page size

        Returns:
            List of matching students, ordered by id
        """
        return self.get_by_criteria_paginated({"lastname": f"{prefix}%"}, page, size)
