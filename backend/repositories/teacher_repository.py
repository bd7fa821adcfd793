"""
Teacher repository for teacher-specific data access operations.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from models import Teacher as TeacherModel
from .base_repository import BaseRepository


class TeacherRepository(BaseRepository[TeacherModel]):
    """Repository for Teacher model operations."""

    def __init__(self, db: Session, strict: Optional[bool] = None):
        super().__init__(db, TeacherModel, strict=strict)

    def get_by_ssn(self, ssn: str) -> Optional[TeacherModel]:
        """
        Get a teacher by social security number.

        Args:
            ssn: Social security number (exact match)

        Returns:
            Teacher instance or None if not found
        """
        return self.find_by_field("ssn", ssn)

    def get_by_specialty(self, specialty_name: str) -> List[TeacherModel]:
        """
        Get all teachers of a specialty.

        Args:
            specialty_name: Specialty name (exact match)

        Returns:
            List of teachers with that specialty
        """
        return self.get_by_criteria({"specialty.name": specialty_name})
