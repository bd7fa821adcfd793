"""
City repository for city-specific data access operations.
"""

from typing import Optional
from sqlalchemy.orm import Session

from models import City as CityModel
from .base_repository import BaseRepository


class CityRepository(BaseRepository[CityModel]):
    """Repository for City model operations."""

    def __init__(self, db: Session, strict: Optional[bool] = None):
        super().__init__(db, CityModel, strict=strict)

    def get_by_name(self, name: str) -> Optional[CityModel]:
        """
        Get a city by its unique name.

        Args:
            name: City name (exact match)

        Returns:
            City instance or None if not found
        """
        return self.find_by_field("name", name)
