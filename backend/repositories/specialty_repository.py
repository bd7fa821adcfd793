"""
Specialty repository for teaching specialty data access operations.
"""

from typing import Optional
from sqlalchemy.orm import Session

from models import Specialty as SpecialtyModel
from .base_repository import BaseRepository


class SpecialtyRepository(BaseRepository[SpecialtyModel]):
    """Repository for Specialty model operations."""

    def __init__(self, db: Session, strict: Optional[bool] = None):
        super().__init__(db, SpecialtyModel, strict=strict)
