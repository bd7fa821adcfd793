"""
Repository layer for data access abstraction.

This package contains repository classes that encapsulate database queries
and provide a clean interface for data access operations.
"""

from .base_repository import BaseRepository
from .city_repository import CityRepository
from .specialty_repository import SpecialtyRepository
from .teacher_repository import TeacherRepository
from .student_repository import StudentRepository

__all__ = [
    "BaseRepository",
    "CityRepository",
    "SpecialtyRepository",
    "TeacherRepository",
    "StudentRepository",
]
