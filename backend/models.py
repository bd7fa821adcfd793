from sqlalchemy import Column, String, Integer, Date, DateTime, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship
from datetime import datetime
from database import Base


class IdentifiableEntity(Base):
    """
    Base for every persisted entity.

    Repositories rely on the integer `id` for existence checks before
    update and delete.
    """
    __abstract__ = True

    id = Column(Integer, primary_key=True, autoincrement=True)

    def __repr__(self):
        return f"<{type(self).__name__} id={self.id}>"


class City(IdentifiableEntity):
    __tablename__ = 'cities'

    name = Column(String, nullable=False, unique=True)

    teachers = relationship("Teacher", back_populates="city")
    students = relationship("Student", back_populates="city")

    __table_args__ = (
        CheckConstraint("name != ''"),
    )


class Specialty(IdentifiableEntity):
    __tablename__ = 'specialties'

    name = Column(String, nullable=False, unique=True)

    teachers = relationship("Teacher", back_populates="specialty")


class Teacher(IdentifiableEntity):
    __tablename__ = 'teachers'

    firstname = Column(String, nullable=False)
    lastname = Column(String, nullable=False)
    ssn = Column(String, nullable=False, unique=True)  # Social security number
    email = Column(String, nullable=True)
    specialty_id = Column(Integer, ForeignKey('specialties.id'), nullable=True)
    city_id = Column(Integer, ForeignKey('cities.id'), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    specialty = relationship("Specialty", back_populates="teachers")
    city = relationship("City", back_populates="teachers")

    __table_args__ = (
        Index('idx_teachers_lastname', 'lastname'),
    )


class Student(IdentifiableEntity):
    __tablename__ = 'students'

    firstname = Column(String, nullable=False)
    lastname = Column(String, nullable=False)
    gender = Column(String, nullable=True)  # 'M', 'F' or NULL when not declared
    birth_date = Column(Date, nullable=True)
    enrollment_year = Column(Integer, nullable=True)
    email = Column(String, nullable=True)
    city_id = Column(Integer, ForeignKey('cities.id'), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    city = relationship("City", back_populates="students")

    __table_args__ = (
        Index('idx_students_lastname', 'lastname'),
    )
