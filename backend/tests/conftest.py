import sys
from datetime import date
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Now import after path is set
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from models import Base, City, Specialty, Student, Teacher


@pytest.fixture
def engine():
    """In-memory database with the full schema"""
    engine = create_engine('sqlite:///:memory:')
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Create in-memory database for testing"""
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def cities(db_session):
    athens = City(name="Athens")
    patras = City(name="Patras")
    db_session.add_all([athens, patras])
    db_session.flush()
    return {"athens": athens, "patras": patras}


@pytest.fixture
def students(db_session, cities):
    """
    Students 1-3 mirror the reference dataset (John, Jane, Joe);
    Bob has no city, no enrollment year and no email.
    """
    rows = [
        Student(id=1, firstname="John", lastname="Papadopoulos", gender="M",
                birth_date=date(2006, 3, 14), enrollment_year=20, email="john@school.gr",
                city=cities["athens"]),
        Student(id=2, firstname="Jane", lastname="Papas", gender="F",
                birth_date=date(2001, 7, 2), enrollment_year=25, email="jane@school.gr",
                city=cities["patras"]),
        Student(id=3, firstname="Joe", lastname="Nikolaou", gender="M",
                birth_date=date(1996, 11, 30), enrollment_year=30, email=None,
                city=cities["athens"]),
        Student(id=4, firstname="Bob", lastname="Georgiou", gender=None,
                birth_date=None, enrollment_year=None, email=None, city=None),
    ]
    db_session.add_all(rows)
    db_session.flush()
    return rows


@pytest.fixture
def teachers(db_session, cities):
    math = Specialty(name="Mathematics")
    physics = Specialty(name="Physics")
    rows = [
        Teacher(firstname="Maria", lastname="Ioannou", ssn="100", specialty=math, city=cities["athens"]),
        Teacher(firstname="Kostas", lastname="Dimou", ssn="200", specialty=physics, city=cities["patras"]),
        Teacher(firstname="Eleni", lastname="Vlachou", ssn="300", specialty=math, city=None),
    ]
    db_session.add_all(rows)
    db_session.flush()
    return rows


@pytest.fixture
def many_students(db_session):
    """25 students with predictable names for pagination tests"""
    rows = [
        Student(firstname=f"Student{i:02d}", lastname="Pagination", enrollment_year=2000 + i)
        for i in range(25)
    ]
    db_session.add_all(rows)
    db_session.flush()
    return rows
