import logging

import pytest
from sqlalchemy.exc import SQLAlchemyError

from exceptions import DatabaseError, PersistenceError
from models import Student
from repositories import StudentRepository


def test_missing_table_surfaces_as_persistence_error(engine, db_session, students):
    repo = StudentRepository(db_session)
    db_session.commit()
    Student.__table__.drop(engine)

    with pytest.raises(PersistenceError) as exc_info:
        repo.get_by_criteria({"firstname": "John"})

    error = exc_info.value
    assert isinstance(error, DatabaseError)
    assert isinstance(error.__cause__, SQLAlchemyError)
    assert error.operation == "get_by_criteria"
    assert error.details["entity"] == "Student"


def test_constraint_violation_on_insert_is_translated(db_session, students):
    repo = StudentRepository(db_session)

    with pytest.raises(PersistenceError) as exc_info:
        repo.insert(Student(id=1, firstname="Duplicate", lastname="Id"))

    assert exc_info.value.operation == "insert"


def test_failed_write_is_logged(db_session, students, caplog):
    repo = StudentRepository(db_session)

    with caplog.at_level(logging.DEBUG):
        with pytest.raises(PersistenceError):
            repo.insert(Student(firstname=None, lastname="NoFirstName"))

    errors = [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "Persistence error on Student" in errors[0]

    failed = [r for r in caplog.records if r.getMessage() == "Failed insert"]
    assert len(failed) == 1
    assert failed[0].levelno == logging.WARNING
    assert failed[0].entity == "Student"
    assert failed[0].error_type == "PersistenceError"


def test_successful_write_is_logged_at_debug(db_session, caplog):
    repo = StudentRepository(db_session)

    with caplog.at_level(logging.DEBUG, logger="repositories.base_repository"):
        repo.insert(Student(firstname="Anna", lastname="Kosta"))

    completed = [r for r in caplog.records if r.getMessage() == "Completed insert"]
    assert len(completed) == 1
    assert completed[0].operation == "insert"
    assert completed[0].entity == "Student"


def test_repository_logger_binds_entity(db_session, students, caplog):
    repo = StudentRepository(db_session)

    with caplog.at_level(logging.DEBUG, logger="repositories.base_repository"):
        repo.get_by_criteria({"firstname": "Jo%"})

    translated = [r for r in caplog.records if r.getMessage() == "Criteria translated"]
    assert translated[0].entity == "Student"
    assert translated[0].criteria_keys == ["firstname"]
