import pytest
from sqlalchemy import Column, ForeignKey, Integer, String, create_engine
from sqlalchemy.orm import declarative_base, relationship, sessionmaker

from domain.value_objects.constraints import Equality, IsNull, Range
from models import Student
from repositories.base_repository import BaseRepository
from repositories.path_resolver import resolve_path
from repositories.specifications import (
    AndSpecification,
    CriteriaSpecification,
    FieldSpecification,
    build_parameter_alias,
)

_AliasBase = declarative_base()


class _Town(_AliasBase):
    __tablename__ = "_alias_towns"

    id = Column(Integer, primary_key=True)
    name = Column(String)


class _Person(_AliasBase):
    __tablename__ = "_alias_people"

    id = Column(Integer, primary_key=True)
    townname = Column(String)  # collides with the alias of "town.name"
    town_id = Column(Integer, ForeignKey("_alias_towns.id"))

    town = relationship(_Town)


class _Slot(_AliasBase):
    __tablename__ = "_alias_slots"

    id = Column(Integer, primary_key=True)
    age = Column(Integer)
    age_from = Column(Integer)  # collides with the lower bound name of a range on "age"


def test_parameter_alias_drops_separators():
    assert build_parameter_alias("firstname") == "firstname"
    assert build_parameter_alias("city.name") == "cityname"


def test_one_field_specification_per_entry():
    spec = CriteriaSpecification.from_criteria(Student, {
        "firstname": "Jo%",
        "city.name": ["Athens", "Patras"],
        "enrollment_year": {"from": 20, "to": 25},
        "email": "isNotNull",
    })

    assert [field.path for field in spec.specs] == ["firstname", "city.name", "enrollment_year", "email"]
    assert spec.parameters() == {
        "firstname": "jo%",
        "cityname": ["Athens", "Patras"],
        "enrollment_year_from": 20,
        "enrollment_year_to": 25,
    }


def test_malformed_range_entry_is_dropped():
    spec = CriteriaSpecification.from_criteria(Student, {
        "firstname": "John",
        "enrollment_year": {"from": 20, "to": None},
    })
    assert [field.path for field in spec.specs] == ["firstname"]


def test_colliding_aliases_are_made_unique():
    spec = CriteriaSpecification.from_criteria(_Person, {"town.name": "Athens", "townname": "Patras"})

    assert [field.alias for field in spec.specs] == ["townname", "townname_2"]
    assert spec.parameters() == {"townname": "Athens", "townname_2": "Patras"}


@pytest.mark.parametrize("criteria", [
    {"age": {"from": 20, "to": 25}, "age_from": 99},
    {"age_from": 99, "age": {"from": 20, "to": 25}},
])
def test_range_bound_names_do_not_collide_with_other_entries(criteria):
    spec = CriteriaSpecification.from_criteria(_Slot, criteria)
    params = spec.parameters()

    assert len(params) == 3
    assert sorted(params.values()) == [20, 25, 99]
    range_spec = next(field for field in spec.specs if isinstance(field.constraint, Range))
    assert params[f"{range_spec.alias}_from"] == 20
    assert params[f"{range_spec.alias}_to"] == 25


def test_range_and_colliding_column_filter_together():
    engine = create_engine("sqlite:///:memory:")
    _AliasBase.metadata.create_all(engine)
    session = sessionmaker(bind=engine)()
    try:
        session.add_all([_Slot(id=1, age=20, age_from=99), _Slot(id=2, age=25, age_from=1)])
        session.flush()
        repo = BaseRepository(session, _Slot, strict=False)

        rows = repo.get_by_criteria({"age": {"from": 20, "to": 25}, "age_from": 99})

        assert [row.id for row in rows] == [1]
        assert repo.get_count_by_criteria({"age_from": 1, "age": {"from": 20, "to": 25}}) == 1
    finally:
        session.close()
        engine.dispose()


def test_empty_criteria_is_always_true(students):
    spec = CriteriaSpecification.from_criteria(Student, {})
    assert spec.specs == []
    assert spec.parameters() == {}
    assert all(spec.is_satisfied_by(student) for student in students)
    assert str(spec.to_sql_filter().compile()) in ("true", "1")


def test_sql_filter_uses_named_parameters():
    spec = CriteriaSpecification.from_criteria(Student, {"firstname": "John", "city.name": "Athens"})
    sql = str(spec.to_sql_filter())

    assert ":firstname" in sql
    assert ":cityname" in sql
    assert "EXISTS" in sql


def test_and_operator_combines_specifications(students):
    john, jane, joe, bob = students
    spec = (
        FieldSpecification(resolve_path(Student, "gender"), Equality("M"))
        & FieldSpecification(resolve_path(Student, "email"), IsNull())
    )

    assert isinstance(spec, AndSpecification)
    assert [s for s in students if spec.is_satisfied_by(s)] == [joe]


@pytest.mark.parametrize("criteria", [
    {"firstname": "Jo%"},
    {"firstname": "JANE"},
    {"enrollment_year": [20, 30]},
    {"email": [None, "jane@school.gr"]},
    {"enrollment_year": {"from": 20, "to": 25}},
    {"email": "isNull"},
    {"city.name": "Athens"},
    {"city.name": "pat%", "gender": "F"},
])
def test_in_memory_evaluation_agrees_with_database(db_session, students, criteria):
    spec = CriteriaSpecification.from_criteria(Student, criteria)
    from_db = (
        db_session.query(Student)
        .filter(spec.to_sql_filter())
        .params(**spec.parameters())
        .order_by(Student.id)
        .all()
    )
    in_memory = [student for student in students if spec.is_satisfied_by(student)]

    assert [s.id for s in from_db] == [s.id for s in in_memory]
