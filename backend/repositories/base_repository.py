"""
Base repository providing CRUD operations and criteria-based querying.
"""

from collections.abc import Mapping
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import inspect
from sqlalchemy.orm import Query, Session

from config import db_config
from constants import CriteriaTokens
from domain.value_objects.page_request import PageRequest
from dtos.request.search_request import SearchRequest
from dtos.response.page_response import PageResponse
from exceptions import AttributeResolutionError
from utils.error_handlers import translate_persistence_errors
from utils.logging_utils import StructuredLogger, log_operation
from .path_resolver import resolve_path
from .specifications import CriteriaSpecification

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Generic base repository bound to one entity class.

    All specific repositories should inherit from this class. The session is
    injected by the caller, who also owns commit and rollback; write
    operations only flush.

    Criteria maps go from field path to constraint value:
        {"firstname": "Jo%"}                     case-insensitive prefix match
        {"city.name": "Athens"}                  equality on a nested attribute
        {"enrollment_year": [2020, 2021]}        membership
        {"birth_date": {"from": d1, "to": d2}}   inclusive range
        {"email": "isNull"} / "isNotNull"        null checks
    """

    def __init__(self, db: Session, model: Type[T], strict: Optional[bool] = None):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
            strict: Raise on malformed range criteria instead of skipping them
                (defaults to SCHOOLAPP_STRICT_CRITERIA)
        """
        self.db = db
        self.model = model
        self.strict = db_config.STRICT_CRITERIA if strict is None else strict
        self.logger = StructuredLogger(__name__, entity=model.__name__)

    @log_operation("insert")
    @translate_persistence_errors("insert")
    def insert(self, entity: T) -> T:
        """
        Register a new entity for creation.

        Args:
            entity: Model instance to create

        Returns:
            The same instance, with its id assigned by the flush
        """
        self.db.add(entity)
        self.db.flush()
        return entity

    @log_operation("update")
    @translate_persistence_errors("update")
    def update(self, entity: T) -> Optional[T]:
        """
        Merge an entity's state into an existing record.

        Args:
            entity: Model instance carrying the id of the record to update

        Returns:
            The merged instance, or None if no record has that id (nothing is written)
        """
        if self.get_by_id(entity.id) is None:
            self.logger.debug("Update skipped, entity does not exist", extra={"entity_id": entity.id})
            return None

        merged = self.db.merge(entity)
        self.db.flush()
        return merged

    @log_operation("delete")
    @translate_persistence_errors("delete")
    def delete(self, id: Any) -> None:
        """
        Delete a record by its ID; a missing record is ignored.

        Args:
            id: Primary key value
        """
        entity = self.get_by_id(id)
        if entity is None:
            return
        self.db.delete(entity)
        self.db.flush()

    @translate_persistence_errors("get_by_id")
    def get_by_id(self, id: Any) -> Optional[T]:
        """
        Retrieve a record by its ID.

        Args:
            id: Primary key value

        Returns:
            Model instance or None if not found
        """
        if id is None:
            return None
        return self.db.get(self.model, id)

    @translate_persistence_errors("find_by_field")
    def find_by_field(self, field_name: str, value: Any) -> Optional[T]:
        """
        Find the first record whose top-level field equals a value.

        Args:
            field_name: Column attribute name (nested paths are not supported)
            value: Value compared with plain equality, no pattern matching

        Returns:
            First matching model instance or None

        Raises:
            AttributeResolutionError: If field_name is nested or not a column
        """
        if CriteriaTokens.PATH_SEPARATOR in field_name:
            raise AttributeResolutionError(
                self.model.__name__, field_name, field_name,
                f"find_by_field does not support nested paths: '{field_name}'"
            )
        column = resolve_path(self.model, field_name).column
        return self.db.query(self.model).filter(column == value).first()

    @translate_persistence_errors("count")
    def count(self) -> int:
        """
        Count total records.

        Returns:
            Total number of records
        """
        return self.db.query(self.model).count()

    @translate_persistence_errors("get_count_by_criteria")
    def get_count_by_criteria(self, criteria: Mapping) -> int:
        """
        Count records matching a criteria map.

        Raises:
            AttributeResolutionError: If a field path does not resolve
        """
        return self._criteria_query(criteria).count()

    def get_all(self) -> List[T]:
        """Retrieve all records, unfiltered."""
        return self.get_by_criteria({})

    @translate_persistence_errors("get_by_criteria")
    def get_by_criteria(self, criteria: Mapping) -> List[T]:
        """
        Retrieve all records matching a criteria map.

        Args:
            criteria: Mapping of field path to constraint value

        Returns:
            List of matching model instances, in storage order

        Raises:
            AttributeResolutionError: If a field path does not resolve
            InvalidCriteriaError: If strict and a range is malformed
        """
        return self._criteria_query(criteria).all()

    @translate_persistence_errors("get_by_criteria_paginated")
    def get_by_criteria_paginated(
        self,
        criteria: Mapping,
        page: Optional[int],
        size: Optional[int]
    ) -> List[T]:
        """
        Retrieve one page of records matching a criteria map.

        Results are ordered by primary key so consecutive pages do not overlap.

        Args:
            criteria: Mapping of field path to constraint value
            page: Zero-based page index
            size: Page size; when page or size is None every match is returned

        Returns:
            List of model instances on the requested page
        """
        query = self._criteria_query(criteria).order_by(*inspect(self.model).primary_key)
        if page is not None and size is not None:
            window = PageRequest(page=page, size=size)
            query = query.offset(window.offset).limit(window.limit)
        return query.all()

    def get_page(self, request: SearchRequest) -> PageResponse:
        """
        Retrieve a page of matches together with the total match count.

        Args:
            request: Validated search request

        Returns:
            PageResponse with items, total count and page metadata
        """
        total_count = self.get_count_by_criteria(request.criteria)
        items = self.get_by_criteria_paginated(request.criteria, request.page, request.size)
        return PageResponse.build(items, total_count, request.page, request.size)

    def _criteria_query(self, criteria: Optional[Mapping]) -> Query:
        spec = CriteriaSpecification.from_criteria(self.model, criteria or {}, strict=self.strict)
        self.logger.debug("Criteria translated", extra={
            "criteria_keys": [field.path for field in spec.specs],
        })
        return self.db.query(self.model).filter(spec.to_sql_filter()).params(**spec.parameters())
