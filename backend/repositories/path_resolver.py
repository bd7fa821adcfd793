"""
Field path resolution over the ORM mapping.

A dotted path such as "city.name" is resolved left to right against the
mapper of each entity it passes through. Relationship hops are kept so a
predicate on the final column can be wrapped in has()/any() and still read
as a single condition on the root entity.
"""

from dataclasses import dataclass
from typing import Any, List, Tuple

from sqlalchemy import inspect
from sqlalchemy.exc import NoInspectionAvailable

from constants import CriteriaTokens
from exceptions import AttributeResolutionError


@dataclass(frozen=True)
class ResolvedPath:
    """A field path resolved to its relationship hops and terminal column."""

    path: str
    hops: Tuple[Any, ...]
    column: Any

    @property
    def is_nested(self) -> bool:
        return bool(self.hops)

    def wrap(self, predicate):
        """
        Lift a predicate on the terminal column to the root entity.

        Scalar relationships use has(), collections use any(), innermost first.
        """
        for hop in reversed(self.hops):
            if hop.property.uselist:
                predicate = hop.any(predicate)
            else:
                predicate = hop.has(predicate)
        return predicate

    def values_of(self, entity) -> List[Any]:
        """
        Collect the terminal values reachable from an entity along this path.

        Missing related objects contribute nothing; collections contribute
        one value per member.
        """
        objects = [entity]
        for hop in self.hops:
            reached = []
            for obj in objects:
                target = getattr(obj, hop.key)
                if target is None:
                    continue
                if hop.property.uselist:
                    reached.extend(target)
                else:
                    reached.append(target)
            objects = reached
        return [getattr(obj, self.column.key) for obj in objects]


def resolve_path(model, path: str) -> ResolvedPath:
    """
    Resolve a dotted field path against a mapped entity class.

    Args:
        model: Mapped entity class the path starts from
        path: Attribute path, e.g. "lastname" or "city.name"

    Returns:
        ResolvedPath with relationship hops and the terminal column attribute

    Raises:
        AttributeResolutionError: If a segment is unknown, a column is used as
            an intermediate segment, or the path ends on a relationship
    """
    root_name = _entity_name(model)
    segments = path.split(CriteriaTokens.PATH_SEPARATOR) if path else []
    if not segments or any(not segment for segment in segments):
        raise AttributeResolutionError(root_name, path, path, f"Empty segment in field path '{path}' of {root_name}")

    current = model
    hops = []
    for index, segment in enumerate(segments):
        mapper = _mapper_for(current, path, segment)
        is_last = index == len(segments) - 1

        if segment in mapper.relationships:
            if is_last:
                raise AttributeResolutionError(
                    _entity_name(current), path, segment,
                    f"Path '{path}' ends on relationship '{segment}'; name one of its attributes"
                )
            hops.append(getattr(current, segment))
            current = mapper.relationships[segment].mapper.class_
        elif segment in mapper.column_attrs:
            if not is_last:
                raise AttributeResolutionError(
                    _entity_name(current), path, segment,
                    f"'{segment}' in path '{path}' is a column and has no nested attributes"
                )
            return ResolvedPath(path=path, hops=tuple(hops), column=getattr(current, segment))
        else:
            raise AttributeResolutionError(_entity_name(current), path, segment)


def _mapper_for(model, path: str, segment: str):
    try:
        return inspect(model)
    except NoInspectionAvailable:
        raise AttributeResolutionError(
            _entity_name(model), path, segment, f"{_entity_name(model)} is not a mapped entity"
        )


def _entity_name(model) -> str:
    return getattr(model, '__name__', repr(model))
