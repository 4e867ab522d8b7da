"""
Entity access shared by every helper.

Entities reach reshaper as plain mappings, SQLAlchemy mapped instances,
pydantic models, dataclasses or arbitrary objects. These functions read
them uniformly and report ABSENT (never None) for a field that was not set,
so an explicit None stays distinguishable from a missing value.
"""

import dataclasses
import inspect
from collections.abc import Mapping
from typing import Any, Dict, Optional

from pydantic import BaseModel
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import InstanceState

from reshaper.constants import ABSENT, Absent


def is_missing(value: Any) -> bool:
    """True for None and the absent marker."""
    return value is None or value is ABSENT


def is_sequence(value: Any) -> bool:
    """True for list and tuple instances, the only inputs treated as collections."""
    return isinstance(value, (list, tuple))


def is_record(value: Any) -> bool:
    """True for mappings, the only inputs clean() reshapes."""
    return isinstance(value, Mapping)


def _instance_state(entity: Any) -> Optional[InstanceState]:
    if isinstance(entity, type):
        return None
    state = sa_inspect(entity, raiseerr=False)
    return state if isinstance(state, InstanceState) else None


def get_field(entity: Any, name: str) -> Any:
    """
    Read ``name`` from ``entity``.

    Returns ABSENT when the entity has no such field. For SQLAlchemy
    instances an unloaded relationship also counts as absent, and no lazy
    load is emitted to find out.

    Args:
        entity: Mapping, mapped instance or plain object
        name: Field, attribute or relationship name

    Returns:
        The stored value (possibly None) or ABSENT
    """
    if is_missing(entity) or isinstance(entity, (list, tuple, str, bytes)):
        return ABSENT

    if isinstance(entity, Mapping):
        return entity.get(name, ABSENT)

    state = _instance_state(entity)
    if state is not None and name in state.mapper.relationships and name in state.unloaded:
        return ABSENT

    value = getattr(entity, name, ABSENT)
    if inspect.isroutine(value):
        # Methods such as dict.items or Query.count are not data
        return ABSENT
    return value


def as_record(entity: Any) -> Optional[Dict[str, Any]]:
    """
    Shallow-copy a record-like entity into a dict.

    Args:
        entity: Mapping, pydantic model, mapped instance, dataclass instance
            or plain object (public instance attributes)

    Returns:
        New dict of field name to value, or None when the entity is not record-like
    """
    if isinstance(entity, Absent) or entity is None:
        return None

    if isinstance(entity, Mapping):
        return dict(entity)

    if isinstance(entity, BaseModel):
        return {name: getattr(entity, name) for name in type(entity).model_fields}

    state = _instance_state(entity)
    if state is not None:
        # Detached instances cannot refresh expired columns
        unloaded = state.unloaded if state.detached else frozenset()
        record = {
            attr.key: getattr(entity, attr.key)
            for attr in state.mapper.column_attrs
            if attr.key not in unloaded
        }
        for rel in state.mapper.relationships:
            if rel.key not in state.unloaded:
                record[rel.key] = getattr(entity, rel.key)
        return record

    if dataclasses.is_dataclass(entity) and not isinstance(entity, type):
        return {field.name: getattr(entity, field.name) for field in dataclasses.fields(entity)}

    attributes = None if isinstance(entity, type) else getattr(entity, "__dict__", None)
    if isinstance(attributes, dict):
        return {key: value for key, value in attributes.items() if not key.startswith("_")}

    return None
