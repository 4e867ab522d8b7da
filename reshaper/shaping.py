"""
Object-shaping helpers.

Pure record-to-record functions. Inputs are never mutated; every helper
returns a new dict. Records may be mappings or any record-like entity
understood by reshaper.accessors (pydantic models, SQLAlchemy instances,
dataclasses).
"""

from typing import Any, Dict, Iterable, Mapping, Optional

from reshaper.accessors import as_record, get_field, is_missing, is_record
from reshaper.constants import ABSENT
from reshaper.utils.logging_utils import StructuredLogger

logger = StructuredLogger(__name__)


def clean(record: Any) -> Any:
    """
    Drop every entry whose value is ABSENT.

    None values are kept, as is key order. Input that is not a mapping is
    returned unchanged.
    """
    if not is_record(record):
        return record
    return {key: value for key, value in record.items() if value is not ABSENT}


def merge(*records: Any) -> Dict[str, Any]:
    """
    Shallow-merge records left to right, then clean the result.

    None and ABSENT arguments are skipped, so conditional sections can be
    passed straight through:

        merge(
            {"id": user.id},
            when(is_admin, {"email": user.email}),
        )
    """
    merged: Dict[str, Any] = {}
    for record in records:
        if is_missing(record):
            continue
        fields = as_record(record)
        if fields is None:
            logger.debug(
                "Skipping non-record merge argument",
                extra={"input_type": type(record).__name__},
            )
            continue
        merged.update(fields)
    return clean(merged)


def pick(record: Any, fields: Optional[Iterable[str]]) -> Dict[str, Any]:
    """
    Keep only ``fields``, in the order given.

    Fields the record does not have are skipped rather than set to None.
    """
    if is_missing(record) or not fields:
        return {}

    picked: Dict[str, Any] = {}
    for field in fields:
        value = get_field(record, field)
        if value is not ABSENT:
            picked[field] = value
    return picked


def omit(record: Any, fields: Optional[Iterable[str]]) -> Dict[str, Any]:
    """Shallow copy of ``record`` without ``fields``."""
    source = as_record(record)
    if source is None:
        return {}
    if not fields:
        return source

    excluded = set(fields)
    return {key: value for key, value in source.items() if key not in excluded}


def rename(record: Any, key_map: Optional[Mapping[str, str]]) -> Dict[str, Any]:
    """
    Copy ``record`` with keys renamed through ``key_map``.

    Keys missing from ``key_map`` pass through unchanged; the original key
    order is kept. When two keys end up with the same name the later one wins.
    """
    source = as_record(record)
    if source is None:
        return {}
    if not key_map:
        return source

    return {key_map.get(key, key): value for key, value in source.items()}
