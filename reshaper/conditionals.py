"""
Conditional-inclusion helpers.

Each helper returns either a value or ABSENT, letting a transform body stay
a flat dict literal:

    return clean({
        "id": user.id,
        "email": when(options.get("is_admin"), user.email),
        "posts": when_loaded(user, "posts", PostResource.collection),
    })
"""

from typing import Any, Callable, Optional

from reshaper.accessors import get_field, is_missing
from reshaper.constants import ABSENT


def _resolve(value: Any) -> Any:
    return value() if callable(value) else value


def when(condition: Any, value: Any) -> Any:
    """
    Include ``value`` only when ``condition`` is truthy.

    A callable ``value`` is invoked lazily, so expensive computations run
    only when the field is actually included.

    Returns:
        The (resolved) value, or ABSENT
    """
    if not condition:
        return ABSENT
    return _resolve(value)


def when_or_else(condition: Any, value: Any, default: Any) -> Any:
    """Pick ``value`` or ``default`` by ``condition``; only the chosen branch is resolved."""
    return _resolve(value if condition else default)


def when_loaded(entity: Any, relation: str, transformer: Optional[Callable[[Any], Any]] = None) -> Any:
    """
    Include a relation only when it was loaded on ``entity``.

    A relation that is present but None still counts as loaded. On
    SQLAlchemy instances an unloaded relationship is reported as absent
    without triggering a lazy load.

    Args:
        entity: Owner of the relation
        relation: Relation or attribute name
        transformer: Optional callable applied to the loaded value

    Returns:
        The (transformed) relation value, or ABSENT when not loaded
    """
    value = get_field(entity, relation)
    if value is ABSENT:
        return ABSENT
    if transformer is not None:
        return transformer(value)
    return value


def when_not_null(value: Any, transformer: Optional[Callable[[Any], Any]] = None) -> Any:
    """Include ``value`` unless it is None or ABSENT, optionally transformed."""
    if is_missing(value):
        return ABSENT
    if transformer is not None:
        return transformer(value)
    return value
