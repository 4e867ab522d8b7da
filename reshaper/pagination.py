"""
Response-envelope helpers.

wrap() builds the ``{data, meta?}`` envelope for a single resource or a
list. paginate_result() builds the paginated envelope from the result of
a paging query, whatever shape the query layer returned it in.

Recognised container shapes, checked in order:

    {"results": [...], "total": n}   Objection-style page()
    {"data": [...], "total": n}
    {"rows": [...], "count": n}      Sequelize-style findAndCountAll()
    [...]                            bare sequence, total = len(sequence)
"""

import math
import numbers
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from reshaper.accessors import get_field, is_sequence
from reshaper.config.pagination_config import get_default_per_page
from reshaper.constants import (
    ABSENT,
    DEFAULT_PAGE,
    SEQUENCE_FIELDS,
    TOTAL_FIELDS,
    EnvelopeKey,
    OptionKey,
)
from reshaper.utils.logging_utils import StructuredLogger

logger = StructuredLogger(__name__)


def wrap(data: Any, meta: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Wrap ``data`` in a response envelope.

    ``meta`` is included only when it has at least one entry.

    Example:
        wrap({"id": 1})                 -> {"data": {"id": 1}}
        wrap(users, {"total": 100})     -> {"data": [...], "meta": {"total": 100}}
    """
    response: Dict[str, Any] = {EnvelopeKey.DATA: data}
    if meta:
        response[EnvelopeKey.META] = meta
    return response


@dataclass(frozen=True)
class FieldStrategy:
    """Reads one named field off a pagination container."""

    field: str

    def extract(self, container: Any) -> Any:
        value = get_field(container, self.field)
        return ABSENT if value is None else value


SEQUENCE_STRATEGIES: Tuple[FieldStrategy, ...] = tuple(FieldStrategy(f) for f in SEQUENCE_FIELDS)
TOTAL_STRATEGIES: Tuple[FieldStrategy, ...] = tuple(FieldStrategy(f) for f in TOTAL_FIELDS)


def locate_items(container: Any) -> Any:
    """
    Find the item sequence in a pagination container.

    Falls back to the container itself when no recognised field is present.
    The result is not guaranteed to be a sequence.
    """
    for strategy in SEQUENCE_STRATEGIES:
        value = strategy.extract(container)
        if value is not ABSENT:
            return value
    return container


def locate_total(container: Any, items: Any) -> Any:
    """Find the total count, falling back to the length of ``items``."""
    for strategy in TOTAL_STRATEGIES:
        value = strategy.extract(container)
        if value is not ABSENT:
            return value
    return len(items) if is_sequence(items) else 0


def _is_finite_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool) and math.isfinite(value)


def compute_last_page(total: Any, per_page: Any) -> int:
    """
    Number of the last page, never less than 1.

    Zero or missing page sizes, and totals or page sizes that are not
    finite numbers, report a single page.
    """
    if not _is_finite_number(total) or not _is_finite_number(per_page) or not per_page:
        return 1
    return max(math.ceil(total / per_page), 1)


def split_options(options: Optional[Mapping[str, Any]]) -> Tuple[Any, Any, Dict[str, Any]]:
    """
    Separate paginate's own options from those forwarded to transform.

    Returns:
        (page, per_page, transform_options)
    """
    transform_options = dict(options or {})
    page = transform_options.pop(OptionKey.PAGE, None)
    per_page = transform_options.pop(OptionKey.PER_PAGE, None)
    per_page_alias = transform_options.pop(OptionKey.PER_PAGE_ALIAS, None)

    if page is None:
        page = DEFAULT_PAGE
    if per_page is None:
        per_page = per_page_alias
    if per_page is None:
        per_page = get_default_per_page()

    return page, per_page, transform_options


def paginate_result(
    result: Any,
    options: Optional[Mapping[str, Any]],
    collect: Callable[[Sequence[Any], Dict[str, Any]], List[Any]],
) -> Dict[str, Any]:
    """
    Build ``{data, meta}`` for a page of results.

    Args:
        result: Pagination container (see module docstring)
        options: ``page`` and ``per_page`` are consumed here, everything else
            is forwarded to the per-item transform
        collect: Collection operation of the transformer doing the per-item work

    Returns:
        Envelope with ``meta`` = {current_page, per_page, total, last_page}
    """
    page, per_page, transform_options = split_options(options)

    items = locate_items(result)
    total = locate_total(result, items)
    if not is_sequence(items):
        logger.debug(
            "Pagination container holds no sequence, using an empty page",
            extra={"input_type": type(items).__name__},
        )
        items = []

    last_page = compute_last_page(total, per_page)
    logger.debug(
        "Paginating results",
        extra={"page": page, "per_page": per_page, "total": total, "count": len(items)},
    )

    return {
        EnvelopeKey.DATA: collect(items, transform_options),
        EnvelopeKey.META: {
            EnvelopeKey.CURRENT_PAGE: page,
            EnvelopeKey.PER_PAGE: per_page,
            EnvelopeKey.TOTAL: total,
            EnvelopeKey.LAST_PAGE: last_page,
        },
    }
