"""
Pagination Configuration

Pagination defaults can be tuned per deployment through environment
variables. Values are read at call time so tests and long-running
processes pick up changes without re-importing.

Variables:
- RESHAPER_DEFAULT_PER_PAGE: page size used when options omit per_page (default 15)
- RESHAPER_MAX_PER_PAGE: upper bound accepted by the HTTP per_page parameter (default 100)
"""
import os
import logging

from reshaper.constants import DEFAULT_PER_PAGE, DEFAULT_MAX_PER_PAGE, EnvVar

logger = logging.getLogger(__name__)


def _read_positive_int(name: str, default: int) -> int:
    """
    Read a positive integer from the environment.

    Args:
        name: Environment variable name
        default: Value used when the variable is unset or invalid

    Returns:
        Parsed value, or ``default``
    """
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default

    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not an integer, using {default}")
        return default

    if value < 1:
        logger.warning(f"Ignoring {name}={value}: must be >= 1, using {default}")
        return default

    return value


def get_default_per_page() -> int:
    """Page size applied when paginate options do not name one."""
    return _read_positive_int(EnvVar.DEFAULT_PER_PAGE, DEFAULT_PER_PAGE)


def get_max_per_page() -> int:
    """Largest per_page the HTTP integration accepts."""
    return max(_read_positive_int(EnvVar.MAX_PER_PAGE, DEFAULT_MAX_PER_PAGE), get_default_per_page())
