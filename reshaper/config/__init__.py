"""
Runtime configuration read from the environment.
"""

from .pagination_config import get_default_per_page, get_max_per_page

__all__ = ["get_default_per_page", "get_max_per_page"]
