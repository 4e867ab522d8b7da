"""
Utility functions and helpers.
"""

from .logging_utils import StructuredLogger, transform_context, current_resource

__all__ = ["StructuredLogger", "transform_context", "current_resource"]
