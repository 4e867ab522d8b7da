"""
Structured Logging Utilities

Adds structured context to reshaper's log messages. The name of the
resource currently transforming is tracked in a ContextVar so nested
collection/paginate calls log which resource they belong to.
"""

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterator, Optional


# Resource names, outermost first, for the transform currently running
_resource_stack: ContextVar[tuple] = ContextVar('reshaper_resource_stack', default=())


class StructuredLogger:
    """
    Wrapper around standard logger that adds the active resource context.

    Usage:
        logger = StructuredLogger(__name__)
        logger.debug("Collection input ignored", extra={"input_type": "dict"})
    """

    def __init__(self, name: str):
        """
        Initialize structured logger.

        Args:
            name: Logger name (typically __name__)
        """
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        context: Dict[str, Any] = {}
        stack = _resource_stack.get()
        if stack:
            context["resource"] = stack[-1]
            context["resource_path"] = ".".join(stack)
        if extra:
            context.update(extra)
        return context

    def isEnabledFor(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log debug message with structured context."""
        self.logger.debug(message, extra=self._add_context(extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log info message with structured context."""
        self.logger.info(message, extra=self._add_context(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log warning message with structured context."""
        self.logger.warning(message, extra=self._add_context(extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        """Log error message with structured context."""
        self.logger.error(message, extra=self._add_context(extra), exc_info=exc_info)


@contextmanager
def transform_context(resource_name: str) -> Iterator[None]:
    """
    Mark ``resource_name`` as the resource being transformed.

    Nested contexts stack, so a PostResource collection built inside a
    UserResource transform logs with resource_path "UserResource.PostResource".

    Example:
        with transform_context("UserResource"):
            logger.debug("Transforming collection")
    """
    token = _resource_stack.set(_resource_stack.get() + (resource_name,))
    try:
        yield
    finally:
        _resource_stack.reset(token)


def current_resource() -> Optional[str]:
    """Name of the innermost resource being transformed, if any."""
    stack = _resource_stack.get()
    return stack[-1] if stack else None
