"""
FastAPI integration.

Provides a query-parameter dependency that produces paginate() options and
an endpoint decorator that turns reshaper errors into HTTP responses.

Example:
    @router.get("/users", response_model=PaginatedResponse[UserOut])
    @handle_resource_errors("List users")
    def list_users(params: PaginationParams = Depends(), db: Session = Depends(get_db)):
        query = db.query(User)
        rows = query.offset(params.offset).limit(params.limit).all()
        return UserResource.paginate({"rows": rows, "count": query.count()}, params.as_options())
"""

import inspect
import logging
from functools import wraps
from typing import Any, Callable, Dict, Optional

from fastapi import HTTPException, Query

from reshaper.config.pagination_config import get_default_per_page, get_max_per_page
from reshaper.constants import DEFAULT_PAGE, HTTPStatus, OptionKey
from reshaper.exceptions import ReshaperError, TransformNotImplementedError

logger = logging.getLogger(__name__)


class PaginationParams:
    """
    Dependency reading ``page`` and ``per_page`` query parameters.

    A missing ``per_page`` uses the configured default; values above the
    configured maximum are clamped to it.
    """

    def __init__(
        self,
        page: int = Query(DEFAULT_PAGE, ge=1, description="Page number, starting at 1"),
        per_page: Optional[int] = Query(None, ge=1, description="Items per page"),
    ):
        max_per_page = get_max_per_page()
        if per_page is None:
            per_page = get_default_per_page()
        elif per_page > max_per_page:
            logger.debug(f"Clamping per_page={per_page} to maximum {max_per_page}")
            per_page = max_per_page

        self.page = page
        self.per_page = per_page

    @property
    def offset(self) -> int:
        """Number of rows to skip for this page."""
        return (self.page - 1) * self.per_page

    @property
    def limit(self) -> int:
        """Number of rows to fetch for this page."""
        return self.per_page

    def as_options(self, **transform_options: Any) -> Dict[str, Any]:
        """
        Options mapping for paginate(); extra keyword arguments are
        forwarded to the resource's transform.
        """
        return {
            **transform_options,
            OptionKey.PAGE: self.page,
            OptionKey.PER_PAGE: self.per_page,
        }


def handle_resource_errors(operation_name: str):
    """
    Decorator converting reshaper errors raised by an endpoint into HTTPException.

    Args:
        operation_name: Human-readable name of the operation (e.g., "List users")

    Returns:
        Decorated function that handles errors uniformly

    Example:
        @router.get("/users/{user_id}")
        @handle_resource_errors("Get user")
        def get_user(user_id: int):
            return UserResource.wrap(UserResource.make(load_user(user_id)))
    """
    def to_http_error(e: Exception) -> HTTPException:
        if isinstance(e, TransformNotImplementedError):
            logger.error(f"{operation_name} - Resource not implemented: {e.message}", exc_info=True)
            return HTTPException(
                status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                detail=f"{operation_name} failed: response shape for {e.resource_name} is not defined"
            )
        if isinstance(e, ReshaperError):
            logger.error(f"{operation_name} - Reshaper error: {e.message}", exc_info=True)
            return HTTPException(
                status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                detail=f"{operation_name} failed: {e.message}"
            )
        logger.error(f"{operation_name} - Unexpected error: {e}", exc_info=True)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"{operation_name} failed. Please check server logs or contact support."
        )

    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                # Preserve status code and detail
                raise
            except Exception as e:
                raise to_http_error(e) from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise to_http_error(e) from e

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
