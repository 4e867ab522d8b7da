"""
Envelope Response DTOs

DTOs for the ``{data, meta}`` envelopes built by wrap() and paginate().
"""

from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PaginationMeta(BaseModel):
    """
    Pagination metadata of a paginated envelope.
    """

    current_page: int = Field(description="Page number of this result set")
    per_page: int = Field(description="Page size used for the query")
    total: int = Field(description="Total number of items across all pages")
    last_page: int = Field(ge=1, description="Number of the last page, at least 1")

    model_config = ConfigDict(from_attributes=True)


class PaginatedResponse(BaseModel, Generic[T]):
    """
    Response DTO for paginate() output.

    Parametrize with the item shape, e.g. ``PaginatedResponse[UserOut]``.
    """

    data: List[T] = Field(description="Transformed items of this page")
    meta: PaginationMeta = Field(description="Pagination metadata")


class WrappedResponse(BaseModel, Generic[T]):
    """
    Response DTO for wrap() output.

    ``meta`` is None when wrap() omitted it; serialize with
    ``exclude_none=True`` to reproduce the envelope exactly.
    """

    data: T = Field(description="Wrapped payload")
    meta: Optional[Dict[str, Any]] = Field(None, description="Optional response metadata")
