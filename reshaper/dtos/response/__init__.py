"""
Response DTOs

Typed descriptions of the ``wrap`` and ``paginate`` envelopes.
"""

from .envelope_response import PaginationMeta, PaginatedResponse, WrappedResponse

__all__ = ["PaginationMeta", "PaginatedResponse", "WrappedResponse"]
