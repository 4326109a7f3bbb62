"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Response schemas for the catalog API.

==============================================================================
"""

from .common import (
    ErrorDetail,
    ErrorResponse,
    PaginatedResponse,
    PaginationInfo,
    ResponseMetadata,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "PaginatedResponse",
    "PaginationInfo",
    "ResponseMetadata",
]
