"""
==============================================================================
Common Schemas Module
==============================================================================

Response envelopes shared by the listing and search endpoints.

Envelope:
--------
{
  "data": [...],
  "pagination": {"page", "pageSize", "totalCount", "totalPages"},
  "metadata": {"cached", "cacheAge", "source", "searchTime",
               "dataFreshness", "timestamp"}
}

==============================================================================
"""

from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_serializer
from pydantic.alias_generators import to_camel

from catalog_api.catalog import SearchResult


T = TypeVar("T")


class CamelModel(BaseModel):
    """Response model written with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PaginationInfo(CamelModel):
    """Page position and totals."""
    page: int = Field(ge=1)
    page_size: int = Field(ge=1, le=100)
    total_count: int = Field(ge=0)
    total_pages: int = Field(ge=0)


class ResponseMetadata(CamelModel):
    """
    Descriptive labels attached to a response.

    None-valued members are left out of the JSON so each endpoint only
    reports what it sets.
    """
    cached: bool
    source: str
    cache_age: Optional[str] = None
    search_time: Optional[str] = None
    data_freshness: Optional[str] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @model_serializer(mode="wrap")
    def _drop_unset_labels(self, handler):
        data = handler(self)
        return {key: value for key, value in data.items() if value is not None}


class PaginatedResponse(CamelModel, Generic[T]):
    """Paginated list response."""
    data: List[T]
    pagination: PaginationInfo
    metadata: ResponseMetadata

    @classmethod
    def from_result(cls, result: SearchResult, **labels: Any) -> "PaginatedResponse":
        """
        Factory method wrapping a SearchResult.

        Args:
            result: Engine output
            **labels: Extra ResponseMetadata fields (cache_age, search_time, ...)
        """
        return cls(
            data=result.products,
            pagination=PaginationInfo(
                page=result.page,
                page_size=result.page_size,
                total_count=result.total_count,
                total_pages=result.total_pages,
            ),
            metadata=ResponseMetadata(
                cached=result.cached,
                source=result.source,
                **labels,
            ),
        )


class ErrorDetail(BaseModel):
    """Error body, documented for OpenAPI."""
    code: str
    message: str
    timestamp: str
    path: Optional[str] = None
    details: Optional[Dict[str, Any]] = None


class ErrorResponse(BaseModel):
    """Standard error response wrapper."""
    success: bool = Field(default=False)
    error: ErrorDetail
