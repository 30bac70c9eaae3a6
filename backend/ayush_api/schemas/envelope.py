"""Uniform response envelope and pagination metadata."""

from typing import Any, TypeVar

from pydantic import BaseModel, Field

from ayush_api.schemas.base import CamelModel

T = TypeVar("T")


class PaginationMeta(CamelModel):
    """Pagination metadata returned alongside list results."""

    total: int = Field(..., description="Number of records after filtering")
    limit: int = Field(..., description="Requested page size")
    offset: int = Field(..., description="Requested start index")
    has_more: bool = Field(..., description="Whether records exist past this page")


class Page(BaseModel):
    """One page of filtered results plus its metadata."""

    items: list[Any] = Field(default_factory=list)
    meta: PaginationMeta


class ApiResponse(BaseModel):
    """Envelope wrapping every API response.

    Unset fields are dropped from the JSON output, so a successful read
    carries only ``success`` and ``data``.
    """

    success: bool = Field(..., description="Whether the request succeeded")
    data: Any = Field(None, description="Response payload")
    message: str | None = Field(None, description="Human-readable summary")
    error: str | None = Field(None, description="Error detail")
    meta: PaginationMeta | None = Field(None, description="Pagination metadata")


def paginate(items: list[T], limit: int, offset: int) -> Page:
    """Slice ``items`` into a page.

    ``has_more`` is true when ``offset + limit`` stops short of the total.
    """
    total = len(items)
    end = offset + limit
    return Page(
        items=items[offset:end],
        meta=PaginationMeta(total=total, limit=limit, offset=offset, has_more=end < total),
    )
