"""Pagination arithmetic and list query parameters."""

import math
from enum import Enum
from typing import Optional

from pydantic import Field

from infrastructure.models import InfrastructureModel, PaginationMeta


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class PaginationParams(InfrastructureModel):
    """Query parameters accepted by list endpoints.

    Attributes:
        page: 1-indexed page number
        limit: Page size, between 1 and 100
        search: Optional free-text filter
        sort_order: "asc" or "desc"
    """

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    search: Optional[str] = None
    sort_order: SortOrder = SortOrder.DESC

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def build_pagination_meta(total: int, page: int, limit: int) -> PaginationMeta:
    """Compute the pagination block of a list response.

    ``totalPages = ceil(total / limit)``, ``isNextPage = page < totalPages``,
    ``isPrevPage = page > 1``.

    Raises:
        ValueError: If ``limit`` is below 1. Division by a zero page size is a
            caller error.
    """
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")

    total_pages = math.ceil(total / limit)
    return PaginationMeta(
        page=page,
        total=total,
        limit=limit,
        total_pages=total_pages,
        is_next_page=page < total_pages,
        is_prev_page=page > 1,
    )
