"""Response envelope construction.

Exports:
    ResponseBuilder: Builds StandardResponse envelopes with translated messages
    PaginationParams: Query parameters of list endpoints
    build_pagination_meta: Pagination arithmetic
    is_translation_key: Key-vs-literal message heuristic
"""

from infrastructure.responses.builder import (
    DEFAULT_SUCCESS_KEY,
    ResponseBuilder,
    is_translation_key,
    utc_timestamp,
)
from infrastructure.responses.pagination import (
    PaginationParams,
    SortOrder,
    build_pagination_meta,
)

__all__ = [
    "DEFAULT_SUCCESS_KEY",
    "ResponseBuilder",
    "PaginationParams",
    "SortOrder",
    "build_pagination_meta",
    "is_translation_key",
    "utc_timestamp",
]
