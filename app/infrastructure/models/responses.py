"""Standard response envelope models.

Every API response body has exactly the shape of ``StandardResponse``:

    {"status": "success" | "error", "message": str, "lang": str,
     "timestamp": ISO-8601, "data": ... | null}

``data`` is null, a ``SingleItemData`` wrapper, an ``ArrayDataWithMeta``
page, or (for unwrapped single items) the raw payload.
"""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from infrastructure.models.base import InfrastructureModel

T = TypeVar("T")


class ResponseStatus(str, Enum):
    """Envelope discriminator."""

    SUCCESS = "success"
    ERROR = "error"


class PaginationMeta(InfrastructureModel):
    """Pagination block attached to list responses.

    Serialized with camelCase keys (``totalPages``, ``isNextPage``,
    ``isPrevPage``).
    """

    page: int
    total: int
    limit: int
    total_pages: int = Field(alias="totalPages")
    is_next_page: bool = Field(alias="isNextPage")
    is_prev_page: bool = Field(alias="isPrevPage")


class SingleItemData(BaseModel, Generic[T]):
    """Single-resource payload nested one level: ``{"data": item}``."""

    data: T


class ArrayDataWithMeta(BaseModel, Generic[T]):
    """List payload with pagination: ``{"data": [...], "meta": {...}}``."""

    data: list[T]
    meta: PaginationMeta


class StandardResponse(BaseModel):
    """Uniform wrapper of every API response.

    Attributes:
        status: "success" or "error"
        message: Human-readable message already translated into ``lang``
        lang: Locale the message is expressed in
        timestamp: ISO-8601 instant the envelope was built
        data: Payload, or null for errors and empty successes

    Example:
        >>> builder.success_single({"id": "42"}, "user.found", "en").model_dump(mode="json")
        {'status': 'success', 'message': 'User found', 'lang': 'en',
         'timestamp': '2026-01-01T00:00:00.000Z', 'data': {'data': {'id': '42'}}}
    """

    model_config = ConfigDict(use_enum_values=True)

    status: ResponseStatus
    message: str
    lang: str
    timestamp: str
    data: Any = None

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready dict with camelCase pagination keys."""
        return self.model_dump(mode="json", by_alias=True)
