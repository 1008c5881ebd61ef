"""Infrastructure models and response envelope.

Exports:
    StandardResponse: The uniform {status, message, lang, timestamp, data} envelope
    SingleItemData: {data} wrapper for single resources
    ArrayDataWithMeta: {data, meta} wrapper for lists
    PaginationMeta: Pagination block of list responses
    ResponseStatus: "success" / "error" discriminator
    InfrastructureModel: Base model configuration for infrastructure components
"""

from infrastructure.models.base import InfrastructureModel
from infrastructure.models.responses import (
    ArrayDataWithMeta,
    PaginationMeta,
    ResponseStatus,
    SingleItemData,
    StandardResponse,
)

__all__ = [
    "ArrayDataWithMeta",
    "InfrastructureModel",
    "PaginationMeta",
    "ResponseStatus",
    "SingleItemData",
    "StandardResponse",
]
