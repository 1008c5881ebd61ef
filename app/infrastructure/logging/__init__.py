"""Structured logging infrastructure.

Centralized structlog configuration for the portfolio CMS backend.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_request_context(): Context manager for request-scoped logging
    - get_correlation_id(): Get current correlation ID from context
    - clear_request_context(): Clear all request context

Example:
    from infrastructure.logging import configure_logging, get_module_logger

    configure_logging()
    logger = get_module_logger()
    logger.info("module_initialized")
"""

from infrastructure.logging.setup import configure_logging, get_module_logger
from infrastructure.logging.context import (
    bind_request_context,
    clear_request_context,
    get_correlation_id,
    new_correlation_id,
)
from infrastructure.logging.formatters import (
    SENSITIVE_PATTERNS,
    add_app_context,
    mask_sensitive_data,
    truncate_large_values,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_request_context",
    "clear_request_context",
    "get_correlation_id",
    "new_correlation_id",
    "SENSITIVE_PATTERNS",
    "add_app_context",
    "mask_sensitive_data",
    "truncate_large_values",
]
