"""Infrastructure modules for the Portfolio CMS backend.

Centralized infrastructure components:
- configuration: Settings management (Settings, ServerSettings, I18nSettings)
- logging: Structured logging and request context (get_module_logger)
- i18n: Translation registry and request language resolution
- models: Response envelope models
- responses: Envelope builder and pagination
- operations: HTTP exceptions and error classification
- services: Dependency injection providers (SettingsDep, LangDep, ResponsesDep)
"""

from infrastructure.configuration import Settings
from infrastructure.logging import get_module_logger

__all__ = [
    "Settings",
    "get_module_logger",
]
