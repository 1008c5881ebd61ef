"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.i18n import TranslationRegistry
from infrastructure.responses import ResponseBuilder
from infrastructure.services.providers import (
    get_request_language,
    get_request_registry,
    get_request_settings,
    get_response_builder,
)

# Settings of the running application
SettingsDep = Annotated[Settings, Depends(get_request_settings)]

# Resolved request locale ("en" when the header is absent)
LangDep = Annotated[str, Depends(get_request_language)]

# Envelope builder bound to the application's translation registry
ResponsesDep = Annotated[ResponseBuilder, Depends(get_response_builder)]

# Translation registry owned by the application root
TranslationsDep = Annotated[TranslationRegistry, Depends(get_request_registry)]

__all__ = [
    "SettingsDep",
    "LangDep",
    "ResponsesDep",
    "TranslationsDep",
]
