"""Server and i18n infrastructure settings."""

from typing import Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Server and application runtime configuration.

    Environment Variables:
        BACKEND_URL: Backend API base URL (default: http://127.0.0.1:8000)
        CORS_ALLOWED_ORIGINS: JSON list of origins allowed by CORS
        RATE_LIMIT_DEFAULT: slowapi limit applied to system endpoints

    Example:
        ```python
        from infrastructure.services import get_settings

        origins = get_settings().server.CORS_ALLOWED_ORIGINS
        ```
    """

    BACKEND_URL: str = Field(default="http://127.0.0.1:8000", alias="BACKEND_URL")
    CORS_ALLOWED_ORIGINS: list[str] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        alias="CORS_ALLOWED_ORIGINS",
    )
    RATE_LIMIT_DEFAULT: str = Field(default="50/minute", alias="RATE_LIMIT_DEFAULT")


class I18nSettings(InfrastructureSettings):
    """Translation and language resolution configuration.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale used when a request names none (default: en)
        I18N_SUPPORTED_LOCALES: JSON list of locale dictionaries to load
        I18N_TRANSLATIONS_DIR: Extra directory searched first for <locale>.json
        I18N_LANGUAGE_HEADER: Request header carrying the locale
        I18N_NEGOTIATE: Parse quality values instead of using the raw header
        I18N_PRELOAD: Load dictionaries during application startup

    Example:
        ```python
        from infrastructure.services import get_settings

        default_locale = get_settings().i18n.DEFAULT_LOCALE
        ```
    """

    DEFAULT_LOCALE: str = Field(default="en", alias="I18N_DEFAULT_LOCALE")
    SUPPORTED_LOCALES: list[str] = Field(
        default_factory=lambda: ["en", "ar"], alias="I18N_SUPPORTED_LOCALES"
    )
    TRANSLATIONS_DIR: Optional[str] = Field(default=None, alias="I18N_TRANSLATIONS_DIR")
    LANGUAGE_HEADER: str = Field(default="accept-language", alias="I18N_LANGUAGE_HEADER")
    NEGOTIATE: bool = Field(default=False, alias="I18N_NEGOTIATE")
    PRELOAD: bool = Field(default=False, alias="I18N_PRELOAD")

    @field_validator("DEFAULT_LOCALE")
    @classmethod
    def normalize_default_locale(cls, v: str) -> str:
        """Store the default locale lower-cased, as lookups are."""
        return v.strip().lower() or "en"

    @field_validator("SUPPORTED_LOCALES")
    @classmethod
    def normalize_supported_locales(cls, v: list[str]) -> list[str]:
        """Lower-case locales and drop blanks."""
        return [locale.strip().lower() for locale in v if locale.strip()]
