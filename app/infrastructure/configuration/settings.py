"""Portfolio CMS configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.infrastructure import (
    I18nSettings,
    ServerSettings,
)


class Settings(BaseSettings):
    """Portfolio CMS configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object.
    Settings are organized by concern:

    - **server**: HTTP runtime configuration (CORS, rate limits)
    - **i18n**: Translation dictionaries and language resolution

    Environment Variables:
        APP_ENV: Deployment environment ("production" enables redaction)
        APP_NAME: Application name used in logs
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA for deployment tracking

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.is_production:
            # Production-specific logic...
        default_locale = settings.i18n.DEFAULT_LOCALE
        ```
    """

    # Application-level settings
    APP_ENV: str = "development"
    APP_NAME: str = "portfolio-cms"
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    # Infrastructure settings
    server: ServerSettings
    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if APP_ENV is "production" (case-insensitive), False otherwise.
        """
        return self.APP_ENV.strip().lower() == "production"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "server": ServerSettings,
            "i18n": I18nSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
