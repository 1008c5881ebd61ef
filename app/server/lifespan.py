from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.i18n import TranslationRegistry
from infrastructure.logging.setup import configure_logging

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(settings=settings)


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


def _preload_translations(
    registry: TranslationRegistry, settings: "Settings", logger: BoundLogger
) -> None:
    if not settings.i18n.PRELOAD:
        logger.info("translations_preload_skipped", reason="lazy_loading")
        return

    registry.load()
    logger.info(
        "translations_preloaded",
        locales=registry.available_locales,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings: "Settings" = app.state.settings
    logger = _get_logger(settings)
    app.state.logger = logger

    logger.info("application_startup", environment=settings.APP_ENV)
    _list_configs(settings, logger)
    _preload_translations(app.state.translations, settings, logger)

    yield

    logger.info("application_shutdown")
