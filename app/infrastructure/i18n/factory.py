"""Factory functions for creating i18n components from settings."""

from pathlib import Path
from typing import Optional, Sequence

from infrastructure.configuration import I18nSettings
from infrastructure.i18n.loader import JSONTranslationLoader
from infrastructure.i18n.registry import TranslationRegistry
from infrastructure.i18n.resolvers import LanguageResolver


def default_candidate_dirs(translations_dir: Optional[str] = None) -> list[Path]:
    """Ordered directories searched for ``<locale>.json``.

    1. The configured directory, if any
    2. ``locales/`` shipped inside this package
    """
    candidates: list[Path] = []
    if translations_dir:
        candidates.append(Path(translations_dir))

    candidates.append(Path(__file__).resolve().parent / "locales")
    return candidates


def create_translation_registry(
    settings: Optional[I18nSettings] = None,
    candidate_dirs: Optional[Sequence[Path]] = None,
) -> TranslationRegistry:
    """Create a TranslationRegistry configured from i18n settings.

    Args:
        settings: i18n settings (loaded from the environment if omitted).
        candidate_dirs: Explicit search path, overriding the defaults.

    Returns:
        TranslationRegistry: not yet loaded; it loads on first use.
    """
    settings = settings or I18nSettings()
    dirs = (
        list(candidate_dirs)
        if candidate_dirs is not None
        else default_candidate_dirs(settings.TRANSLATIONS_DIR)
    )
    loader = JSONTranslationLoader(dirs, base_locale=settings.DEFAULT_LOCALE)
    return TranslationRegistry(
        loader=loader,
        default_locale=settings.DEFAULT_LOCALE,
        locales=settings.SUPPORTED_LOCALES,
    )


def create_language_resolver(settings: Optional[I18nSettings] = None) -> LanguageResolver:
    """Create a LanguageResolver configured from i18n settings."""
    settings = settings or I18nSettings()
    return LanguageResolver(
        default_locale=settings.DEFAULT_LOCALE,
        header_name=settings.LANGUAGE_HEADER,
        supported_locales=settings.SUPPORTED_LOCALES,
        negotiate=settings.NEGOTIATE,
    )
