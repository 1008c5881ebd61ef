"""Process-wide translation registry.

The registry is constructed once by the application root and injected into
every component that translates. Dictionaries are loaded lazily on first use
and never reloaded afterwards.
"""

import threading
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Sequence

from infrastructure.i18n.loader import JSONTranslationLoader
from infrastructure.i18n.models import TranslationCatalog
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class TranslationRegistry:
    """Lazily loaded, immutable locale -> (key -> message) store.

    Lookup falls back from the requested locale to the default locale, and
    from a missing key to the key itself. Loading failures are logged and
    degrade to empty dictionaries; they never reach callers.

    Attributes:
        loader: JSONTranslationLoader used for the one-time load.
        default_locale: Locale used when the requested one is not loaded.
        locales: Locales to load (the default locale first).
    """

    def __init__(
        self,
        loader: JSONTranslationLoader,
        default_locale: str = "en",
        locales: Sequence[str] = ("en", "ar"),
    ):
        self.loader = loader
        self.default_locale = default_locale.lower()
        ordered = [self.default_locale] + [
            locale.lower() for locale in locales if locale.lower() != self.default_locale
        ]
        self.locales = tuple(ordered)
        self._catalogs: Dict[str, TranslationCatalog] = {}
        self._initialized = False
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._initialized

    def load(self) -> None:
        """Load dictionaries if that has not happened yet.

        Safe under concurrent first access: the "load, then mark initialised"
        sequence runs under a lock and at most once.
        """
        if self._initialized:
            return
        with self._lock:
            if self._initialized:
                return
            self._catalogs = self._load_catalogs()
            self._initialized = True

    def _load_catalogs(self) -> Dict[str, TranslationCatalog]:
        base_path = self.loader.locate()
        if base_path is None:
            return {locale: TranslationCatalog(locale=locale) for locale in self.locales}

        catalogs: Dict[str, TranslationCatalog] = {}
        for locale in self.locales:
            try:
                catalogs[locale] = self.loader.load(base_path, locale)
            except (OSError, ValueError) as exc:
                logger.error(
                    "translations_load_failed",
                    locale=locale,
                    error=str(exc),
                )
                if locale == self.default_locale:
                    catalogs[locale] = TranslationCatalog(locale=locale)

        logger.info(
            "translation_registry_initialized",
            locales=list(catalogs.keys()),
            default_locale=self.default_locale,
        )
        return catalogs

    def _catalog_for(self, lang: Optional[str]) -> Optional[TranslationCatalog]:
        self.load()
        language = (lang or self.default_locale).lower()
        return self._catalogs.get(language) or self._catalogs.get(self.default_locale)

    def translate(self, key: str, lang: Optional[str] = "en") -> str:
        """Resolve ``key`` to a message in ``lang``.

        Args:
            key: Dotted translation key (e.g. "auth.login.success").
            lang: Requested locale; unknown locales use the default locale.

        Returns:
            The translated message, or ``key`` itself when no dictionary has it.
        """
        catalog = self._catalog_for(lang)
        message = catalog.get_message(key) if catalog else None
        return message or key

    def get_translations(self, lang: Optional[str] = "en") -> Mapping[str, str]:
        """Return the full dictionary for ``lang`` (default-locale fallback).

        The returned mapping is read-only.
        """
        catalog = self._catalog_for(lang)
        return MappingProxyType(catalog.messages if catalog else {})

    def has_key(self, key: str, lang: Optional[str] = "en") -> bool:
        catalog = self._catalog_for(lang)
        return catalog.has_message(key) if catalog else False

    @property
    def available_locales(self) -> list[str]:
        """Locales whose dictionaries were loaded."""
        self.load()
        return list(self._catalogs.keys())
