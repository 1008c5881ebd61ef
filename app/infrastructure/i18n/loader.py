"""Translation file discovery and loading.

Dictionaries are JSON files named ``<locale>.json``. The loader searches an
ordered list of candidate directories so the same code works when run from
the source tree and from an installed or packaged layout.
"""

import json
from pathlib import Path
from typing import Optional, Sequence

import structlog

from infrastructure.i18n.models import TranslationCatalog, flatten_messages

logger = structlog.get_logger().bind(component="i18n.loader")


class JSONTranslationLoader:
    """Loader for JSON translation dictionaries.

    Attributes:
        candidate_dirs: Directories searched in order for the base dictionary.
        base_locale: Locale whose file decides which candidate wins.
    """

    def __init__(self, candidate_dirs: Sequence[Path], base_locale: str = "en"):
        self.candidate_dirs = [Path(d) for d in candidate_dirs]
        self.base_locale = base_locale.lower()

    def locate(self) -> Optional[Path]:
        """Return the base dictionary of the first candidate that has one.

        Returns:
            Path to ``<base_locale>.json``, or None if no candidate contains it.
        """
        for directory in self.candidate_dirs:
            path = directory / f"{self.base_locale}.json"
            if path.is_file():
                logger.info("translations_located", path=str(path))
                return path

        logger.warning(
            "translations_not_found",
            candidates=[str(d) for d in self.candidate_dirs],
        )
        return None

    @staticmethod
    def path_for(base_path: Path, locale: str) -> Path:
        """Derive a locale's dictionary path from the base dictionary path."""
        return base_path.with_name(f"{locale.lower()}.json")

    def load(self, base_path: Path, locale: str) -> TranslationCatalog:
        """Load the dictionary of ``locale`` next to ``base_path``.

        Args:
            base_path: Path of the located base dictionary.
            locale: Locale to load.

        Returns:
            TranslationCatalog with flattened messages.

        Raises:
            FileNotFoundError: If the locale's file does not exist.
            ValueError: If the file is not a JSON object.
        """
        path = self.path_for(base_path, locale)
        if not path.is_file():
            raise FileNotFoundError(f"No translation file for locale {locale}: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Failed to parse {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Translation file {path} must contain a JSON object")

        catalog = TranslationCatalog(
            locale=locale.lower(),
            messages=flatten_messages(data),
            source=str(path),
        )
        logger.info(
            "translations_loaded",
            locale=catalog.locale,
            path=str(path),
            key_count=len(catalog.messages),
        )
        return catalog
