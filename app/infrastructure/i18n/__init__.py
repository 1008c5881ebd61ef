"""i18n system - translation dictionaries and request language resolution.

Main components:
- models: TranslationCatalog and nested-dictionary flattening
- loader: JSONTranslationLoader (candidate directory search)
- registry: TranslationRegistry (lazy, lock-guarded, immutable after load)
- resolvers: LanguageResolver (Accept-Language header)
- factory: builders wired from I18nSettings
"""

from infrastructure.i18n.factory import (
    create_language_resolver,
    create_translation_registry,
    default_candidate_dirs,
)
from infrastructure.i18n.loader import JSONTranslationLoader
from infrastructure.i18n.models import TranslationCatalog, flatten_messages
from infrastructure.i18n.registry import TranslationRegistry
from infrastructure.i18n.resolvers import LanguageResolver

__all__ = [
    "TranslationCatalog",
    "flatten_messages",
    "JSONTranslationLoader",
    "TranslationRegistry",
    "LanguageResolver",
    "create_translation_registry",
    "create_language_resolver",
    "default_candidate_dirs",
]
