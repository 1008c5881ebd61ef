"""Translation catalogue endpoints.

Read-only views of the loaded dictionaries, used by the admin front end to
render labels and by operators to audit coverage between locales.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Query

from infrastructure.responses import PaginationParams, SortOrder
from infrastructure.services import LangDep, ResponsesDep, TranslationsDep
from server.routing import EnvelopeRoute

logger = structlog.get_logger()

router = APIRouter(prefix="/i18n", tags=["I18n"], route_class=EnvelopeRoute)


@router.get("/locales")
def list_locales(lang: LangDep, responses: ResponsesDep, translations: TranslationsDep):
    """List the locales whose dictionaries are loaded."""
    return responses.success(
        translations.available_locales, "i18n.locales.success", lang
    )


@router.get("/translations")
def get_translations(
    lang: LangDep, responses: ResponsesDep, translations: TranslationsDep
):
    """Return the full dictionary for the request language."""
    return responses.success_single(
        dict(translations.get_translations(lang)),
        "i18n.translations.success",
        lang,
        wrap=False,
    )


@router.get("/keys")
def list_keys(
    params: Annotated[PaginationParams, Query()],
    lang: LangDep,
    responses: ResponsesDep,
    translations: TranslationsDep,
):
    """Page through ``{key, value}`` entries of the request language.

    ``search`` matches keys and values case-insensitively; entries are
    ordered by key.
    """
    entries = [
        {"key": key, "value": value}
        for key, value in translations.get_translations(lang).items()
    ]
    if params.search:
        needle = params.search.lower()
        entries = [
            entry
            for entry in entries
            if needle in entry["key"].lower() or needle in entry["value"].lower()
        ]
    entries.sort(key=lambda entry: entry["key"], reverse=params.sort_order == SortOrder.DESC)

    page = entries[params.offset : params.offset + params.limit]
    logger.debug(
        "translation_keys_listed",
        lang=lang,
        total=len(entries),
        page=params.page,
        search=params.search,
    )
    return responses.success_list(
        page, len(entries), params.page, params.limit, "i18n.keys.success", lang
    )
