"""Response envelope builder.

Handlers build their responses here rather than returning raw payloads:

    return responses.success_single(project, "projects.findOne.success", lang)
    return responses.success_list(rows, total, params.page, params.limit,
                                  "projects.findAll.success", lang)

Messages may be translation keys or literal text; see ``is_translation_key``.
"""

from datetime import datetime, timezone
from typing import Any, Optional, Sequence

from infrastructure.i18n import TranslationRegistry
from infrastructure.models import (
    ArrayDataWithMeta,
    PaginationMeta,
    ResponseStatus,
    SingleItemData,
    StandardResponse,
)
from infrastructure.responses.pagination import build_pagination_meta

DEFAULT_SUCCESS_KEY = "common.success"


def utc_timestamp() -> str:
    """Current instant as ISO-8601 UTC with milliseconds, e.g. 2026-01-01T12:00:00.000Z."""
    return (
        datetime.now(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def is_translation_key(message: str) -> bool:
    """Whether ``message`` looks like a dotted translation key.

    A key contains a dot and no space. "auth.login.success" is a key;
    "User not found" and "Saved. Thank you" are not.
    """
    return "." in message and " " not in message


class ResponseBuilder:
    """Builds StandardResponse envelopes, translating messages on the way.

    Attributes:
        registry: TranslationRegistry used for message resolution.
    """

    def __init__(self, registry: TranslationRegistry):
        self.registry = registry

    def resolve_message(self, message: Optional[str], lang: str) -> str:
        """Translate ``message`` if it looks like a key, else pass it through.

        A translation is kept only if it differs from the input; an unknown
        key is returned unchanged.
        """
        if message is None:
            message = DEFAULT_SUCCESS_KEY
        if not is_translation_key(message):
            return message
        translated = self.registry.translate(message, lang)
        return translated if translated != message else message

    def _envelope(
        self, status: ResponseStatus, message: Optional[str], lang: str, data: Any
    ) -> StandardResponse:
        return StandardResponse(
            status=status,
            message=self.resolve_message(message, lang),
            lang=lang,
            timestamp=utc_timestamp(),
            data=data,
        )

    def success_single(
        self,
        data: Any,
        message: Optional[str] = None,
        lang: str = "en",
        wrap: bool = True,
    ) -> StandardResponse:
        """Envelope for a single resource.

        Args:
            data: Payload; None yields ``data: null``.
            message: Translation key or literal text.
            lang: Response locale.
            wrap: Nest the payload as ``{"data": payload}``. Pass False for
                payloads that are already structured (e.g. ``{user, tokens}``).
        """
        if data is None:
            return self._envelope(ResponseStatus.SUCCESS, message, lang, None)
        payload = SingleItemData(data=data) if wrap else data
        return self._envelope(ResponseStatus.SUCCESS, message, lang, payload)

    def success_list(
        self,
        items: Sequence[Any],
        total: int,
        page: int,
        limit: int,
        message: Optional[str] = None,
        lang: str = "en",
    ) -> StandardResponse:
        """Envelope for a page of a list: ``data: {data: [...], meta: {...}}``.

        Raises:
            ValueError: If ``limit`` is below 1.
        """
        meta = build_pagination_meta(total=total, page=page, limit=limit)
        payload = ArrayDataWithMeta(data=list(items), meta=meta)
        return self._envelope(ResponseStatus.SUCCESS, message, lang, payload)

    def success(
        self,
        data: Any = None,
        message: Optional[str] = None,
        lang: str = "en",
    ) -> StandardResponse:
        """Dispatch on the payload shape.

        None gives an empty success; a list or tuple gives a single page
        holding every item; anything else is a wrapped single item.
        """
        if data is None:
            return self._envelope(ResponseStatus.SUCCESS, message, lang, None)
        if isinstance(data, (list, tuple)):
            items = list(data)
            meta = PaginationMeta(
                page=1,
                total=len(items),
                limit=len(items),
                total_pages=1,
                is_next_page=False,
                is_prev_page=False,
            )
            payload = ArrayDataWithMeta(data=items, meta=meta)
            return self._envelope(ResponseStatus.SUCCESS, message, lang, payload)
        return self.success_single(data, message, lang)

    def error(self, message: str, lang: str = "en") -> StandardResponse:
        """Error envelope; ``data`` is always null."""
        return self._envelope(ResponseStatus.ERROR, message, lang, None)
