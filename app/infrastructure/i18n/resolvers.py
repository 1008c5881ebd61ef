"""Request language resolution.

By default the language is the raw value of the ``Accept-Language`` header
(or "en"); unknown values are left for the registry's fallback to handle.
Quality-value negotiation is available as an opt-in.
"""

from typing import Any, Optional, Sequence

import structlog

logger = structlog.get_logger().bind(component="i18n.resolver")


class LanguageResolver:
    """Resolves the target locale of a request.

    Attributes:
        default_locale: Locale returned when the header is absent or empty.
        header_name: Request header carrying the locale.
        supported_locales: Locales accepted by negotiation.
        negotiate: Whether ``resolve`` parses the header instead of returning it raw.
    """

    def __init__(
        self,
        default_locale: str = "en",
        header_name: str = "accept-language",
        supported_locales: Sequence[str] = ("en", "ar"),
        negotiate: bool = False,
    ):
        self.default_locale = default_locale
        self.header_name = header_name
        self.supported_locales = tuple(locale.lower() for locale in supported_locales)
        self.negotiate = negotiate

    def resolve(self, request: Any) -> str:
        """Return the request's locale.

        Args:
            request: Anything exposing a ``headers`` mapping (Starlette Request).

        Returns:
            The raw header value if present and non-empty, else the default
            locale. With negotiation enabled, the best supported base language.
        """
        value = request.headers.get(self.header_name)
        if self.negotiate:
            return self.negotiate_header(value)
        if value and value.strip():
            return value
        return self.default_locale

    def negotiate_header(self, accept_language: Optional[str]) -> str:
        """Pick the best supported language from an Accept-Language value.

        "en-US,en;q=0.9,ar;q=0.8" is split into ranges, ordered by quality,
        reduced to base languages ("en-US" -> "en"), and the first supported
        one wins.

        Args:
            accept_language: Accept-Language header value.

        Returns:
            A supported locale, or the default locale if none match.
        """
        if not accept_language:
            return self.default_locale

        preferences = []
        for part in accept_language.split(","):
            pieces = part.strip().split(";")
            code = pieces[0].strip().lower().split("-")[0]
            quality = 1.0
            for param in pieces[1:]:
                name, _, raw = param.strip().partition("=")
                if name == "q":
                    try:
                        quality = float(raw)
                    except ValueError:
                        quality = 1.0
            if code:
                preferences.append((code, quality))

        # sorted() is stable, so equal qualities keep header order
        for code, _ in sorted(preferences, key=lambda p: p[1], reverse=True):
            if code in self.supported_locales:
                return code

        logger.debug(
            "no_matching_locale_in_header",
            header=accept_language,
            default=self.default_locale,
        )
        return self.default_locale
