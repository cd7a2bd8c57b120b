"""Fluent-backed message catalog for validation messages.

Loads Fluent Translation List (.ftl) files from ``locales/<locale>/`` and
resolves message ids for an explicitly given locale. There is no ambient
"current locale": callers pass the locale they want on every call.
"""

from __future__ import annotations

import threading
from functools import lru_cache
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from fluent.runtime import FluentBundle, FluentResource

from openiban.utils.logging import get_logger

logger = get_logger(__name__)

SUPPORTED_LOCALES = ("en", "de", "it", "fr", "es")
DEFAULT_LOCALE = "en"


def get_locales_dir() -> Path:
    """Get the locales directory path."""
    return Path(__file__).parent / "locales"


def normalize_locale(locale: str | None) -> str:
    """Reduce a locale tag to a supported language code.

    ``"de-CH"`` and ``"de_AT"`` both become ``"de"``; unknown or missing
    locales become the default locale.
    """
    if not locale:
        return DEFAULT_LOCALE
    language = locale.replace("_", "-").split("-", 1)[0].lower()
    return language if language in SUPPORTED_LOCALES else DEFAULT_LOCALE


@runtime_checkable
class MessageCatalog(Protocol):
    """Resolves a message id to a localized string."""

    def resolve(self, message_id: str, locale: str | None = None, **variables: Any) -> str:
        """Render ``message_id`` for ``locale`` with optional variables."""
        ...


class FluentMessageCatalog:
    """Message catalog reading Fluent bundles from disk.

    Bundles are loaded lazily, once per locale, and cached for the lifetime
    of the catalog.

    Fallback behavior:
        1. Try the requested locale
        2. Try the default locale (en)
        3. Return the message id
    """

    def __init__(self, locales_dir: Path | None = None) -> None:
        self.locales_dir = locales_dir or get_locales_dir()
        self._bundles: dict[str, FluentBundle] = {}
        self._lock = threading.Lock()

    def _load_bundle(self, locale: str) -> FluentBundle:
        # Bidi isolation marks would leak into exception messages
        bundle = FluentBundle([locale], use_isolating=False)

        locale_dir = self.locales_dir / locale
        ftl_files = sorted(locale_dir.glob("*.ftl"))
        if not ftl_files:
            logger.warning("no_translation_files", locale=locale, directory=str(locale_dir))
            return bundle

        for ftl_file in ftl_files:
            bundle.add_resource(FluentResource(ftl_file.read_text(encoding="utf-8")))

        logger.debug("fluent_bundle_loaded", locale=locale, files=len(ftl_files))
        return bundle

    def get_bundle(self, locale: str) -> FluentBundle:
        """Get the cached bundle for a supported locale."""
        bundle = self._bundles.get(locale)
        if bundle is None:
            with self._lock:
                bundle = self._bundles.get(locale)
                if bundle is None:
                    bundle = self._load_bundle(locale)
                    self._bundles[locale] = bundle
        return bundle

    def _format(self, locale: str, message_id: str, variables: dict[str, Any]) -> str | None:
        bundle = self.get_bundle(locale)
        if not bundle.has_message(message_id):
            return None

        message = bundle.get_message(message_id)
        if message.value is None:
            return None

        formatted, errors = bundle.format_pattern(message.value, variables)
        if errors:
            logger.warning(
                "message_format_errors",
                message_id=message_id,
                locale=locale,
                errors=[str(error) for error in errors],
            )
        return formatted

    def resolve(self, message_id: str, locale: str | None = None, **variables: Any) -> str:
        """Render a message.

        Args:
            message_id: Fluent message id (e.g., "iban-invalid-length")
            locale: Locale tag; None selects the default locale
            **variables: Variables for message interpolation

        Returns:
            Localized message, or the message id when no translation exists
        """
        requested = normalize_locale(locale)
        candidates = [requested] if requested == DEFAULT_LOCALE else [requested, DEFAULT_LOCALE]

        for candidate in candidates:
            result = self._format(candidate, message_id, variables)
            if result is not None:
                return result

        logger.warning("translation_not_found", message_id=message_id, locale=requested)
        return message_id


@lru_cache(maxsize=1)
def get_default_catalog() -> FluentMessageCatalog:
    """Get the shared catalog reading the bundled locales."""
    return FluentMessageCatalog()


def _(message_id: str, locale: str | None = None, **variables: Any) -> str:
    """Translate a message with the default catalog.

    Examples:
        >>> _("iban-invalid-length", locale="de")
        'Der IBAN hat eine falsche Länge.'
    """
    return get_default_catalog().resolve(message_id, locale, **variables)
