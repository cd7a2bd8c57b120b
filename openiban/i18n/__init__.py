"""Internationalization (i18n) for validation messages.

Messages are Mozilla Fluent resources, one directory per locale.

Supported languages: EN (English - default), DE (German), IT (Italian),
FR (French), ES (Spanish)

Usage:
    from openiban.i18n import _

    message = _("iban-invalid-length", locale="de")
"""

from openiban.i18n.catalog import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    FluentMessageCatalog,
    MessageCatalog,
    _,
    get_default_catalog,
    normalize_locale,
)

__all__ = [
    "_",
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
    "FluentMessageCatalog",
    "MessageCatalog",
    "get_default_catalog",
    "normalize_locale",
]
