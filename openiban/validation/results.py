"""Validation outcomes.

A validation run produces one :class:`ValidationResult`. A failed run carries
exactly one :class:`ErrorResult` describing the first rule that rejected the
value. Error results hold only the data needed to render a message; the
message itself is rendered on demand for an explicit locale.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from openiban.i18n.catalog import MessageCatalog, get_default_catalog


@dataclass(frozen=True)
class ErrorResult:
    """Base class of all validation errors."""

    code: ClassVar[str] = "error"
    message_id: ClassVar[str | None] = None

    def variables(self) -> dict[str, Any]:
        """Variables interpolated into the localized message."""
        return {}

    def render(self, locale: str | None = None, catalog: MessageCatalog | None = None) -> str:
        """Render the error message.

        Args:
            locale: Locale tag (e.g., "de"); None selects the default locale
            catalog: Message catalog; defaults to the bundled Fluent catalog

        Returns:
            Localized, human-readable message
        """
        if self.message_id is None:
            return self.code
        catalog = catalog or get_default_catalog()
        return catalog.resolve(self.message_id, locale, **self.variables())

    @property
    def error_message(self) -> str:
        """Message in the default locale."""
        return self.render()


@dataclass(frozen=True)
class IllegalCharactersResult(ErrorResult):
    """The value contains characters outside ``[A-Z0-9]``."""

    code: ClassVar[str] = "illegal_characters"
    message_id: ClassVar[str | None] = "iban-illegal-characters"


@dataclass(frozen=True)
class InvalidCountryCodeResult(ErrorResult):
    """The country code is unknown to the registry."""

    code: ClassVar[str] = "invalid_country_code"
    message_id: ClassVar[str | None] = "iban-invalid-country-code"


@dataclass(frozen=True)
class InvalidLengthResult(ErrorResult):
    """The value does not have the fixed length of its country."""

    expected: int
    actual: int

    code: ClassVar[str] = "invalid_length"
    message_id: ClassVar[str | None] = "iban-invalid-length"

    def variables(self) -> dict[str, Any]:
        return {"expected": self.expected, "actual": self.actual}


@dataclass(frozen=True)
class InvalidStructureResult(ErrorResult):
    """The check digits or BBAN do not follow the country structure."""

    code: ClassVar[str] = "invalid_structure"
    message_id: ClassVar[str | None] = "iban-invalid-structure"


@dataclass(frozen=True)
class InvalidChecksumResult(ErrorResult):
    """The MOD-97 checksum does not yield 1."""

    code: ClassVar[str] = "invalid_checksum"
    message_id: ClassVar[str | None] = "iban-invalid-checksum"


@dataclass(frozen=True)
class CountryNotAcceptedResult(ErrorResult):
    """The country is excluded by an accept/reject country rule."""

    country_code: str

    code: ClassVar[str] = "country_not_accepted"
    message_id: ClassVar[str | None] = "iban-country-not-accepted"

    def variables(self) -> dict[str, Any]:
        return {"country": self.country_code}


@dataclass(frozen=True)
class CustomErrorResult(ErrorResult):
    """Failure reported by a caller-supplied rule, with its own message."""

    message: str

    code: ClassVar[str] = "custom"

    def render(self, locale: str | None = None, catalog: MessageCatalog | None = None) -> str:
        return self.message


@dataclass(frozen=True)
class RuleFaultResult(ErrorResult):
    """A caller-supplied rule raised instead of returning an outcome.

    This is an extension defect rather than a data error, so the exception is
    kept for the caller and the message stays generic.
    """

    attempted_value: str
    exception: Exception

    code: ClassVar[str] = "rule_fault"
    message_id: ClassVar[str | None] = "iban-not-valid"

    def variables(self) -> dict[str, Any]:
        return {"value": self.attempted_value}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one value.

    Attributes:
        attempted_value: The normalized value that was validated
        error: The first failure, or None when every rule passed
    """

    attempted_value: str
    error: ErrorResult | None = None

    @property
    def is_valid(self) -> bool:
        """Whether every rule passed."""
        return self.error is None

    def to_dict(self, locale: str | None = None) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        data: dict[str, Any] = {
            "value": self.attempted_value,
            "valid": self.is_valid,
        }
        if self.error is not None:
            data["error"] = self.error.code
            data["message"] = self.error.render(locale)
            data.update(
                {key: value for key, value in self.error.variables().items() if key != "value"}
            )
        return data
