"""Per-call state shared by the rules of one validation run."""

from __future__ import annotations

from openiban.registry.models import IbanCountry


class ValidationRuleContext:
    """Context handed to every rule of a validation run.

    Attributes:
        value: Normalized attempted value (uppercase, no whitespace); read-only
        country: Country definition, set once the country code rule passed
    """

    __slots__ = ("_value", "country")

    def __init__(self, value: str, country: IbanCountry | None = None) -> None:
        self._value = value
        self.country = country

    @property
    def value(self) -> str:
        return self._value

    @property
    def country_code(self) -> str:
        """First two characters of the value (may be shorter for short input)."""
        return self._value[:2]

    def __repr__(self) -> str:
        country = self.country.code if self.country else None
        return f"{self.__class__.__name__}(value={self._value!r}, country={country!r})"
